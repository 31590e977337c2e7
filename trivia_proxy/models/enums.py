# trivia_proxy/models/enums.py
from enum import Enum

class QuestionType(str, Enum):
    """Question formats offered by the upstream provider."""
    BOOLEAN = "boolean"
    MULTIPLE = "multiple"

class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
