# Data models for normalized trivia questions and the raw upstream payload
# trivia_proxy/models/trivia.py
from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import List

from trivia_proxy.models.enums import QuestionType

class FallbackQuestion(BaseModel):
    """A fixed question served when the upstream provider cannot be used.

    Difficulty is not part of the template; it is bound to whatever the
    caller asked for when the fallback is served.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    type: QuestionType
    question: str
    choices: List[str]
    correct_answer: str = Field(alias="correctAnswer")
    category: str

    @model_validator(mode="after")
    def check_answer_in_choices(self):
        if self.correct_answer not in self.choices:
            raise ValueError(f"correctAnswer '{self.correct_answer}' is not one of the choices {self.choices}")
        return self

    def with_difficulty(self, difficulty: str) -> "TriviaQuestion":
        return TriviaQuestion(
            id=self.id,
            type=self.type,
            difficulty=difficulty,
            question=self.question,
            choices=list(self.choices),
            correct_answer=self.correct_answer,
            category=self.category,
        )

class TriviaQuestion(FallbackQuestion):
    # Echoes the request verbatim on fallbacks, so it is not restricted to Difficulty
    difficulty: str

class UpstreamQuestion(BaseModel):
    """One record of the upstream `results` array, entities still encoded."""
    type: str
    difficulty: str
    question: str
    correct_answer: str
    incorrect_answers: List[str] = []
    category: str
