# trivia_proxy/services/trivia_service.py
import random
import uuid
from typing import Any, Optional

import requests

from trivia_proxy.models.enums import QuestionType
from trivia_proxy.models.trivia import FallbackQuestion, TriviaQuestion, UpstreamQuestion
from trivia_proxy.services.text_utils import decode_html_entities, fisher_yates_shuffle
from trivia_proxy.utils.config import settings
from trivia_proxy.utils.logger import logger

BOOLEAN_CHOICES = ["True", "False"]

# Every call is a fresh fetch; ask intermediaries not to serve a stored copy.
NO_CACHE_HEADERS = {"Cache-Control": "no-cache", "Pragma": "no-cache"}

class TriviaService:
    def __init__(self, upstream_url: str, fallback_boolean: FallbackQuestion,
                 fallback_multiple: FallbackQuestion, fallback_network_error: FallbackQuestion,
                 timeout: Optional[float] = None, rng: Optional[random.Random] = None):
        self.upstream_url = upstream_url
        self.fallback_boolean = fallback_boolean
        self.fallback_multiple = fallback_multiple
        self.fallback_network_error = fallback_network_error
        self.timeout = timeout
        self.rng = rng
        logger.info(f"TriviaService initialized with upstream {upstream_url} (timeout={timeout})")

    def get_question(self, question_type: str, difficulty: str) -> TriviaQuestion:
        """
        Fetches one question from the upstream provider and normalizes it.
        Never raises: every failure is answered with one of the fallback questions.
        """
        try:
            data = self._fetch(question_type, difficulty)
            if not self._is_usable_payload(data):
                logger.warning(
                    f"Upstream returned no usable question for type='{question_type}', "
                    f"difficulty='{difficulty}' (response_code={self._response_code(data)})"
                )
                return self._fallback_for_type(question_type).with_difficulty(difficulty)

            record = UpstreamQuestion.model_validate(data["results"][0])
            return self.normalize(record)
        except Exception as e:
            logger.exception(f"Error fetching trivia question from upstream: {e}")
            return self.fallback_network_error.with_difficulty(difficulty)

    def _fetch(self, question_type: str, difficulty: str) -> Any:
        params = {"amount": 1, "type": question_type, "difficulty": difficulty}
        logger.debug(f"Requesting {self.upstream_url} with params {params}")
        response = requests.get(self.upstream_url, params=params, headers=NO_CACHE_HEADERS, timeout=self.timeout)
        # Status codes are not checked; the payload's response_code decides.
        return response.json()

    @staticmethod
    def _is_usable_payload(data: Any) -> bool:
        if not isinstance(data, dict):
            return False
        code = data.get("response_code")
        # JSON booleans compare equal to 0 in Python; only a real number counts
        if isinstance(code, bool) or not isinstance(code, (int, float)) or code != 0:
            return False
        return bool(data.get("results"))

    @staticmethod
    def _response_code(data: Any) -> Any:
        return data.get("response_code") if isinstance(data, dict) else None

    def _fallback_for_type(self, question_type: str) -> FallbackQuestion:
        if question_type == QuestionType.BOOLEAN.value:
            return self.fallback_boolean
        return self.fallback_multiple

    def normalize(self, record: UpstreamQuestion) -> TriviaQuestion:
        """Reshapes an upstream record into a TriviaQuestion."""
        question = decode_html_entities(record.question)
        correct = decode_html_entities(record.correct_answer)
        incorrect = [decode_html_entities(answer) for answer in record.incorrect_answers]

        if record.type == QuestionType.BOOLEAN.value:
            return TriviaQuestion(
                id=str(uuid.uuid4()),
                type=QuestionType.BOOLEAN,
                difficulty=record.difficulty,
                question=question,
                choices=list(BOOLEAN_CHOICES),
                correct_answer="True" if correct == "True" else "False",
                category=record.category,
            )

        return TriviaQuestion(
            id=str(uuid.uuid4()),
            type=QuestionType.MULTIPLE,
            difficulty=record.difficulty,
            question=question,
            choices=fisher_yates_shuffle([correct] + incorrect, self.rng),
            correct_answer=correct,
            category=record.category,
        )

trivia_service = TriviaService(
    upstream_url=settings.upstream_url,
    fallback_boolean=settings.fallback_boolean,
    fallback_multiple=settings.fallback_multiple,
    fallback_network_error=settings.fallback_network_error,
    timeout=settings.upstream_timeout_seconds,
)
