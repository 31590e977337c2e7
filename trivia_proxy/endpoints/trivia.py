# Endpoint proxying the upstream trivia provider
# trivia_proxy/endpoints/trivia.py
from fastapi import APIRouter, Query, Request, Response

from trivia_proxy.models.enums import Difficulty, QuestionType
from trivia_proxy.models.trivia import TriviaQuestion
from trivia_proxy.services.trivia_service import trivia_service
from trivia_proxy.utils.config import settings
from trivia_proxy.utils.logger import logger

router = APIRouter()

def _first_query_value(request: Request, name: str, default: str) -> str:
    # Starlette binds the last of a repeated parameter; the first one wins here.
    values = request.query_params.getlist(name)
    return values[0] if values else default

# Plain `def`: FastAPI runs it in the threadpool, so the blocking upstream call is fine.
@router.get("", response_model=TriviaQuestion)
def get_trivia_question(
    request: Request,
    question_type: str = Query(
        settings.default_question_type, alias="type",
        description=f"One of {[t.value for t in QuestionType]}; other values are forwarded as-is.",
    ),
    difficulty: str = Query(
        settings.default_difficulty,
        description=f"One of {[d.value for d in Difficulty]}; other values are forwarded as-is.",
    ),
):
    question_type = _first_query_value(request, "type", question_type)
    difficulty = _first_query_value(request, "difficulty", difficulty)
    logger.info(f"Trivia question requested: type='{question_type}', difficulty='{difficulty}'")
    return trivia_service.get_question(question_type, difficulty)

@router.options("")
async def trivia_preflight():
    """Browser preflight; CORS headers are added by the app middleware."""
    return Response(status_code=200)
