# trivia_proxy/utils/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

from trivia_proxy.models.trivia import FallbackQuestion

# Load .env file before defining settings
load_dotenv()

class Settings(BaseSettings):
    model_config = SettingsConfigDict(extra="ignore")

    # --- Upstream provider ---
    upstream_url: str = "https://opentdb.com/api.php"
    upstream_timeout_seconds: float | None = None # None leaves it to the network stack

    # Applied when the query string omits a parameter
    default_question_type: str = "boolean"
    default_difficulty: str = "easy"

    # --- CORS ---
    cors_allow_origin: str = "http://localhost:5173"
    cors_allow_methods: str = "GET,OPTIONS"
    cors_allow_headers: str = "Content-Type, Authorization"

    # --- Fallback questions (override with JSON in the environment) ---
    fallback_boolean: FallbackQuestion = FallbackQuestion(
        id="fb-1",
        type="boolean",
        question="The sky is blue.",
        choices=["True", "False"],
        correct_answer="True",
        category="Science",
    )
    fallback_multiple: FallbackQuestion = FallbackQuestion(
        id="fb-2",
        type="multiple",
        question="What is 2 + 2?",
        choices=["3", "4", "5", "22"],
        correct_answer="4",
        category="Mathematics",
    )
    fallback_network_error: FallbackQuestion = FallbackQuestion(
        id="fb-x",
        type="boolean",
        question="Fallback question (network error). True?",
        choices=["True", "False"],
        correct_answer="True",
        category="General",
    )

    # --- Server (python -m trivia_proxy.main) ---
    host: str = "0.0.0.0"
    port: int = 8000

    # --- Logging ---
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_file: str | None = None

settings = Settings()
