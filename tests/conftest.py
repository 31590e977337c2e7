# tests/conftest.py
import pytest
from fastapi.testclient import TestClient
import os
import sys
import logging
from unittest.mock import MagicMock

# Configure logging for tests
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from trivia_proxy.services import trivia_service as trivia_service_module

# --- Sample upstream records ---
_BOOLEAN_RESULT = {
    "type": "boolean",
    "difficulty": "easy",
    "category": "Science &amp; Nature",
    "question": "The &quot;Sun&quot; is a star &amp; it&#039;s hot.",
    "correct_answer": "True",
    "incorrect_answers": ["False"],
}

_MULTIPLE_RESULT = {
    "type": "multiple",
    "difficulty": "medium",
    "category": "Entertainment: Video Games",
    "question": "Which of these is &lt;b&gt;not&lt;/b&gt; a &quot;Pokemon&quot; type?",
    "correct_answer": "Sound",
    "incorrect_answers": ["Fire", "Water &amp; Ice", "Dragon&#039;s"],
}

@pytest.fixture
def boolean_result():
    return dict(_BOOLEAN_RESULT)

@pytest.fixture
def multiple_result():
    return dict(_MULTIPLE_RESULT, incorrect_answers=list(_MULTIPLE_RESULT["incorrect_answers"]))

@pytest.fixture(scope="session")
def client():
    from trivia_proxy.main import app
    logger.info("Creating TestClient instance for the session.")
    with TestClient(app) as c:
        yield c

@pytest.fixture
def mock_upstream(monkeypatch):
    """
    Replaces requests.get inside the trivia service. Call the returned function
    with a JSON payload, or with `exc=` to make the upstream call raise.
    The underlying MagicMock is returned so tests can inspect the call.
    """
    mock_get = MagicMock()
    monkeypatch.setattr(trivia_service_module.requests, "get", mock_get)

    def configure(payload=None, exc=None, json_exc=None):
        if exc is not None:
            mock_get.side_effect = exc
        else:
            response = MagicMock()
            response.status_code = 200
            if json_exc is not None:
                response.json.side_effect = json_exc
            else:
                response.json.return_value = payload
            mock_get.return_value = response
        return mock_get

    return configure
