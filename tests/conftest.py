"""
Pytest fixtures for Care Companion tests.
"""
import sys
from pathlib import Path
from typing import Optional

import pytest
from fastapi.testclient import TestClient

# Ensure the project root and src/ are importable without installing.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
for path in (ROOT, SRC):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from server.care_api.config import Settings
from server.care_api.dependencies import get_care_ai
from server.care_api.main import create_app
from server.care_api.services.genai import AIServiceError, SpeechClip


# ============================================================================
# AI Provider Stub
# ============================================================================

class StubCareAI:
    """In-process CareAI that records calls and returns canned results."""

    def __init__(self, fail_with: Optional[AIServiceError] = None):
        self.fail_with = fail_with
        self.skin_calls = []
        self.speech_calls = []

    async def analyze_skin(self, image: bytes, mime_type: str, answers: str) -> str:
        self.skin_calls.append((image, mime_type, answers))
        if self.fail_with:
            raise self.fail_with
        return "Mild dryness. Use a gentle cleanser and a non-comedogenic moisturizer."

    async def synthesize_speech(self, text: str) -> SpeechClip:
        self.speech_calls.append(text)
        if self.fail_with:
            raise self.fail_with
        return SpeechClip(audio_base64="UklGRg==", mime_type="audio/wav")


# ============================================================================
# Application Fixtures
# ============================================================================

@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a throwaway data directory."""
    return Settings(
        data_path=str(tmp_path),
        jwt_secret="test-secret",
        gemini_api_key=None,
        max_upload_mb=1,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """TestClient with the app lifespan run, so the schema exists."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def ai_stub(app):
    """Replace the AI provider with StubCareAI for the test."""
    stub = StubCareAI()
    app.dependency_overrides[get_care_ai] = lambda: stub
    yield stub
    app.dependency_overrides.pop(get_care_ai, None)


def register_user(client, name="Asha", email="asha@example.com", password="secret123") -> dict:
    """Register a user and return the response body."""
    response = client.post(
        "/api/auth/register",
        json={"name": name, "email": email, "password": password},
    )
    assert response.status_code == 200, response.text
    return response.json()


@pytest.fixture
def auth_headers(client):
    """Authorization header for a freshly registered user."""
    body = register_user(client)
    return {"Authorization": f"Bearer {body['token']}"}


@pytest.fixture
def other_auth_headers(client):
    """Authorization header for a second, unrelated user."""
    body = register_user(client, name="Ravi", email="ravi@example.com")
    return {"Authorization": f"Bearer {body['token']}"}
