"""FastAPI dependencies: settings, database connection, caller session, AI provider."""
import sqlite3
from typing import Generator, Optional

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import Settings
from .security import InvalidTokenError, UserSession, decode_access_token
from .services.genai import CareAI, GeminiCareAI

bearer_scheme = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_db(request: Request) -> Generator[sqlite3.Connection, None, None]:
    """Per-request connection; committed when the handler returns."""
    with request.app.state.db.connect() as conn:
        yield conn


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_app_settings),
) -> UserSession:
    """Resolve the bearer token into the calling user's session."""
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=401, detail="Unauthorized")
    try:
        return decode_access_token(credentials.credentials, settings)
    except InvalidTokenError:
        raise HTTPException(status_code=401, detail="Invalid token")


def get_care_ai(settings: Settings = Depends(get_app_settings)) -> CareAI:
    return GeminiCareAI.from_settings(settings)
