"""Account registration and login routes."""
import logging
import sqlite3

from fastapi import APIRouter, Depends, HTTPException

from ..config import Settings
from ..dependencies import get_app_settings, get_db
from ..models.auth import LoginRequest, RegisterRequest, TokenResponse, UserOut
from ..security import UserSession, create_access_token, hash_password, verify_password

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])


def _issue(session: UserSession, settings: Settings) -> TokenResponse:
    return TokenResponse(
        token=create_access_token(session, settings),
        user=UserOut(id=session.id, name=session.name, email=session.email),
    )


@router.post("/register", response_model=TokenResponse)
async def register(
    body: RegisterRequest,
    conn: sqlite3.Connection = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """Create an account and return a token for it."""
    email = body.email.lower()
    try:
        cursor = conn.execute(
            "INSERT INTO users (name, email, password) VALUES (?, ?, ?)",
            (body.name, email, hash_password(body.password)),
        )
    except sqlite3.IntegrityError:
        raise HTTPException(status_code=400, detail="Email already exists")

    logger.info(f"[AUTH] Registered user {cursor.lastrowid}")
    return _issue(UserSession(id=cursor.lastrowid, email=email, name=body.name), settings)


@router.post("/login", response_model=TokenResponse)
async def login(
    body: LoginRequest,
    conn: sqlite3.Connection = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """Exchange credentials for a token."""
    row = conn.execute(
        "SELECT * FROM users WHERE email = ?", (body.email.lower(),)
    ).fetchone()

    if row is None or not verify_password(body.password, row["password"]):
        logger.info("[AUTH] Rejected login attempt")
        raise HTTPException(status_code=401, detail="Invalid credentials")

    return _issue(UserSession(id=row["id"], email=row["email"], name=row["name"]), settings)
