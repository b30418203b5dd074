"""Password hashing and bearer token handling."""
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import bcrypt
from jose import JWTError, jwt

from .config import Settings

log = logging.getLogger(__name__)


class InvalidTokenError(Exception):
    """Raised when a bearer token cannot be decoded or has expired."""


@dataclass(frozen=True)
class UserSession:
    """Authenticated caller, passed explicitly to request handlers."""

    id: int
    email: str
    name: str


def hash_password(plain: str) -> str:
    return bcrypt.hashpw(plain.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        log.warning("[AUTH] Malformed password hash encountered")
        return False


def create_access_token(session: UserSession, settings: Settings) -> str:
    """Sign a token carrying the user's id, email and name."""
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.token_expire_minutes)
    payload = {
        "sub": str(session.id),
        "email": session.email,
        "name": session.name,
        "exp": expire,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings) -> UserSession:
    """
    Decode a bearer token into a UserSession.

    Raises:
        InvalidTokenError: If the signature, expiry or claims are invalid.
    """
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
        return UserSession(id=int(payload["sub"]), email=payload["email"], name=payload["name"])
    except (JWTError, KeyError, TypeError, ValueError) as e:
        raise InvalidTokenError(str(e)) from e
