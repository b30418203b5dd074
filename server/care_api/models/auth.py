"""Authentication request and response models."""
from pydantic import BaseModel, EmailStr, Field


class RegisterRequest(BaseModel):
    """New account details."""

    name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(min_length=6, max_length=128)


class LoginRequest(BaseModel):
    """Credentials for an existing account."""

    email: EmailStr
    password: str


class UserOut(BaseModel):
    """Public user profile."""

    id: int
    name: str
    email: str


class TokenResponse(BaseModel):
    """Bearer token issued on register or login."""

    token: str
    user: UserOut
