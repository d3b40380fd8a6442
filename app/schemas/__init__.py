"""Pydantic request/response schemas."""

from app.schemas.auth import (
    CredentialsRequest,
    ErrorResponse,
    LoginResponse,
    RegisterResponse,
    UserPublic,
    VerificationResponse,
)
from app.schemas.health import HealthResponse

__all__ = [
    "CredentialsRequest",
    "ErrorResponse",
    "HealthResponse",
    "LoginResponse",
    "RegisterResponse",
    "UserPublic",
    "VerificationResponse",
]
