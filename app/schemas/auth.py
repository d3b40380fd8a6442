"""Request/response schemas for auth endpoints."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class CredentialsRequest(BaseModel):
    """
    Email and password for register and login.

    Both fields are optional here so that missing or malformed values are
    reported with the documented 400 messages instead of a generic 422.
    """

    email: str | None = Field(default=None, description="User email (also the account key)")
    password: str | None = Field(default=None, description="Plain-text password")


class UserPublic(BaseModel):
    """Public view of a user (no password hash)."""

    model_config = ConfigDict(from_attributes=True)

    email: str


class RegisterResponse(BaseModel):
    """Returned after a successful registration."""

    token: str = Field(..., description="Signed bearer token")
    user: UserPublic


class LoginResponse(BaseModel):
    """Returned after a successful login."""

    auth: Literal[True] = True
    token: str = Field(..., description="Signed bearer token")
    user: UserPublic


class VerificationResponse(BaseModel):
    """Returned when the bearer token is valid."""

    auth: Literal[True] = True
    message: str = "Authenticated."


class ErrorResponse(BaseModel):
    """Error body; auth is omitted for bearer header problems."""

    auth: Literal[False] | None = None
    message: str

