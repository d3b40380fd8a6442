"""Error taxonomy for the auth flow; each error knows its HTTP status and response body."""

from typing import Any


class AuthServiceError(Exception):
    """Base class for anticipated failures that map to a documented status code."""

    status_code: int = 400

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)

    def to_payload(self) -> dict[str, Any]:
        return {"auth": False, "message": self.message}


class ValidationError(AuthServiceError):
    """Missing or malformed input (400)."""

    status_code = 400


class AuthenticationError(AuthServiceError):
    """Bad credentials or missing/malformed bearer header (401)."""

    status_code = 401


class MissingCredentialsError(AuthenticationError):
    """Bearer header problems answer with a bare message, no auth flag."""

    def to_payload(self) -> dict[str, Any]:
        return {"message": self.message}


class ConflictError(AuthServiceError):
    """Email already registered, including a lost check-then-insert race (422)."""

    status_code = 422


class VerificationError(AuthServiceError):
    """
    Token could not be verified.

    Answered with 500 rather than 401: existing clients depend on that status.
    """

    status_code = 500


class InvalidSignature(VerificationError):
    """Token decoded but the signature does not match the configured secret."""


class MalformedToken(VerificationError):
    """Token is not a decodable JWT."""
