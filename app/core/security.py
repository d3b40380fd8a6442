"""Password hashing and JWT issuance/verification for authentication."""

from datetime import UTC, datetime
from typing import Any

import bcrypt
import jwt

from app.core.errors import InvalidSignature, MalformedToken, VerificationError

# Bcrypt cost (rounds) used when no setting overrides it.
BCRYPT_ROUNDS = 10

# bcrypt only looks at the first 72 bytes of the password.
BCRYPT_MAX_BYTES = 72


def _password_bytes(plain_password: str) -> bytes:
    return plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]


class PasswordHasher:
    """Salted bcrypt hashing with a fixed work factor."""

    def __init__(self, rounds: int = BCRYPT_ROUNDS) -> None:
        self.rounds = rounds
        self._dummy_hash = self.hash("dummy-password-for-timing")

    def hash(self, plain_password: str) -> str:
        """Hash a plain-text password for storage. A new salt is generated on every call."""
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_password_bytes(plain_password), salt).decode("utf-8")

    def verify(self, plain_password: str, hashed: str) -> bool:
        """Verify a plain password against a stored hash; malformed hashes count as a mismatch."""
        if not hashed:
            return False
        try:
            return bcrypt.checkpw(_password_bytes(plain_password), hashed.encode("utf-8"))
        except (ValueError, TypeError):
            return False

    def verify_dummy(self, plain_password: str) -> bool:
        """Spend the same bcrypt work as a real check; always False. Used when the user is unknown."""
        self.verify(plain_password, self._dummy_hash)
        return False


class TokenIssuer:
    """
    Issue and verify signed tokens embedding a user identity snapshot.

    Tokens carry no exp claim and stay valid until the secret changes. Adding
    expiry changes the client contract and needs refresh support alongside it.
    """

    def __init__(self, secret: str, algorithm: str = "HS256") -> None:
        if not secret:
            raise ValueError("Token secret must be non-empty")
        self._secret = secret
        self.algorithm = algorithm

    def issue(self, snapshot: dict[str, Any]) -> str:
        """Create a signed token with claims {"user": snapshot, "iat": now}."""
        payload: dict[str, Any] = {
            "user": dict(snapshot),
            "iat": datetime.now(UTC),
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> dict[str, Any]:
        """
        Verify the token signature and return its claims.

        Raises InvalidSignature when the signature does not match, MalformedToken
        when the token cannot be decoded at all.
        """
        try:
            return jwt.decode(token, self._secret, algorithms=[self.algorithm])
        except jwt.InvalidSignatureError as e:
            raise InvalidSignature("Token signature verification failed", cause=e) from e
        except jwt.DecodeError as e:
            raise MalformedToken("Token could not be decoded", cause=e) from e
        except jwt.InvalidTokenError as e:
            raise VerificationError(f"Token rejected: {e!s}", cause=e) from e
