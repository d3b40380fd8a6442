"""Register and login flows composed from the hasher, token issuer and user store."""

import logging

from email_validator import EmailNotValidError, validate_email

from app.core.errors import AuthenticationError, ConflictError, ValidationError
from app.core.security import PasswordHasher, TokenIssuer
from app.models import User
from app.services.user_store import USER_EXISTS_MESSAGE, UserStore

logger = logging.getLogger(__name__)

EMAIL_INVALID_MESSAGE = "Email is required or malformed"
PASSWORD_REQUIRED_MESSAGE = "Password is required"
# Same message for unknown email and wrong password so callers cannot enumerate accounts.
UNAUTHORIZED_MESSAGE = "Unauthorized"


def is_valid_email(email: str) -> bool:
    """Syntactic check only (local part, domain with a dot); no DNS lookup or special-use domain policy."""
    try:
        result = validate_email(email, check_deliverability=False, globally_deliverable=False)
    except EmailNotValidError:
        return False
    # Without the deliverability policy email-validator accepts dotless domains such as "localhost".
    return "." in result.ascii_domain


def validate_credentials(email: str | None, password: str | None) -> tuple[str, str]:
    """Return (email, password) unchanged or raise ValidationError with the documented message."""
    if not email or not is_valid_email(email):
        raise ValidationError(EMAIL_INVALID_MESSAGE)
    if not password:
        raise ValidationError(PASSWORD_REQUIRED_MESSAGE)
    return email, password


def register_user(
    store: UserStore,
    hasher: PasswordHasher,
    issuer: TokenIssuer,
    email: str | None,
    password: str | None,
) -> tuple[User, str]:
    """
    Create a user and return it with a freshly issued token.

    The existence check gives a fast answer for the common duplicate case; the
    store's unique key is what actually guarantees a single winner when two
    registrations race.
    """
    email, password = validate_credentials(email, password)

    if store.find_by_email(email) is not None:
        raise ConflictError(USER_EXISTS_MESSAGE)

    password_hash = hasher.hash(password)
    user = store.insert(email, password_hash)
    token = issuer.issue(user.short())
    logger.info("Registered user %s", user.email)
    return user, token


def login_user(
    store: UserStore,
    hasher: PasswordHasher,
    issuer: TokenIssuer,
    email: str | None,
    password: str | None,
) -> tuple[User, str]:
    """Check credentials and return the user with a new token; raise AuthenticationError otherwise."""
    email, password = validate_credentials(email, password)

    user = store.find_by_email(email)
    if user is None:
        hasher.verify_dummy(password)
        logger.info("Login rejected: unknown email")
        raise AuthenticationError(UNAUTHORIZED_MESSAGE)

    if not hasher.verify(password, user.password_hash):
        logger.info("Login rejected: password mismatch for %s", user.email)
        raise AuthenticationError(UNAUTHORIZED_MESSAGE)

    return user, issuer.issue(user.short())
