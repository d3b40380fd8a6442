"""Register, login and token verification routes, plus the require_auth dependency."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.errors import MissingCredentialsError, VerificationError
from app.core.security import PasswordHasher, TokenIssuer
from app.schemas.auth import (
    CredentialsRequest,
    ErrorResponse,
    LoginResponse,
    RegisterResponse,
    UserPublic,
    VerificationResponse,
)
from app.services.auth import login_user, register_user
from app.services.auth_gate import (
    REASON_MALFORMED_TOKEN,
    REASON_MISSING_HEADER,
    evaluate_authorization,
)
from app.services.user_store import UserStore

router = APIRouter()


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_token_issuer(request: Request) -> TokenIssuer:
    return request.app.state.token_issuer


def get_user_store(db: Annotated[Session, Depends(get_db)]) -> UserStore:
    return UserStore(db)


def require_auth(
    request: Request,
    issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> dict[str, Any]:
    """Dependency: admit requests with a verifiable bearer token and return its claims."""
    decision = evaluate_authorization(request.headers, issuer)
    if decision.admitted:
        return decision.claims or {}
    if decision.reason == REASON_MISSING_HEADER:
        raise MissingCredentialsError("No authorization headers.")
    if decision.reason == REASON_MALFORMED_TOKEN:
        raise MissingCredentialsError("Malformed token.")
    raise VerificationError("Failed to authenticate.")


@router.get(
    "/verification",
    response_model=VerificationResponse,
    responses={401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def verify(
    _claims: Annotated[dict[str, Any], Depends(require_auth)],
) -> VerificationResponse:
    """Confirm that the bearer token in the Authorization header is valid."""
    return VerificationResponse()


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
def login(
    store: Annotated[UserStore, Depends(get_user_store)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
    body: CredentialsRequest | None = None,
) -> LoginResponse:
    """
    Authenticate with email and password; returns a signed token.
    Include the token in the Authorization header as: Bearer <token>
    """
    body = body or CredentialsRequest()
    user, token = login_user(store, hasher, issuer, body.email, body.password)
    return LoginResponse(token=token, user=UserPublic.model_validate(user))


@router.post(
    "",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
@router.post(
    "/",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
def register(
    store: Annotated[UserStore, Depends(get_user_store)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
    body: CredentialsRequest | None = None,
) -> RegisterResponse:
    """Register a new user and return a token for it."""
    body = body or CredentialsRequest()
    user, token = register_user(store, hasher, issuer, body.email, body.password)
    return RegisterResponse(token=token, user=UserPublic.model_validate(user))


@router.get("", response_class=PlainTextResponse)
@router.get("/", response_class=PlainTextResponse, include_in_schema=False)
def index() -> str:
    return "auth"
