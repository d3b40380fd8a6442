"""User persistence: lookup by email and insert guarded by the primary-key constraint."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import ConflictError
from app.models import User

logger = logging.getLogger(__name__)

USER_EXISTS_MESSAGE = "User may already exist"


class UserStore:
    """Thin wrapper over a Session for the two user operations the auth flow needs."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_email(self, email: str) -> User | None:
        return self.session.get(User, email)

    def insert(self, email: str, password_hash: str) -> User:
        """
        Persist a new user and return it.

        Raises ConflictError when the email is already taken, including when a
        concurrent registration committed it after our existence check.
        """
        user = User(email=email, password_hash=password_hash)
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            logger.info("Insert rejected by unique key for an existing email")
            raise ConflictError(USER_EXISTS_MESSAGE, cause=e) from e
        self.session.refresh(user)
        return user
