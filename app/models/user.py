"""ORM model for registered users."""

from typing import Any

from sqlalchemy import Column, DateTime, String, func

from app.models.base import Base


class User(Base):
    """
    User account keyed by email.

    The primary key doubles as the uniqueness constraint that settles
    concurrent registrations of the same email.
    """

    __tablename__ = "users"

    email = Column(String(255), primary_key=True)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    def short(self) -> dict[str, Any]:
        """Public view of the user: never includes password_hash."""
        return {"email": self.email}
