"""
Create a user from the command line. Run from project root:
  python -m app.scripts.create_user EMAIL PASSWORD
Example:
  python -m app.scripts.create_user ops@mycompany.com your-secure-password
"""
import argparse
import sys

from app.core.config import get_settings
from app.core.database import build_engine, build_session_factory
from app.core.errors import ConflictError, ValidationError
from app.core.logging import configure_logging
from app.core.security import PasswordHasher
from app.services.auth import validate_credentials
from app.services.user_store import UserStore


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a user without going through the HTTP API.")
    parser.add_argument("email", help="Email address (account key)")
    parser.add_argument("password", help="Plain-text password")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    try:
        email, password = validate_credentials(args.email.strip(), args.password)
    except ValidationError as e:
        print(e.message, file=sys.stderr)
        return 1

    engine = build_engine(settings.DATABASE_URL)
    db = build_session_factory(engine)()
    try:
        store = UserStore(db)
        if store.find_by_email(email) is not None:
            print(f"User '{email}' already exists.", file=sys.stderr)
            return 1
        password_hash = PasswordHasher(rounds=settings.BCRYPT_ROUNDS).hash(password)
        try:
            store.insert(email, password_hash)
        except ConflictError:
            print(f"User '{email}' already exists.", file=sys.stderr)
            return 1
        print(f"Created user '{email}'.")
        return 0
    finally:
        db.close()
        engine.dispose()


if __name__ == "__main__":
    sys.exit(main())
