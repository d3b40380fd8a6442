"""Tests for the create_user CLI script."""

import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from app.core.config import Settings
from app.core.database import build_engine, build_session_factory
from app.models import Base
from app.scripts import create_user
from app.services.user_store import UserStore


class TestCreateUserScript(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        url = f"sqlite:///{Path(self._tmp.name) / 'cli.db'}"
        self.engine = build_engine(url)
        Base.metadata.create_all(self.engine)
        self.settings = Settings(_env_file=None, DATABASE_URL=url, BCRYPT_ROUNDS=4)
        patcher = patch.object(create_user, "get_settings", return_value=self.settings)
        patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self) -> None:
        self.engine.dispose()
        self._tmp.cleanup()

    def test_creates_user(self) -> None:
        self.assertEqual(create_user.main(["jo@mail.com", "pw"]), 0)
        with build_session_factory(self.engine)() as db:
            user = UserStore(db).find_by_email("jo@mail.com")
        self.assertIsNotNone(user)
        self.assertNotEqual(user.password_hash, "pw")

    def test_duplicate_fails(self) -> None:
        self.assertEqual(create_user.main(["jo@mail.com", "pw"]), 0)
        self.assertEqual(create_user.main(["jo@mail.com", "pw"]), 1)

    def test_invalid_email_fails(self) -> None:
        self.assertEqual(create_user.main(["not-an-email", "pw"]), 1)


if __name__ == "__main__":
    unittest.main()
