"""Unit tests for app.core.security: bcrypt hashing and token issue/verify."""

import unittest
from unittest.mock import patch

import jwt

from app.core.errors import InvalidSignature, MalformedToken, VerificationError
from app.core.security import PasswordHasher, TokenIssuer


class TestPasswordHasher(unittest.TestCase):
    """PasswordHasher produces salted bcrypt hashes and verifies them."""

    def setUp(self) -> None:
        self.hasher = PasswordHasher(rounds=4)

    def test_hash_differs_from_plaintext(self) -> None:
        for password in ("a", "hunter2", "correct horse battery staple"):
            self.assertNotEqual(self.hasher.hash(password), password)

    def test_hash_is_self_describing_bcrypt(self) -> None:
        hashed = self.hasher.hash("hunter2")
        self.assertTrue(hashed.startswith("$2b$04$"))

    def test_new_salt_per_call(self) -> None:
        self.assertNotEqual(self.hasher.hash("same"), self.hasher.hash("same"))

    def test_verify_matching_password(self) -> None:
        self.assertTrue(self.hasher.verify("hunter2", self.hasher.hash("hunter2")))

    def test_verify_other_password(self) -> None:
        self.assertFalse(self.hasher.verify("hunter2", self.hasher.hash("hunter3")))

    def test_verify_malformed_hash_returns_false(self) -> None:
        self.assertFalse(self.hasher.verify("hunter2", "not-a-bcrypt-hash"))
        self.assertFalse(self.hasher.verify("hunter2", ""))

    def test_long_password_is_truncated_not_rejected(self) -> None:
        password = "x" * 100
        hashed = self.hasher.hash(password)
        self.assertTrue(self.hasher.verify(password, hashed))

    def test_default_rounds(self) -> None:
        self.assertTrue(PasswordHasher().hash("pw").startswith("$2b$10$"))

    def test_verify_dummy_is_always_false(self) -> None:
        self.assertFalse(self.hasher.verify_dummy("dummy-password-for-timing"))
        self.assertFalse(self.hasher.verify_dummy("anything"))

    def test_dummy_hash_prepared_at_construction(self) -> None:
        hasher = PasswordHasher(rounds=4)
        with patch.object(hasher, "hash") as hash_mock:
            hasher.verify_dummy("anything")
        hash_mock.assert_not_called()


class TestTokenIssuer(unittest.TestCase):
    """TokenIssuer signs the identity snapshot and rejects tampered or foreign tokens."""

    def setUp(self) -> None:
        self.issuer = TokenIssuer("test-secret")

    def test_round_trip_recovers_snapshot(self) -> None:
        token = self.issuer.issue({"email": "alice@mail.com"})
        claims = self.issuer.verify(token)
        self.assertEqual(claims["user"], {"email": "alice@mail.com"})
        self.assertIsInstance(claims["iat"], int)

    def test_no_expiry_claim(self) -> None:
        claims = self.issuer.verify(self.issuer.issue({"email": "alice@mail.com"}))
        self.assertNotIn("exp", claims)

    def test_wrong_secret_raises_invalid_signature(self) -> None:
        token = TokenIssuer("other-secret").issue({"email": "alice@mail.com"})
        with self.assertRaises(InvalidSignature):
            self.issuer.verify(token)

    def test_garbage_raises_malformed(self) -> None:
        with self.assertRaises(MalformedToken):
            self.issuer.verify("not-a-token")

    def test_both_failures_are_verification_errors(self) -> None:
        self.assertTrue(issubclass(InvalidSignature, VerificationError))
        self.assertTrue(issubclass(MalformedToken, VerificationError))

    def test_expired_token_from_elsewhere_is_rejected(self) -> None:
        token = jwt.encode({"user": {"email": "a@mail.com"}, "exp": 1}, "test-secret", algorithm="HS256")
        with self.assertRaises(VerificationError):
            self.issuer.verify(token)

    def test_empty_secret_rejected(self) -> None:
        with self.assertRaises(ValueError):
            TokenIssuer("")


if __name__ == "__main__":
    unittest.main()
