# -*- coding: utf-8 -*-

from __future__ import annotations

import importlib
import unittest
from datetime import datetime, timedelta, timezone


class TestPasswords(unittest.TestCase):
    def setUp(self) -> None:
        self.security = importlib.import_module("fitlife.users.security")

    def test_hash_verifies_only_the_same_password(self) -> None:
        stored = self.security.hash_password("password123")
        self.assertTrue(stored.startswith("pbkdf2_sha256$"))
        self.assertTrue(self.security.verify_password("password123", stored))
        self.assertFalse(self.security.verify_password("password124", stored))

    def test_unparseable_hash_never_verifies(self) -> None:
        for stored in ("", "x", "pbkdf2_sha256$abc$def", "bcrypt$1$2$3"):
            self.assertFalse(self.security.verify_password("password123", stored))


class TestTokens(unittest.TestCase):
    def setUp(self) -> None:
        self.security = importlib.import_module("fitlife.users.security")
        self.errors = importlib.import_module("fitlife.errors")
        self.issued = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)

    def test_token_carries_subject(self) -> None:
        token = self.security.create_access_token(user_id="user-1", now=self.issued)
        claims = self.security.decode_token(token, now=self.issued + timedelta(hours=1))
        self.assertEqual(claims["sub"], "user-1")

    def test_tampered_token_rejected(self) -> None:
        token = self.security.create_access_token(user_id="user-1", now=self.issued)
        header, claims, signature = token.split(".")
        forged = self.security.create_access_token(user_id="user-2", now=self.issued).split(".")[1]
        for bad in (f"{header}.{forged}.{signature}", f"{header}.{claims}", "not.a.token", "é.b.c"):
            with self.assertRaises(self.errors.AuthError) as ctx:
                self.security.decode_token(bad, now=self.issued)
            self.assertEqual(ctx.exception.message, "Invalid token")

    def test_expired_token_rejected(self) -> None:
        token = self.security.create_access_token(user_id="user-1", now=self.issued)
        with self.assertRaises(self.errors.AuthError) as ctx:
            self.security.decode_token(token, now=self.issued + timedelta(days=365))
        self.assertEqual(ctx.exception.message, "Token expired")


if __name__ == "__main__":
    unittest.main()
