"""Unit tests for PasswordHashingService."""

import pytest

from userhub_auth import PasswordHashingService, WeakPasswordError


class TestPasswordHashingService:
    def setup_method(self):
        self.service = PasswordHashingService(rounds=4)

    def test_hash_and_verify(self):
        password_hash = self.service.hash("correct horse")

        assert password_hash.startswith("$2b$04$")
        assert self.service.verify("correct horse", password_hash)
        assert not self.service.verify("wrong horse", password_hash)

    def test_hashes_are_salted(self):
        assert self.service.hash("correct horse") != self.service.hash("correct horse")

    def test_verify_rejects_garbage_hash(self):
        assert not self.service.verify("correct horse", "not-a-bcrypt-hash")

    @pytest.mark.parametrize(
        ("password", "message"),
        [
            ("", "cannot be empty"),
            ("short", "at least 8 characters"),
            ("x" * 73, "cannot exceed 72 bytes"),
            ("ü" * 37, "cannot exceed 72 bytes"),
        ],
    )
    def test_weak_passwords(self, password, message):
        with pytest.raises(WeakPasswordError, match=message):
            self.service.hash(password)

    def test_password_at_byte_limit_is_accepted(self):
        password = "x" * 72
        assert self.service.verify(password, self.service.hash(password))
