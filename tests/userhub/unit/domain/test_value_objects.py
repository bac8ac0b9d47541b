"""Unit tests for the Email, UserId and UserName value objects."""

import pytest

from userhub.domain.shared.exceptions import ErrorCode, ValidationError
from userhub.domain.user import (
    Email,
    InvalidEmailError,
    InvalidUserIdError,
    InvalidUserNameError,
    UserId,
    UserName,
)


class TestEmail:
    def test_normalizes_case_and_whitespace(self):
        email = Email("  Alice@Example.COM ")
        assert email.value == "alice@example.com"
        assert str(email) == "alice@example.com"

    def test_equal_after_normalization(self):
        assert Email("BOB@example.com") == Email("bob@example.com")

    @pytest.mark.parametrize("value", ["", "   "])
    def test_rejects_empty(self, value):
        with pytest.raises(InvalidEmailError, match="Email cannot be empty"):
            Email(value)

    @pytest.mark.parametrize(
        "value",
        ["plainaddress", "missing-at.example.com", "user@", "user@domain", "a b@x.io"],
    )
    def test_rejects_malformed(self, value):
        with pytest.raises(InvalidEmailError, match="Invalid email format"):
            Email(value)

    def test_rejects_overlong_address(self):
        local = "a" * 250
        with pytest.raises(InvalidEmailError, match="cannot exceed 255"):
            Email(f"{local}@example.com")

    def test_accepts_address_at_length_limit(self):
        value = "a" * (255 - len("@example.com")) + "@example.com"
        assert len(Email(value).value) == 255

    def test_error_is_a_field_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            Email("nope")
        assert exc_info.value.code == ErrorCode.INVALID_EMAIL
        assert exc_info.value.details == {"field": "email"}

    def test_error_is_also_a_value_error(self):
        with pytest.raises(ValueError):
            Email("nope")


class TestUserId:
    def test_accepts_positive_integer(self):
        user_id = UserId(7)
        assert user_id.value == 7
        assert int(user_id) == 7
        assert str(user_id) == "7"

    @pytest.mark.parametrize("value", [0, -1, -100])
    def test_rejects_non_positive(self, value):
        with pytest.raises(InvalidUserIdError):
            UserId(value)

    @pytest.mark.parametrize("value", [True, "1", 1.0, None])
    def test_rejects_non_integers(self, value):
        with pytest.raises(InvalidUserIdError) as exc_info:
            UserId(value)
        assert exc_info.value.code == ErrorCode.INVALID_USER_ID

    def test_value_equality(self):
        assert UserId(3) == UserId(3)
        assert UserId(3) != UserId(4)


class TestUserName:
    def test_keeps_value_as_given(self):
        assert UserName("Alice Example").value == "Alice Example"

    @pytest.mark.parametrize("value", ["", "   ", "\t\n"])
    def test_rejects_blank(self, value):
        with pytest.raises(InvalidUserNameError, match="User name cannot be empty"):
            UserName(value)

    def test_rejects_overlong_name(self):
        with pytest.raises(InvalidUserNameError, match="cannot exceed 255"):
            UserName("x" * 256)

    def test_accepts_name_at_length_limit(self):
        assert len(UserName("x" * 255).value) == 255

    def test_error_carries_field(self):
        with pytest.raises(InvalidUserNameError) as exc_info:
            UserName("")
        assert exc_info.value.details == {"field": "name"}
