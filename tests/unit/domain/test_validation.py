"""Unit tests for field validators."""

import pytest

from board.domain.error import ValidationError
from board.domain.validation import validate_content, validate_handle, validate_title


class TestValidateHandle:
    """Tests for validate_handle."""

    @pytest.mark.parametrize("handle", ["abc", "alice_42", "bob-smith", "a" * 24])
    def test_accepts_valid_handles(self, handle):
        assert validate_handle(handle) == handle

    def test_trims_whitespace(self):
        assert validate_handle("  alice  ") == "alice"

    @pytest.mark.parametrize(
        "handle", ["", "ab", "a" * 25, "has space", "dot.name", "émile", "   "]
    )
    def test_rejects_invalid_handles(self, handle):
        with pytest.raises(ValidationError) as exc_info:
            validate_handle(handle)

        assert exc_info.value.code == "INVALID_HANDLE"

    def test_length_is_checked_after_trimming(self):
        """Padding does not help a two-character handle."""
        with pytest.raises(ValidationError):
            validate_handle("  ab  ")


class TestValidateContent:
    """Tests for validate_content."""

    def test_returns_trimmed_content(self):
        assert validate_content("  hello  ", 100) == "hello"

    def test_rejects_blank_content(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_content(" \n\t ", 100)

        assert exc_info.value.code == "INVALID_CONTENT"

    def test_accepts_content_at_limit(self):
        content = "x" * 10_000
        assert validate_content(content, 10_000) == content

    def test_rejects_content_over_limit(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_content("x" * 10_001, 10_000)

        assert exc_info.value.code == "CONTENT_TOO_LONG"
        assert "10,000" in exc_info.value.message

    def test_limit_applies_to_trimmed_value(self):
        assert validate_content("  " + "x" * 5 + "  ", 5) == "xxxxx"


class TestValidateTitle:
    """Tests for validate_title."""

    def test_returns_trimmed_title(self):
        assert validate_title("  Hello world ") == "Hello world"

    def test_rejects_blank_title(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_title("   ")

        assert exc_info.value.code == "INVALID_TITLE"
