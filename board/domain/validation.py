"""Field validators shared by post and comment operations.

All validators are pure: they take the raw value, trim it, and either return
the trimmed value (which is what gets persisted) or raise ValidationError
with the field's error code.
"""

from board.domain.error import ValidationError
from board.domain.value import HANDLE_MAX_LENGTH, HANDLE_MIN_LENGTH, HANDLE_PATTERN


def validate_handle(value: str) -> str:
    """Validate a user handle.

    Args:
        value: Raw handle

    Returns:
        Trimmed handle

    Raises:
        ValidationError: INVALID_HANDLE if the handle is not 3-24 characters
            of letters, digits, '_' and '-'
    """
    handle = value.strip()
    if (
        not HANDLE_PATTERN.match(handle)
        or not HANDLE_MIN_LENGTH <= len(handle) <= HANDLE_MAX_LENGTH
    ):
        raise ValidationError(
            "INVALID_HANDLE",
            f"Handle must be {HANDLE_MIN_LENGTH}-{HANDLE_MAX_LENGTH} characters "
            "and contain only letters, numbers, '_' and '-'.",
        )
    return handle


def validate_content(value: str, max_length: int) -> str:
    """Validate post or comment content.

    Args:
        value: Raw content
        max_length: Maximum length of the trimmed content

    Returns:
        Trimmed content

    Raises:
        ValidationError: INVALID_CONTENT if empty, CONTENT_TOO_LONG if longer
            than max_length
    """
    content = value.strip()
    if not content:
        raise ValidationError("INVALID_CONTENT", "Content is required.")
    if len(content) > max_length:
        raise ValidationError(
            "CONTENT_TOO_LONG",
            f"Content exceeds maximum length of {max_length:,} characters.",
        )
    return content


def validate_title(value: str) -> str:
    """Validate a post title."""
    title = value.strip()
    if not title:
        raise ValidationError("INVALID_TITLE", "Title is required.")
    return title
