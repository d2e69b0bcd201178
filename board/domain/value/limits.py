"""Limits and fixed values of the board's business rules."""

import re
from datetime import timedelta

# Handles: letters, digits, underscore and hyphen
HANDLE_PATTERN = re.compile(r"^[a-zA-Z0-9_-]+$")
HANDLE_MIN_LENGTH = 3
HANDLE_MAX_LENGTH = 24

MAX_POST_CONTENT_LENGTH = 10_000
MAX_COMMENT_LENGTH = 2_000

# Posts may be edited for this long after creation (inclusive)
EDIT_WINDOW = timedelta(days=3)

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 50

# Ids are stored in int4 columns
MAX_ID = 2**31 - 1

# Shown instead of handle and content of soft-deleted comments
DELETED_PLACEHOLDER = "[deleted]"
