"""Base service class for domain services."""

from datetime import datetime, timezone
from typing import Callable

# Returns the current time; injected into services so tests can freeze it
Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    pass
