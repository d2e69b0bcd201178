"""Shared base for board entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for posts and comments.

    Entities are immutable snapshots of a stored row; a change produces a new
    instance (``model_copy(update=...)``) that the repository persists.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
