"""Strongly typed identifiers for discussion board entities.

Ids are assigned by the database (auto-increment integers). NewType keeps
post ids and comment ids from being mixed up in signatures.
"""

from typing import NewType

PostId = NewType("PostId", int)
CommentId = NewType("CommentId", int)
