"""Post aggregate root.

Posts are the articles of the board. A post owns its comments: deleting the
post removes every comment attached to it.
"""

from datetime import datetime

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import MAX_POST_CONTENT_LENGTH, PostId


class Post(DomainModel):
    """Post aggregate root.

    Title and content are stored trimmed. Posts are editable only within the
    edit window measured from ``created_at``.
    """

    id: PostId
    handle: str = Field(min_length=1)
    title: str = Field(min_length=1)
    content: str = Field(min_length=1, max_length=MAX_POST_CONTENT_LENGTH)
    created_at: datetime
    updated_at: datetime
