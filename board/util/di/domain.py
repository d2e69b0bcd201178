"""Domain layer DI providers."""

from dishka import Scope, provide

from board.config import BoardSettings
from board.domain.repository import CommentRepository, PostRepository
from board.domain.service import CommentService, PostService
from board.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_post_service(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        settings: BoardSettings,
    ) -> PostService:
        """Provide post service."""
        return PostService(post_repository, comment_repository, settings)

    @provide(scope=Scope.REQUEST)
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        settings: BoardSettings,
    ) -> CommentService:
        """Provide comment service."""
        return CommentService(comment_repository, post_repository, settings)
