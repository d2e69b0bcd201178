"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that have both a production and an in-memory implementation
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for all board DI providers.

    Attributes:
        __mock_component__: Component name for swappable providers, None otherwise
        __is_mock__: Whether this is the in-memory (test) implementation
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
