"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """Base use case: one request model in, one response model out.

    Use cases orchestrate domain services and let domain errors propagate;
    the routes translate them into API errors.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
