"""Use case contract shared by the application layer."""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One application operation.

    A use case validates its pydantic request, coordinates domain services
    and maps the result to a response model. Read use cases answer ``None``
    when the requested resource does not exist; routes turn that into a 404.
    """

    @abstractmethod
    async def execute(self, request: RequestT, *args: Any, **kwargs: Any) -> ResponseT:
        """Run the operation for ``request``."""
