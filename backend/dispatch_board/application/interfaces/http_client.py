"""Abstract HTTP client interface (port) for the REST backend."""

from abc import ABC, abstractmethod
from typing import Any


class HttpClient(ABC):
    """Port: what the entity services need from the REST transport.

    Paths are relative to the API base URL. Every method returns the decoded
    JSON body and raises ``NetworkError``/``HttpError`` (or a subclass) on
    failure.
    """

    @abstractmethod
    async def get(self, path: str, params: dict[str, str] | None = None) -> Any:
        ...

    @abstractmethod
    async def post(self, path: str, json: Any = None) -> Any:
        ...

    @abstractmethod
    async def put(self, path: str, json: Any = None) -> Any:
        ...

    @abstractmethod
    async def patch(self, path: str, json: Any = None) -> Any:
        ...

    @abstractmethod
    async def delete(self, path: str) -> None:
        """Send a DELETE. The response body is never inspected."""
        ...
