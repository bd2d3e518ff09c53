"""REST API client, implementing the HttpClient interface.

Talks to the dispatch backend (``<api_base_url>/<resource>``) with httpx and
translates transport failures and non-2xx answers into domain exceptions:

    transport failure        -> NetworkError
    404                      -> EntityNotFoundError
    other 4xx on POST/PUT/PATCH -> EntityValidationError
    anything else non-2xx    -> HttpError
    2xx with a non-JSON body -> HttpError
"""

import logging
from typing import Any

import httpx

from dispatch_board.application.interfaces import HttpClient
from dispatch_board.domain.exceptions import (
    EntityNotFoundError,
    EntityValidationError,
    HttpError,
    NetworkError,
)

logger = logging.getLogger(__name__)

_WRITE_METHODS = frozenset({"POST", "PUT", "PATCH"})


class ApiClient(HttpClient):
    """Infrastructure adapter for the dispatch REST backend.

    Pass a shared ``httpx.AsyncClient`` to reuse connections; without one a
    short-lived client is opened and closed for every request.
    """

    def __init__(
        self,
        base_url: str,
        token: str = "",
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._token = token
        self._timeout = timeout
        self._http_client = http_client

    def _get_headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def _url(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        json: Any = None,
    ) -> httpx.Response:
        url = self._url(path)
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            response = await client.request(
                method,
                url,
                headers=self._get_headers(),
                params=params,
                json=json,
            )
        except httpx.TransportError as exc:
            logger.error("%s %s failed: %s", method, url, exc)
            raise NetworkError(method, url, str(exc) or type(exc).__name__) from exc
        finally:
            if should_close:
                await client.aclose()

        logger.debug("%s %s -> %d", method, url, response.status_code)
        if response.is_error:
            self._raise_http_error(method, url, response)
        return response

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        """Decode a 2xx JSON body. A body that is not JSON raises ``HttpError``."""
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            method, url = response.request.method, str(response.request.url)
            logger.error("%s %s returned a non-JSON body: %.80r", method, url, response.text)
            raise HttpError(response.status_code, "Invalid JSON response", method, url) from exc

    async def get(self, path: str, params: dict[str, str] | None = None) -> Any:
        return self._decode(await self._request("GET", path, params=params))

    async def post(self, path: str, json: Any = None) -> Any:
        return self._decode(await self._request("POST", path, json=json))

    async def put(self, path: str, json: Any = None) -> Any:
        return self._decode(await self._request("PUT", path, json=json))

    async def patch(self, path: str, json: Any = None) -> Any:
        return self._decode(await self._request("PATCH", path, json=json))

    async def delete(self, path: str) -> None:
        await self._request("DELETE", path)

    @staticmethod
    def _raise_http_error(method: str, url: str, response: httpx.Response) -> None:
        """Raise the domain exception matching a non-2xx response."""
        try:
            data = response.json()
            message = data.get("error") or data.get("message") or response.text
        except Exception:
            message = response.text or response.reason_phrase

        status_code = response.status_code
        if status_code == 404:
            raise EntityNotFoundError(status_code, message, method, url)
        if 400 <= status_code < 500 and method in _WRITE_METHODS:
            raise EntityValidationError(status_code, message, method, url)

        logger.warning("%s %s returned %d: %s", method, url, status_code, message)
        raise HttpError(status_code, message, method, url)
