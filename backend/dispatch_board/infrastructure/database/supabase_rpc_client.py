"""Supabase PostgREST RPC adapter, implementing the SqlExecutor interface.

Database functions are invoked with ``POST <supabase_url>/rest/v1/rpc/<name>``
and a JSON object of named arguments. The project must define an
``exec_sql(sql text)`` function for :meth:`exec_sql` to work.
"""

import logging
from typing import Any

import httpx

from dispatch_board.application.interfaces import SqlExecutor
from dispatch_board.domain.exceptions import NetworkError, RpcError

logger = logging.getLogger(__name__)


class SupabaseRpcClient(SqlExecutor):
    """Infrastructure adapter for Supabase remote procedure calls."""

    def __init__(
        self,
        url: str,
        service_key: str,
        timeout: float = 120.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = url.rstrip("/")
        self._service_key = service_key
        self._timeout = timeout
        self._http_client = http_client

    def _get_headers(self) -> dict[str, str]:
        return {
            "apikey": self._service_key,
            "Authorization": f"Bearer {self._service_key}",
            "Content-Type": "application/json",
        }

    async def _get_client(self) -> httpx.AsyncClient:
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def call(self, function: str, params: dict[str, Any]) -> Any:
        """Invoke database function ``function`` with named ``params``."""
        url = f"{self._base_url}/rest/v1/rpc/{function}"
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            response = await client.post(url, headers=self._get_headers(), json=params)
        except httpx.TransportError as exc:
            raise NetworkError("POST", url, str(exc) or type(exc).__name__) from exc
        finally:
            if should_close:
                await client.aclose()

        if response.is_error:
            self._raise_rpc_error(function, url, response)

        logger.debug("RPC %s -> %d", function, response.status_code)
        if not response.content:
            return None
        return response.json()

    async def exec_sql(self, sql: str) -> None:
        await self.call("exec_sql", {"sql": sql})

    @staticmethod
    def _raise_rpc_error(function: str, url: str, response: httpx.Response) -> None:
        """Raise RpcError from a PostgREST error body (``message``/``hint``/``details``)."""
        try:
            data = response.json()
            message = data.get("message") or response.text
            hint = data.get("hint")
            if hint:
                message = f"{message} (hint: {hint})"
        except Exception:
            message = response.text or response.reason_phrase

        raise RpcError(function, response.status_code, message, url=url)
