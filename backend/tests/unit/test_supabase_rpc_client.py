"""Unit tests for the Supabase RPC adapter."""

import json

import httpx
import pytest

from dispatch_board.domain.exceptions import NetworkError, RpcError
from dispatch_board.infrastructure.database import SupabaseRpcClient


def _client(handler) -> SupabaseRpcClient:
    return SupabaseRpcClient(
        url="https://project.supabase.test/",
        service_key="service-key",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


@pytest.mark.asyncio
async def test_exec_sql_posts_to_rpc_endpoint():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(204)

    await _client(handler).exec_sql("SELECT 1;")

    request = seen[0]
    assert request.method == "POST"
    assert str(request.url) == "https://project.supabase.test/rest/v1/rpc/exec_sql"
    assert request.headers["apikey"] == "service-key"
    assert request.headers["Authorization"] == "Bearer service-key"
    assert json.loads(request.content) == {"sql": "SELECT 1;"}


@pytest.mark.asyncio
async def test_call_returns_decoded_body():
    client = _client(lambda request: httpx.Response(200, json=[{"count": 3}]))

    assert await client.call("count_rows", {"table_name": "drivers"}) == [{"count": 3}]


@pytest.mark.asyncio
async def test_error_body_becomes_rpc_error():
    body = {
        "code": "PGRST202",
        "message": "Could not find the function public.exec_sql(sql)",
        "hint": "Create it in the SQL editor",
    }
    client = _client(lambda request: httpx.Response(404, json=body))

    with pytest.raises(RpcError) as exc_info:
        await client.exec_sql("SELECT 1;")

    error = exc_info.value
    assert error.function == "exec_sql"
    assert error.status_code == 404
    assert "public.exec_sql" in error.message
    assert "hint: Create it" in error.message
    assert str(error).startswith("[rpc:exec_sql] 404")


@pytest.mark.asyncio
async def test_transport_failure_raises_network_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    with pytest.raises(NetworkError):
        await _client(handler).exec_sql("SELECT 1;")
