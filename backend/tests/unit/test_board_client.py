"""Unit tests for the DispatchBoardClient composition root."""

import httpx
import pytest

from dispatch_board.config import Settings
from dispatch_board.infrastructure.board_client import DispatchBoardClient


@pytest.mark.asyncio
async def test_from_settings_wires_services_to_configured_backend():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[])

    settings = Settings(api_base_url="http://backend.test/api", api_token="t0ken")
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))

    async with DispatchBoardClient.from_settings(settings, http_client=http_client) as board:
        await board.operators.get_all()
        await board.dispatch_sync.load_records()

    assert [r.url.path for r in seen] == ["/api/operators", "/api/dispatch"]
    assert seen[0].headers["Authorization"] == "Bearer t0ken"
    # Injected clients belong to the caller
    assert not http_client.is_closed
    await http_client.aclose()


@pytest.mark.asyncio
async def test_close_drops_store_listeners_and_owned_pool():
    board = DispatchBoardClient(base_url="http://backend.test/api")
    board.dispatch_store.subscribe(lambda new, old: None)
    board.ui_store.subscribe(lambda new, old: None)

    await board.aclose()

    assert board.dispatch_store.listener_count == 0
    assert board.ui_store.listener_count == 0
    assert board._http_client.is_closed


@pytest.mark.asyncio
async def test_board_exposes_vehicle_route_schedule_and_formula_services():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[])

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    async with DispatchBoardClient("http://backend.test/api", http_client=http_client) as board:
        await board.vehicles.get_all()
        await board.routes.get_all()
        await board.schedules.get_all()
        await board.service_formulas.get_all()
    await http_client.aclose()

    assert [r.url.path for r in seen] == [
        "/api/vehicles",
        "/api/routes",
        "/api/schedules",
        "/api/service-formulas",
    ]
