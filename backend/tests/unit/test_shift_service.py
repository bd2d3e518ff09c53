"""Unit tests for ShiftService and its fallback shift list."""

import httpx
import pytest
from pydantic import ValidationError

from dispatch_board.application.services import DEFAULT_SHIFTS, ShiftService
from dispatch_board.infrastructure.api import ApiClient


def _service(handler) -> ShiftService:
    return ShiftService(ApiClient(
        base_url="http://backend.test/api",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    ))


@pytest.mark.asyncio
async def test_get_all_returns_server_shifts():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/shifts"
        return httpx.Response(200, json=[
            {"id": "s-1", "name": "Sáng", "startTime": "05:00", "endTime": "13:00"},
        ])

    shifts = await _service(handler).get_all()

    assert len(shifts) == 1
    assert shifts[0].label == "Sáng (05:00 - 13:00)"


@pytest.mark.asyncio
async def test_get_all_falls_back_when_endpoint_missing():
    shifts = await _service(lambda request: httpx.Response(404)).get_all()

    assert shifts == list(DEFAULT_SHIFTS)


@pytest.mark.asyncio
async def test_get_all_falls_back_when_server_unreachable():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    shifts = await _service(handler).get_all()

    assert [s.name for s in shifts] == ["Ca 1", "Ca 2", "Ca 3", "Hành chính"]
    assert shifts[2].start_time == "22:00"
    assert shifts[2].end_time == "06:00"


@pytest.mark.asyncio
async def test_malformed_payload_is_not_masked_by_fallback():
    with pytest.raises(ValidationError):
        await _service(lambda request: httpx.Response(200, json=[{"id": "x"}])).get_all()
