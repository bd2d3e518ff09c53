"""Unit tests for DispatchService (dispatch board REST resource)."""

import json
from datetime import datetime, timezone

import httpx
import pytest
from pydantic import ValidationError

from dispatch_board.application.schemas import DispatchCreate, DispatchRecordPatch, PermitRequest
from dispatch_board.application.services import DispatchService
from dispatch_board.domain.entities import DispatchStatus, PermitStatus
from dispatch_board.infrastructure.api import ApiClient

ENTRY_TIME = datetime(2025, 3, 1, 6, 15, tzinfo=timezone.utc)


def _record_payload(**overrides) -> dict:
    payload = {
        "id": "r-1",
        "vehicleId": "v-1",
        "vehiclePlateNumber": "49B-01234",
        "driverId": "d-1",
        "driverName": "Phạm Văn Dũng",
        "routeId": "rt-1",
        "routeName": "Đà Lạt - Sài Gòn",
        "entryTime": "2025-03-01T06:15:00Z",
        "currentStatus": "entered",
    }
    payload.update(overrides)
    return payload


def _service(handler) -> DispatchService:
    return DispatchService(ApiClient(
        base_url="http://backend.test/api",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    ))


@pytest.mark.asyncio
async def test_get_all_filters_by_status():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[_record_payload(currentStatus="paid")])

    records = await _service(handler).get_all(DispatchStatus.PAID)

    assert seen[0].url.path == "/api/dispatch"
    assert dict(seen[0].url.params) == {"status": "paid"}
    assert records[0].current_status is DispatchStatus.PAID
    assert records[0].entry_time == ENTRY_TIME


@pytest.mark.asyncio
async def test_get_all_without_status_sends_no_query():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[])

    assert await _service(handler).get_all() == []
    assert seen[0].url.query == b""


@pytest.mark.asyncio
async def test_create_registers_entry():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201, json=_record_payload(id="r-new"))

    record = await _service(handler).create(DispatchCreate(
        vehicle_id="v-1", driver_id="d-1", route_id="rt-1", entry_time=ENTRY_TIME,
    ))

    body = json.loads(seen[0].content)
    assert seen[0].method == "POST"
    assert body["vehicleId"] == "v-1"
    assert "notes" not in body
    assert record.id == "r-new"


@pytest.mark.asyncio
async def test_update_status_sends_status_with_set_fields_only():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=_record_payload(
            currentStatus="passengers_dropped", passengersArrived=28,
        ))

    record = await _service(handler).update_status(
        "r-1",
        DispatchStatus.PASSENGERS_DROPPED,
        DispatchRecordPatch(passengers_arrived=28),
    )

    assert seen[0].method == "PATCH"
    assert seen[0].url.path == "/api/dispatch/r-1/status"
    assert json.loads(seen[0].content) == {"passengersArrived": 28, "status": "passengers_dropped"}
    assert record.passengers_arrived == 28


@pytest.mark.asyncio
async def test_issue_permit_posts_to_permit_action():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=_record_payload(
            currentStatus="permit_issued", permitStatus="approved", seatCount=29,
        ))

    record = await _service(handler).issue_permit("r-1", PermitRequest(
        permit_number="LV-0001", departure_time=ENTRY_TIME, seat_count=29,
    ))

    assert seen[0].url.path == "/api/dispatch/r-1/permit"
    assert json.loads(seen[0].content)["permitNumber"] == "LV-0001"
    assert record.permit_status is PermitStatus.APPROVED


@pytest.mark.asyncio
async def test_payment_and_depart_actions():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=_record_payload())

    service = _service(handler)
    await service.process_payment("r-1", 150000)
    await service.depart("r-1", ENTRY_TIME, 25)

    assert [r.url.path for r in seen] == ["/api/dispatch/r-1/payment", "/api/dispatch/r-1/depart"]
    assert json.loads(seen[0].content) == {"amount": 150000}
    assert json.loads(seen[1].content) == {"exitTime": "2025-03-01T06:15:00Z", "passengerCount": 25}


def test_negative_payment_is_rejected_locally():
    with pytest.raises(ValidationError):
        DispatchRecordPatch(payment_amount=-1)
