"""Unit tests for DispatchSyncService (server first, then the store)."""

from datetime import datetime
from unittest.mock import AsyncMock

import pytest

from dispatch_board.application.schemas import DispatchCreate
from dispatch_board.application.services import DispatchService, DispatchSyncService
from dispatch_board.application.state import DispatchStore
from dispatch_board.domain.entities import DispatchRecord, DispatchStatus
from dispatch_board.domain.exceptions import HttpError

ENTRY_TIME = datetime(2025, 3, 1, 6, 15)


def _record(record_id: str, **overrides) -> DispatchRecord:
    fields = dict(
        id=record_id,
        vehicle_id="v-1",
        vehicle_plate_number="49B-01234",
        driver_id="d-1",
        driver_name="Phạm Văn Dũng",
        route_id="rt-1",
        route_name="Đà Lạt - Sài Gòn",
        entry_time=ENTRY_TIME,
    )
    fields.update(overrides)
    return DispatchRecord(**fields)


def _sync(**methods) -> tuple[DispatchSyncService, DispatchStore]:
    dispatch = AsyncMock(spec=DispatchService)
    for name, value in methods.items():
        setattr(dispatch, name, value)
    store = DispatchStore()
    return DispatchSyncService(dispatch, store), store


@pytest.mark.asyncio
async def test_load_records_replaces_store_contents():
    records = [_record("a"), _record("b")]
    sync, store = _sync(get_all=AsyncMock(return_value=records))
    store.set_records([_record("stale")])

    await sync.load_records(DispatchStatus.ENTERED)

    assert [r.id for r in store.records] == ["a", "b"]


@pytest.mark.asyncio
async def test_register_entry_prepends_server_record():
    sync, store = _sync(create=AsyncMock(return_value=_record("new")))
    store.set_records([_record("old")])

    await sync.register_entry(DispatchCreate(
        vehicle_id="v-1", driver_id="d-1", route_id="rt-1", entry_time=ENTRY_TIME,
    ))

    assert [r.id for r in store.records] == ["new", "old"]


@pytest.mark.asyncio
async def test_change_status_merges_result_and_refreshes_selection():
    original = _record("a")
    updated = _record("a", current_status=DispatchStatus.PAID, payment_amount=150000.0)
    sync, store = _sync(update_status=AsyncMock(return_value=updated))
    other = _record("b")
    store.set_records([original, other])
    store.set_selected_record(original)

    await sync.change_status("a", DispatchStatus.PAID)

    assert store.records[0].current_status is DispatchStatus.PAID
    assert store.records[1] is other
    assert store.selected_record.payment_amount == 150000.0


@pytest.mark.asyncio
async def test_failed_request_leaves_store_unchanged():
    failing = AsyncMock(side_effect=HttpError(500, "boom"))
    sync, store = _sync(process_payment=failing)
    record = _record("a")
    store.set_records([record])

    with pytest.raises(HttpError):
        await sync.process_payment("a", 150000)

    assert store.records == (record,)


def test_select_unknown_record_clears_selection():
    sync, store = _sync()
    record = _record("a")
    store.set_records([record])

    assert sync.select("a") is record
    assert store.selected_record is record

    assert sync.select("missing") is None
    assert store.selected_record is None
