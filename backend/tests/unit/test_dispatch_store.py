"""Unit tests for the client-side dispatch and UI stores."""

from datetime import datetime

import pytest

from dispatch_board.application.state import NO_SHIFT, DispatchStore, UiStore
from dispatch_board.domain.entities import DispatchRecord, DispatchStatus


def _record(record_id: str, **overrides) -> DispatchRecord:
    fields = dict(
        id=record_id,
        vehicle_id=f"v-{record_id}",
        vehicle_plate_number="49B-01234",
        driver_id="d-1",
        driver_name="Phạm Văn Dũng",
        route_id="rt-1",
        route_name="Đà Lạt - Sài Gòn",
        entry_time=datetime(2025, 3, 1, 6, 15),
    )
    fields.update(overrides)
    return DispatchRecord(**fields)


# ── DispatchStore ──


def test_initial_state():
    store = DispatchStore()

    assert store.records == ()
    assert store.selected_record is None
    assert store.active_tab == "all"


def test_update_record_merges_and_keeps_other_records():
    a, b, c = _record("a"), _record("b"), _record("c")
    store = DispatchStore()
    store.set_records([a, b, c])

    store.update_record("b", {"current_status": DispatchStatus.PAID, "payment_amount": 150000.0})

    assert [r.id for r in store.records] == ["a", "b", "c"]
    assert store.records[0] is a
    assert store.records[2] is c
    assert store.records[1].current_status is DispatchStatus.PAID
    assert store.records[1].payment_amount == 150000.0
    assert store.records[1].vehicle_id == "v-b"
    # The original record object is not mutated
    assert b.current_status is DispatchStatus.ENTERED


def test_update_record_unknown_id_is_a_no_op():
    a = _record("a")
    store = DispatchStore()
    store.set_records([a])

    store.update_record("zzz", {"notes": "x"})

    assert store.records == (a,)
    assert store.records[0] is a


def test_update_record_with_unknown_field_raises():
    store = DispatchStore()
    store.set_records([_record("a")])

    with pytest.raises(TypeError):
        store.update_record("a", {"no_such_field": 1})


def test_add_record_prepends():
    store = DispatchStore()
    store.set_records([_record("old")])

    store.add_record(_record("new"))

    assert [r.id for r in store.records] == ["new", "old"]


def test_set_active_tab_accepts_statuses_and_all():
    store = DispatchStore()

    store.set_active_tab("departed")
    assert store.active_tab is DispatchStatus.DEPARTED

    store.set_active_tab("all")
    assert store.active_tab == "all"


def test_set_active_tab_rejects_unknown_values():
    store = DispatchStore()

    with pytest.raises(ValueError):
        store.set_active_tab("archived")
    assert store.active_tab == "all"


def test_selection_is_stored_as_given():
    record = _record("a")
    store = DispatchStore()

    store.set_selected_record(record)
    assert store.selected_record is record

    store.set_selected_record(None)
    assert store.selected_record is None


def test_subscribers_receive_new_and_previous_state():
    store = DispatchStore()
    calls = []
    store.subscribe(lambda new, old: calls.append((new, old)))

    store.add_record(_record("a"))

    assert len(calls) == 1
    new, old = calls[0]
    assert old.records == ()
    assert [r.id for r in new.records] == ["a"]


def test_unsubscribe_and_close():
    store = DispatchStore()
    calls = []
    unsubscribe = store.subscribe(lambda new, old: calls.append("first"))
    store.subscribe(lambda new, old: calls.append("second"))

    unsubscribe()
    unsubscribe()
    store.set_active_tab("paid")
    assert calls == ["second"]

    store.close()
    store.set_active_tab("all")
    assert calls == ["second"]
    assert store.listener_count == 0


# ── UiStore ──


def test_ui_store_starts_without_shift():
    store = UiStore()

    assert store.current_shift == NO_SHIFT == "<Trống>"
    assert store.title == ""


def test_ui_store_setters():
    store = UiStore()
    seen = []
    store.subscribe(lambda new, old: seen.append(new.current_shift))

    store.set_title("Điều độ")
    store.set_current_shift("Sáng")

    assert store.title == "Điều độ"
    assert store.current_shift == "Sáng"
    assert seen == ["<Trống>", "Sáng"]


# ── Listener errors ──


def test_failing_listener_does_not_starve_later_listeners():
    store = DispatchStore()
    store.set_records([_record("a")])
    seen = []

    def broken(new, old):
        raise RuntimeError("render failed")

    store.subscribe(broken)
    store.subscribe(lambda new, old: seen.append(new.records[0].current_status))

    with pytest.raises(RuntimeError, match="render failed"):
        store.update_record("a", {"current_status": DispatchStatus.PAID})

    assert store.records[0].current_status is DispatchStatus.PAID
    assert seen == [DispatchStatus.PAID]
