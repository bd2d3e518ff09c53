"""Keeps the dispatch store in step with the dispatch API.

Every call goes to the server first; the store is only touched with what the
server returned, so a failed request leaves local state as it was.
"""

import dataclasses
import logging
from datetime import datetime

from dispatch_board.application.schemas import DispatchCreate, DispatchRecordPatch, PermitRequest
from dispatch_board.application.services.dispatch_service import DispatchService
from dispatch_board.application.state import DispatchStore
from dispatch_board.domain.entities import DispatchRecord, DispatchStatus

logger = logging.getLogger(__name__)

_IMMUTABLE_FIELDS = frozenset({"id"})


class DispatchSyncService:
    """Routes dispatch-service results into a ``DispatchStore``."""

    def __init__(self, dispatch_service: DispatchService, store: DispatchStore):
        self._dispatch = dispatch_service
        self._store = store

    async def load_records(self, status: DispatchStatus | None = None) -> list[DispatchRecord]:
        records = await self._dispatch.get_all(status)
        self._store.set_records(records)
        logger.debug("Dispatch board loaded: %d record(s)", len(records))
        return records

    async def register_entry(self, data: DispatchCreate) -> DispatchRecord:
        record = await self._dispatch.create(data)
        self._store.add_record(record)
        return record

    async def change_status(
        self,
        record_id: str,
        status: DispatchStatus,
        updates: DispatchRecordPatch | None = None,
    ) -> DispatchRecord:
        record = await self._dispatch.update_status(record_id, status, updates)
        self._apply(record)
        return record

    async def issue_permit(self, record_id: str, permit: PermitRequest) -> DispatchRecord:
        record = await self._dispatch.issue_permit(record_id, permit)
        self._apply(record)
        return record

    async def process_payment(self, record_id: str, amount: float) -> DispatchRecord:
        record = await self._dispatch.process_payment(record_id, amount)
        self._apply(record)
        return record

    async def depart(
        self, record_id: str, exit_time: datetime, passenger_count: int
    ) -> DispatchRecord:
        record = await self._dispatch.depart(record_id, exit_time, passenger_count)
        self._apply(record)
        return record

    def select(self, record_id: str | None) -> DispatchRecord | None:
        """Select the stored record with ``record_id``; ``None`` clears the selection."""
        selected = None
        if record_id is not None:
            selected = next((r for r in self._store.records if r.id == record_id), None)
            if selected is None:
                logger.debug("Record %s is not on the board; clearing selection", record_id)
        self._store.set_selected_record(selected)
        return selected

    def _apply(self, record: DispatchRecord) -> None:
        updates = {
            f.name: getattr(record, f.name)
            for f in dataclasses.fields(record)
            if f.name not in _IMMUTABLE_FIELDS
        }
        self._store.update_record(record.id, updates)

        selected = self._store.selected_record
        if selected is not None and selected.id == record.id:
            self._store.set_selected_record(dataclasses.replace(selected, **updates))
