"""Client for the dispatch board resource (``/dispatch``).

Besides plain reads and entry registration, each stage of a vehicle's visit
has its own transition endpoint:

    PATCH /dispatch/<id>/status    generic status change (+ extra fields)
    POST  /dispatch/<id>/permit    boarding permit
    POST  /dispatch/<id>/payment   station fee payment
    POST  /dispatch/<id>/depart    exit through the gate
"""

import logging
from datetime import datetime
from typing import Any

from dispatch_board.application.interfaces import HttpClient
from dispatch_board.application.schemas import (
    DepartRequest,
    DispatchCreate,
    DispatchRecordPatch,
    DispatchRecordResponse,
    PaymentRequest,
    PermitRequest,
)
from dispatch_board.domain.entities import DispatchRecord, DispatchStatus

logger = logging.getLogger(__name__)


class DispatchService:
    """Reads dispatch records and drives their stage transitions."""

    collection_path = "/dispatch"

    def __init__(self, client: HttpClient):
        self._client = client

    @staticmethod
    def _to_record(payload: Any) -> DispatchRecord:
        return DispatchRecordResponse.model_validate(payload).to_entity()

    def _record_path(self, record_id: str, action: str = "") -> str:
        path = f"{self.collection_path}/{record_id}"
        return f"{path}/{action}" if action else path

    async def get_all(self, status: DispatchStatus | None = None) -> list[DispatchRecord]:
        params = {"status": DispatchStatus(status).value} if status else None
        data = await self._client.get(self.collection_path, params=params)
        return [self._to_record(item) for item in data or []]

    async def get_by_id(self, record_id: str) -> DispatchRecord:
        data = await self._client.get(self._record_path(record_id))
        return self._to_record(data)

    async def create(self, data: DispatchCreate) -> DispatchRecord:
        created = await self._client.post(self.collection_path, json=data.to_payload())
        record = self._to_record(created)
        logger.info("Vehicle %s entered (record %s)", record.vehicle_plate_number, record.id)
        return record

    async def update_status(
        self,
        record_id: str,
        status: DispatchStatus,
        updates: DispatchRecordPatch | None = None,
    ) -> DispatchRecord:
        body = updates.to_payload(partial=True) if updates is not None else {}
        body["status"] = DispatchStatus(status).value
        data = await self._client.patch(self._record_path(record_id, "status"), json=body)
        return self._to_record(data)

    async def issue_permit(self, record_id: str, permit: PermitRequest) -> DispatchRecord:
        data = await self._client.post(
            self._record_path(record_id, "permit"), json=permit.to_payload()
        )
        return self._to_record(data)

    async def process_payment(self, record_id: str, amount: float) -> DispatchRecord:
        body = PaymentRequest(amount=amount).to_payload()
        data = await self._client.post(self._record_path(record_id, "payment"), json=body)
        return self._to_record(data)

    async def depart(
        self, record_id: str, exit_time: datetime, passenger_count: int
    ) -> DispatchRecord:
        body = DepartRequest(exit_time=exit_time, passenger_count=passenger_count).to_payload()
        data = await self._client.post(self._record_path(record_id, "depart"), json=body)
        return self._to_record(data)
