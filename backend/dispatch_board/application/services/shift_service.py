"""Client for the dispatcher shift catalogue."""

import logging

from dispatch_board.application.schemas import ShiftCreate, ShiftResponse, ShiftUpdate
from dispatch_board.application.services.entity_service import EntityService
from dispatch_board.domain.entities import Shift
from dispatch_board.domain.exceptions import HttpError, NetworkError

logger = logging.getLogger(__name__)

# Shifts used by stations whose backend does not expose /shifts.
DEFAULT_SHIFTS: tuple[Shift, ...] = (
    Shift(id="1", name="Ca 1", start_time="06:00", end_time="14:00"),
    Shift(id="2", name="Ca 2", start_time="14:00", end_time="22:00"),
    Shift(id="3", name="Ca 3", start_time="22:00", end_time="06:00"),
    Shift(id="4", name="Hành chính", start_time="07:30", end_time="17:00"),
)


class ShiftService(EntityService[Shift, ShiftCreate, ShiftUpdate]):
    collection_path = "/shifts"
    response_schema = ShiftResponse

    async def get_all(self) -> list[Shift]:
        """List shifts, falling back to ``DEFAULT_SHIFTS`` when the API is unavailable."""
        try:
            return await self._fetch_all()
        except (NetworkError, HttpError) as exc:
            logger.warning("Shifts API not available, using default shifts: %s", exc)
            return list(DEFAULT_SHIFTS)
