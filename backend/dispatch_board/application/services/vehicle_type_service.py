from dispatch_board.application.schemas import (
    VehicleTypeCreate,
    VehicleTypeResponse,
    VehicleTypeUpdate,
)
from dispatch_board.application.services.entity_service import EntityService
from dispatch_board.domain.entities import VehicleType


class VehicleTypeService(EntityService[VehicleType, VehicleTypeCreate, VehicleTypeUpdate]):
    """Vehicle categories. The collection has no filters."""

    collection_path = "/vehicle-types"
    response_schema = VehicleTypeResponse

    async def get_all(self) -> list[VehicleType]:
        return await self._fetch_all()
