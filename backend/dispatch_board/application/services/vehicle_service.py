from dispatch_board.application.schemas import VehicleCreate, VehicleResponse, VehicleUpdate
from dispatch_board.application.services.entity_service import EntityService
from dispatch_board.domain.entities import Vehicle


class VehicleService(EntityService[Vehicle, VehicleCreate, VehicleUpdate]):
    """Registered vehicles. The collection has no filters."""

    collection_path = "/vehicles"
    response_schema = VehicleResponse

    async def get_all(self) -> list[Vehicle]:
        return await self._fetch_all()
