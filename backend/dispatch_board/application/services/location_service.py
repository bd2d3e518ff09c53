from dispatch_board.application.schemas import (
    LocationCreate,
    LocationFilter,
    LocationResponse,
    LocationUpdate,
)
from dispatch_board.application.services.entity_service import FilterableEntityService
from dispatch_board.domain.entities import Location


class LocationService(FilterableEntityService[Location, LocationCreate, LocationUpdate, LocationFilter]):
    """Stations and stops, filterable by province and active flag."""

    collection_path = "/locations"
    response_schema = LocationResponse
