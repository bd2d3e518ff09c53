from dispatch_board.application.schemas import DriverCreate, DriverFilter, DriverResponse, DriverUpdate
from dispatch_board.application.services.entity_service import FilterableEntityService
from dispatch_board.domain.entities import Driver


class DriverService(FilterableEntityService[Driver, DriverCreate, DriverUpdate, DriverFilter]):
    """Drivers, filterable by operator and active flag."""

    collection_path = "/drivers"
    response_schema = DriverResponse
