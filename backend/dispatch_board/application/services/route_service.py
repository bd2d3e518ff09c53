from dispatch_board.application.schemas import RouteCreate, RouteFilter, RouteResponse, RouteUpdate
from dispatch_board.application.services.entity_service import FilterableEntityService
from dispatch_board.domain.entities import Route


class RouteService(FilterableEntityService[Route, RouteCreate, RouteUpdate, RouteFilter]):
    """Routes, filterable by origin, destination and active flag."""

    collection_path = "/routes"
    response_schema = RouteResponse
