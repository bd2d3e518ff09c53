from dispatch_board.application.schemas import (
    ActiveFilter,
    OperatorCreate,
    OperatorResponse,
    OperatorUpdate,
)
from dispatch_board.application.services.entity_service import FilterableEntityService
from dispatch_board.domain.entities import Operator


class OperatorService(FilterableEntityService[Operator, OperatorCreate, OperatorUpdate, ActiveFilter]):
    """Transport operators, filterable by active flag."""

    collection_path = "/operators"
    response_schema = OperatorResponse
