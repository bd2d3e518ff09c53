from dispatch_board.application.schemas import (
    ServiceFormulaCreate,
    ServiceFormulaFilter,
    ServiceFormulaResponse,
    ServiceFormulaUpdate,
)
from dispatch_board.application.services.entity_service import FilterableEntityService
from dispatch_board.domain.entities import ServiceFormula


class ServiceFormulaService(
    FilterableEntityService[
        ServiceFormula, ServiceFormulaCreate, ServiceFormulaUpdate, ServiceFormulaFilter
    ]
):
    """Quantity and price formulas, filterable by formula type and active flag."""

    collection_path = "/service-formulas"
    response_schema = ServiceFormulaResponse
