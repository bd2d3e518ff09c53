from .entity_service import EntityService, FilterableEntityService
from .driver_service import DriverService
from .location_service import LocationService
from .operator_service import OperatorService
from .service_service import ServiceService
from .service_formula_service import ServiceFormulaService
from .vehicle_type_service import VehicleTypeService
from .vehicle_service import VehicleService
from .route_service import RouteService
from .schedule_service import ScheduleService
from .shift_service import DEFAULT_SHIFTS, ShiftService
from .dispatch_service import DispatchService
from .dispatch_sync_service import DispatchSyncService

__all__ = [
    "EntityService",
    "FilterableEntityService",
    "DriverService",
    "LocationService",
    "OperatorService",
    "ServiceService",
    "ServiceFormulaService",
    "VehicleTypeService",
    "VehicleService",
    "RouteService",
    "ScheduleService",
    "DEFAULT_SHIFTS",
    "ShiftService",
    "DispatchService",
    "DispatchSyncService",
]
