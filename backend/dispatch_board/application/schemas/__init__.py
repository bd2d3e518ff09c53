from .base import ActiveFilter, CamelModel, EntityFilter, EntityResponse
from .driver import DriverCreate, DriverFilter, DriverResponse, DriverUpdate
from .location import LocationCreate, LocationFilter, LocationResponse, LocationUpdate
from .operator import OperatorCreate, OperatorResponse, OperatorUpdate
from .service import ServiceCreate, ServiceResponse, ServiceUpdate
from .service_formula import (
    ServiceFormulaCreate,
    ServiceFormulaFilter,
    ServiceFormulaResponse,
    ServiceFormulaUpdate,
)
from .vehicle_type import VehicleTypeCreate, VehicleTypeResponse, VehicleTypeUpdate
from .vehicle import VehicleCreate, VehicleDocumentSchema, VehicleResponse, VehicleUpdate
from .route import RouteCreate, RouteFilter, RouteResponse, RouteStopSchema, RouteUpdate
from .schedule import ScheduleCreate, ScheduleFilter, ScheduleResponse, ScheduleUpdate
from .shift import ShiftCreate, ShiftResponse, ShiftUpdate
from .dispatch import (
    DepartRequest,
    DispatchCreate,
    DispatchRecordPatch,
    DispatchRecordResponse,
    PaymentRequest,
    PermitRequest,
)
from .upload import UploadedImageSchema

__all__ = [
    "ActiveFilter",
    "CamelModel",
    "EntityFilter",
    "EntityResponse",
    "DriverCreate",
    "DriverFilter",
    "DriverResponse",
    "DriverUpdate",
    "LocationCreate",
    "LocationFilter",
    "LocationResponse",
    "LocationUpdate",
    "OperatorCreate",
    "OperatorResponse",
    "OperatorUpdate",
    "ServiceCreate",
    "ServiceResponse",
    "ServiceUpdate",
    "ServiceFormulaCreate",
    "ServiceFormulaFilter",
    "ServiceFormulaResponse",
    "ServiceFormulaUpdate",
    "VehicleTypeCreate",
    "VehicleTypeResponse",
    "VehicleTypeUpdate",
    "VehicleCreate",
    "VehicleDocumentSchema",
    "VehicleResponse",
    "VehicleUpdate",
    "RouteCreate",
    "RouteFilter",
    "RouteResponse",
    "RouteStopSchema",
    "RouteUpdate",
    "ScheduleCreate",
    "ScheduleFilter",
    "ScheduleResponse",
    "ScheduleUpdate",
    "ShiftCreate",
    "ShiftResponse",
    "ShiftUpdate",
    "DepartRequest",
    "DispatchCreate",
    "DispatchRecordPatch",
    "DispatchRecordResponse",
    "PaymentRequest",
    "PermitRequest",
    "UploadedImageSchema",
]
