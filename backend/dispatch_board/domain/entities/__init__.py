from .driver import Driver
from .location import Location
from .operator import Operator
from .service import Service
from .service_formula import FormulaType, ServiceFormula
from .vehicle_type import VehicleType
from .vehicle import Vehicle, VehicleDocument
from .route import Route, RouteStop
from .schedule import FrequencyType, Schedule
from .shift import Shift
from .dispatch_record import (
    ALL_TAB,
    DispatchRecord,
    DispatchStatus,
    DispatchTab,
    PaymentMethod,
    PermitStatus,
)

__all__ = [
    "Driver",
    "Location",
    "Operator",
    "Service",
    "FormulaType",
    "ServiceFormula",
    "VehicleType",
    "Vehicle",
    "VehicleDocument",
    "Route",
    "RouteStop",
    "FrequencyType",
    "Schedule",
    "Shift",
    "ALL_TAB",
    "DispatchRecord",
    "DispatchStatus",
    "DispatchTab",
    "PaymentMethod",
    "PermitStatus",
]
