from .analytics import EventCreate
from .billing import (
    CustomerCreate,
    InvoiceBalance,
    InvoiceCreate,
    InvoiceLineCreate,
    PaymentCreate,
)
from .commerce import CatalogItemCreate
from .delivery import (
    OrderCreate,
    OrderItemCreate,
    ProofOfDeliveryCreate,
    RouteStopCreate,
)
from .fleet import (
    DroneVehicleCreate,
    MaintenanceOrderCreate,
    ScooterVehicleCreate,
    VehicleCreate,
    vehicle_create_adapter,
)
from .reference import ZoneUpsert
from .support import TicketCreate

__all__ = [
    "CatalogItemCreate",
    "CustomerCreate",
    "DroneVehicleCreate",
    "EventCreate",
    "InvoiceBalance",
    "InvoiceCreate",
    "InvoiceLineCreate",
    "MaintenanceOrderCreate",
    "OrderCreate",
    "OrderItemCreate",
    "PaymentCreate",
    "ProofOfDeliveryCreate",
    "RouteStopCreate",
    "ScooterVehicleCreate",
    "TicketCreate",
    "VehicleCreate",
    "ZoneUpsert",
    "vehicle_create_adapter",
]
