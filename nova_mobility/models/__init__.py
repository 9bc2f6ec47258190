from .address import Address
from .base import AppendOnly, Base
from .catalog_item import CatalogItem
from .change_log import ChangeLog, ChangeOperationEnum
from .city import City
from .customer import Customer
from .event import Event
from .hub import Hub
from .invoice import Invoice, InvoiceStatusEnum
from .invoice_line import InvoiceLine, compute_line_total
from .maintenance import (
    MaintenanceLog,
    MaintenanceOrder,
    MaintenancePriorityEnum,
    MaintenanceStatusEnum,
)
from .merchant import Merchant
from .order import Order, OrderItem, OrderStatusEnum
from .organization import Organization, OrganizationTypeEnum
from .package import Package
from .payment import Payment, PaymentMethodEnum
from .person import Person
from .proof_of_delivery import PodMethodEnum, ProofOfDelivery
from .role import Role, UserRole
from .route import Assignment, Route, RouteStatusEnum, RouteStop, StopPurposeEnum
from .ticket import Ticket, TicketMessage, TicketPriorityEnum, TicketStatusEnum
from .user import User
from .vehicle import (
    VEHICLE_CLASSES,
    DroneVehicle,
    ScooterVehicle,
    Vehicle,
    VehicleStatusEnum,
    VehicleTypeEnum,
)
from .vehicle_battery import VehicleBattery
from .vehicle_model import DroneModel, ScooterModel
from .zone import Zone

__all__ = [
    "AppendOnly",
    "Base",
    "City",
    "Zone",
    "Address",
    "Organization",
    "OrganizationTypeEnum",
    "Person",
    "User",
    "Role",
    "UserRole",
    "Hub",
    "DroneModel",
    "ScooterModel",
    "Vehicle",
    "DroneVehicle",
    "ScooterVehicle",
    "VEHICLE_CLASSES",
    "VehicleTypeEnum",
    "VehicleStatusEnum",
    "VehicleBattery",
    "MaintenanceOrder",
    "MaintenanceLog",
    "MaintenanceStatusEnum",
    "MaintenancePriorityEnum",
    "Merchant",
    "CatalogItem",
    "Customer",
    "Invoice",
    "InvoiceStatusEnum",
    "InvoiceLine",
    "compute_line_total",
    "Payment",
    "PaymentMethodEnum",
    "Order",
    "OrderItem",
    "OrderStatusEnum",
    "Package",
    "Route",
    "RouteStop",
    "Assignment",
    "RouteStatusEnum",
    "StopPurposeEnum",
    "ProofOfDelivery",
    "PodMethodEnum",
    "Event",
    "Ticket",
    "TicketMessage",
    "TicketStatusEnum",
    "TicketPriorityEnum",
    "ChangeLog",
    "ChangeOperationEnum",
]
