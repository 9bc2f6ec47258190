from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from datetime import date, datetime, timedelta
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from . import seed_data
from .db import SessionLocal, create_schema, engine
from .logging_config import configure_logging
from .models import (
    VEHICLE_CLASSES,
    Address,
    Assignment,
    Base,
    CatalogItem,
    ChangeLog,
    City,
    Customer,
    DroneModel,
    Event,
    Hub,
    Invoice,
    InvoiceLine,
    MaintenanceLog,
    MaintenanceOrder,
    Merchant,
    Order,
    OrderItem,
    Organization,
    Package,
    Payment,
    Person,
    ProofOfDelivery,
    Role,
    Route,
    RouteStop,
    ScooterModel,
    Ticket,
    TicketMessage,
    User,
    UserRole,
    Vehicle,
    VehicleBattery,
    Zone,
)
from .models.base import utcnow
from .services.security import hash_password

logger = logging.getLogger(__name__)

# Parents before children.
SEED_PLAN: list[tuple[type[Base], tuple[str, ...], list[tuple]]] = [
    (City, seed_data.CITIES_COLUMNS, seed_data.CITIES),
    (Zone, seed_data.ZONES_COLUMNS, seed_data.ZONES),
    (Address, seed_data.ADDRESSES_COLUMNS, seed_data.ADDRESSES),
    (Organization, seed_data.ORGANIZATIONS_COLUMNS, seed_data.ORGANIZATIONS),
    (Person, seed_data.PERSONS_COLUMNS, seed_data.PERSONS),
    (User, seed_data.USERS_COLUMNS, seed_data.USERS),
    (Role, seed_data.ROLES_COLUMNS, seed_data.ROLES),
    (UserRole, seed_data.USER_ROLES_COLUMNS, seed_data.USER_ROLES),
    (Hub, seed_data.HUBS_COLUMNS, seed_data.HUBS),
    (DroneModel, seed_data.DRONE_MODELS_COLUMNS, seed_data.DRONE_MODELS),
    (ScooterModel, seed_data.SCOOTER_MODELS_COLUMNS, seed_data.SCOOTER_MODELS),
    (Vehicle, seed_data.VEHICLES_COLUMNS, seed_data.VEHICLES),
    (VehicleBattery, seed_data.VEHICLE_BATTERIES_COLUMNS, seed_data.VEHICLE_BATTERIES),
    (MaintenanceOrder, seed_data.MAINTENANCE_ORDERS_COLUMNS, seed_data.MAINTENANCE_ORDERS),
    (MaintenanceLog, seed_data.MAINTENANCE_LOGS_COLUMNS, seed_data.MAINTENANCE_LOGS),
    (Merchant, seed_data.MERCHANTS_COLUMNS, seed_data.MERCHANTS),
    (CatalogItem, seed_data.CATALOG_ITEMS_COLUMNS, seed_data.CATALOG_ITEMS),
    (Customer, seed_data.CUSTOMERS_COLUMNS, seed_data.CUSTOMERS),
    (Invoice, seed_data.INVOICES_COLUMNS, seed_data.INVOICES),
    (InvoiceLine, seed_data.INVOICE_LINES_COLUMNS, seed_data.INVOICE_LINES),
    (Payment, seed_data.PAYMENTS_COLUMNS, seed_data.PAYMENTS),
    (Order, seed_data.ORDERS_COLUMNS, seed_data.ORDERS),
    (OrderItem, seed_data.ORDER_ITEMS_COLUMNS, seed_data.ORDER_ITEMS),
    (Package, seed_data.PACKAGES_COLUMNS, seed_data.PACKAGES),
    (Route, seed_data.ROUTES_COLUMNS, seed_data.ROUTES),
    (RouteStop, seed_data.ROUTE_STOPS_COLUMNS, seed_data.ROUTE_STOPS),
    (Assignment, seed_data.ASSIGNMENTS_COLUMNS, seed_data.ASSIGNMENTS),
    (ProofOfDelivery, seed_data.PROOFS_OF_DELIVERY_COLUMNS, seed_data.PROOFS_OF_DELIVERY),
    (Event, seed_data.EVENTS_COLUMNS, seed_data.EVENTS),
    (Ticket, seed_data.TICKETS_COLUMNS, seed_data.TICKETS),
    (TicketMessage, seed_data.TICKET_MESSAGES_COLUMNS, seed_data.TICKET_MESSAGES),
    (ChangeLog, seed_data.CHANGE_LOG_COLUMNS, seed_data.CHANGE_LOG),
]


def _coerce(value):
    # Sample numerics are written as float literals; store them exactly.
    if isinstance(value, float):
        return Decimal(str(value))
    return value


def seed_values(columns: tuple[str, ...], rows: list[tuple]) -> Iterator[dict]:
    for row in rows:
        yield {column: _coerce(value) for column, value in zip(columns, row)}


def _build_user(values: dict, now: datetime) -> User:
    values["password_hash"] = hash_password(values["password_hash"])
    return User(**values)


def _build_zone(values: dict, now: datetime) -> Zone:
    values["is_restricted"] = bool(values["is_restricted"])
    return Zone(**values)


def _build_vehicle(values: dict, now: datetime) -> Vehicle:
    vehicle_cls = VEHICLE_CLASSES[values.pop("type")]
    return vehicle_cls(**values)


def _build_invoice(values: dict, now: datetime) -> Invoice:
    values["issue_date"] = date.fromisoformat(values["issue_date"])
    values["due_date"] = date.fromisoformat(values["due_date"])
    return Invoice(**values)


def _build_route(values: dict, now: datetime) -> Route:
    values["planned_start_at"] = now + timedelta(hours=values["planned_start_at"])
    values["planned_end_at"] = now + timedelta(hours=values["planned_end_at"])
    return Route(**values)


BUILDERS: dict[type[Base], Callable[[dict, datetime], Base]] = {
    User: _build_user,
    Zone: _build_zone,
    Vehicle: _build_vehicle,
    Invoice: _build_invoice,
    Route: _build_route,
}


def seed_all(session: Session) -> dict[str, int]:
    """Load the sample data set and return the number of rows added per table.

    Tables that already hold rows are left alone.
    """
    now = utcnow()
    created: dict[str, int] = {}
    try:
        for model, columns, rows in SEED_PLAN:
            table = model.__tablename__
            existing = session.scalar(select(func.count()).select_from(model))
            if existing:
                logger.info("Skipping %s: %s rows present", table, existing)
                created[table] = 0
                continue
            build = BUILDERS.get(model)
            for values in seed_values(columns, rows):
                session.add(build(values, now) if build else model(**values))
            # Flush per table so ids follow list order before children refer to them.
            session.flush()
            created[table] = len(rows)
        session.commit()
    except Exception:
        session.rollback()
        logger.exception("Seeding failed")
        raise
    return created


def main() -> None:
    configure_logging()
    create_schema(engine)
    with SessionLocal() as session:
        created = seed_all(session)
    for table, count in created.items():
        print(f"Seeded {table}: {count}")


if __name__ == "__main__":
    main()
