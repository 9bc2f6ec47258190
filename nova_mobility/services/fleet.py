import logging

from sqlalchemy import case, func, or_, select
from sqlalchemy.orm import Session

from ..config import settings
from ..exceptions import NotFoundError, PreconditionFailed
from ..models import (
    DroneVehicle,
    Hub,
    MaintenanceLog,
    MaintenanceOrder,
    MaintenancePriorityEnum,
    MaintenanceStatusEnum,
    ScooterVehicle,
    User,
    Vehicle,
    VehicleStatusEnum,
)
from ..schemas import DroneVehicleCreate, MaintenanceOrderCreate, VehicleCreate

logger = logging.getLogger(__name__)

_PRIORITY_RANK = {
    MaintenancePriorityEnum.CRITICAL.value: 4,
    MaintenancePriorityEnum.HIGH.value: 3,
    MaintenancePriorityEnum.MEDIUM.value: 2,
    MaintenancePriorityEnum.LOW.value: 1,
}

_OPEN_STATUSES = (
    MaintenanceStatusEnum.OPEN.value,
    MaintenanceStatusEnum.IN_PROGRESS.value,
)


def create_vehicle(db: Session, payload: VehicleCreate) -> Vehicle:
    common = {
        "hub_id": payload.hub_id,
        "serial_number": payload.serial_number,
        "status": payload.status.value,
        "battery_pct": payload.battery_pct,
    }
    if isinstance(payload, DroneVehicleCreate):
        vehicle: Vehicle = DroneVehicle(drone_model_id=payload.drone_model_id, **common)
    else:
        vehicle = ScooterVehicle(scooter_model_id=payload.scooter_model_id, **common)
    db.add(vehicle)
    db.commit()
    db.refresh(vehicle)
    logger.info("Created %s vehicle %s", vehicle.type, vehicle.serial_number)
    return vehicle


def vehicles_needing_maintenance(db: Session, battery_threshold: int | None = None):
    """Vehicles under the battery threshold or already flagged for maintenance."""
    if battery_threshold is None:
        battery_threshold = settings.maintenance_battery_threshold
    stmt = (
        select(
            Vehicle.id,
            Vehicle.type,
            Vehicle.serial_number,
            Vehicle.status,
            Vehicle.battery_pct,
            Hub.name.label("hub_name"),
        )
        .join(Hub, Hub.id == Vehicle.hub_id)
        .where(
            or_(
                Vehicle.battery_pct < battery_threshold,
                Vehicle.status == VehicleStatusEnum.MAINTENANCE.value,
            )
        )
        .order_by(Vehicle.battery_pct, Vehicle.id)
    )
    return db.execute(stmt).all()


def open_maintenance_orders(db: Session):
    """Open and in-progress orders, most urgent first, with their latest log time."""
    last_log = (
        select(
            MaintenanceLog.maintenance_order_id,
            func.max(MaintenanceLog.entry_at).label("last_log_at"),
        )
        .group_by(MaintenanceLog.maintenance_order_id)
        .subquery()
    )
    priority_rank = case(_PRIORITY_RANK, value=MaintenanceOrder.priority, else_=0)
    stmt = (
        select(
            MaintenanceOrder.id,
            MaintenanceOrder.status,
            MaintenanceOrder.priority,
            MaintenanceOrder.opened_at,
            Vehicle.serial_number,
            last_log.c.last_log_at,
        )
        .join(Vehicle, Vehicle.id == MaintenanceOrder.vehicle_id)
        .outerjoin(last_log, last_log.c.maintenance_order_id == MaintenanceOrder.id)
        .where(MaintenanceOrder.status.in_(_OPEN_STATUSES))
        .order_by(priority_rank.desc(), MaintenanceOrder.id.desc())
    )
    return db.execute(stmt).all()


def open_maintenance_order(db: Session, payload: MaintenanceOrderCreate) -> MaintenanceOrder:
    if db.get(Vehicle, payload.vehicle_id) is None:
        raise NotFoundError("Vehicle", payload.vehicle_id)
    order = MaintenanceOrder(
        vehicle_id=payload.vehicle_id,
        opened_by_user_id=payload.opened_by_user_id,
        status=MaintenanceStatusEnum.OPEN.value,
        priority=payload.priority.value,
        notes=payload.notes,
    )
    db.add(order)
    db.commit()
    db.refresh(order)
    return order


def append_maintenance_log(
    db: Session, order_id: int, user_id: int, entry: str
) -> MaintenanceLog:
    if db.get(MaintenanceOrder, order_id) is None:
        raise NotFoundError("MaintenanceOrder", order_id)
    if db.get(User, user_id) is None:
        raise NotFoundError("User", user_id)
    log = MaintenanceLog(
        maintenance_order_id=order_id, logged_by_user_id=user_id, entry=entry
    )
    db.add(log)
    db.commit()
    db.refresh(log)
    return log


def close_maintenance_order(db: Session, order_id: int) -> MaintenanceOrder:
    order = db.get(MaintenanceOrder, order_id)
    if order is None:
        raise NotFoundError("MaintenanceOrder", order_id)
    if order.status == MaintenanceStatusEnum.CLOSED.value:
        raise PreconditionFailed(f"Maintenance order {order_id} is already closed")
    order.status = MaintenanceStatusEnum.CLOSED.value
    order.closed_at = func.now()
    try:
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Closing maintenance order %s failed", order_id)
        raise
    db.refresh(order)
    logger.info("Closed maintenance order %s", order_id)
    return order
