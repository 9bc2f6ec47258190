import logging
from datetime import timedelta

from sqlalchemy import func, select, update
from sqlalchemy.orm import Session, aliased

from ..exceptions import NotFoundError
from ..models import (
    Address,
    Assignment,
    ChangeOperationEnum,
    Merchant,
    Order,
    OrderItem,
    OrderStatusEnum,
    Organization,
    Package,
    ProofOfDelivery,
    Route,
    RouteStop,
)
from ..models.base import utcnow
from ..schemas import OrderCreate, ProofOfDeliveryCreate, RouteStopCreate
from .audit import record_change

logger = logging.getLogger(__name__)

_DELIVERABLE_STATUSES = (
    OrderStatusEnum.ASSIGNED.value,
    OrderStatusEnum.IN_TRANSIT.value,
)


def create_order(db: Session, payload: OrderCreate) -> Order:
    order = Order(
        merchant_id=payload.merchant_id,
        customer_id=payload.customer_id,
        city_id=payload.city_id,
        pickup_address_id=payload.pickup_address_id,
        dropoff_address_id=payload.dropoff_address_id,
        status=OrderStatusEnum.PENDING.value,
        notes=payload.notes,
    )
    order.items = [OrderItem(**item.model_dump()) for item in payload.items]
    db.add(order)
    try:
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Order creation failed")
        raise
    db.refresh(order)
    return order


def orders_overview(db: Session):
    pickup = aliased(Address)
    dropoff = aliased(Address)
    stmt = (
        select(
            Order.id,
            Order.status,
            Organization.name.label("merchant_name"),
            Order.customer_id,
            pickup.line1.label("pickup_line1"),
            dropoff.line1.label("dropoff_line1"),
            Order.requested_at,
        )
        .join(Merchant, Merchant.id == Order.merchant_id)
        .join(Organization, Organization.id == Merchant.organization_id)
        .join(pickup, pickup.id == Order.pickup_address_id)
        .join(dropoff, dropoff.id == Order.dropoff_address_id)
        .order_by(Order.requested_at.desc(), Order.id.desc())
    )
    return db.execute(stmt).all()


def order_counts_by_status(db: Session):
    count = func.count().label("cnt")
    stmt = (
        select(Order.status, count)
        .group_by(Order.status)
        .order_by(count.desc(), Order.status)
    )
    return db.execute(stmt).all()


def mark_order_delivered(db: Session, order_id: int) -> bool:
    """Move an Assigned or InTransit order to Delivered.

    Returns False, changing nothing, for any other status or a missing order.
    """
    stmt = (
        update(Order)
        .where(Order.id == order_id, Order.status.in_(_DELIVERABLE_STATUSES))
        .values(status=OrderStatusEnum.DELIVERED.value, delivered_at=func.now())
        .execution_options(synchronize_session=False)
    )
    try:
        changed = db.execute(stmt).rowcount == 1
        if changed:
            record_change(
                db,
                Order.__tablename__,
                {"id": order_id},
                ChangeOperationEnum.UPDATE,
                snapshot={"status": OrderStatusEnum.DELIVERED.value},
            )
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Marking order %s delivered failed", order_id)
        raise
    if changed:
        logger.info("Order %s delivered", order_id)
    return changed


def delivered_since(db: Session, days: int = 7) -> list[Order]:
    cutoff = utcnow() - timedelta(days=days)
    stmt = (
        select(Order)
        .where(
            Order.status == OrderStatusEnum.DELIVERED.value,
            Order.delivered_at >= cutoff,
        )
        .order_by(Order.delivered_at.desc(), Order.id.desc())
    )
    return list(db.scalars(stmt))


def packages_by_hazard_class(db: Session):
    # A missing hazard class and the literal "None" are the same bucket.
    hazard = func.coalesce(Package.hazard_class, "None")
    count = func.count().label("cnt")
    stmt = (
        select(hazard.label("hazard"), count)
        .group_by(hazard)
        .order_by(count.desc(), hazard)
    )
    return db.execute(stmt).all()


def routes_per_city(db: Session):
    city_route_seq = (
        func.dense_rank()
        .over(partition_by=Route.city_id, order_by=Route.id)
        .label("city_route_seq")
    )
    stmt = select(
        Route.city_id,
        Route.id.label("route_id"),
        Route.status,
        city_route_seq,
    ).order_by(Route.city_id, Route.id)
    return db.execute(stmt).all()


def cross_city_orders(db: Session):
    pickup = aliased(Address)
    dropoff = aliased(Address)
    stmt = (
        select(
            Order.id,
            pickup.city_id.label("pickup_city_id"),
            dropoff.city_id.label("dropoff_city_id"),
        )
        .join(pickup, pickup.id == Order.pickup_address_id)
        .join(dropoff, dropoff.id == Order.dropoff_address_id)
        .where(pickup.city_id != dropoff.city_id)
        .order_by(Order.id)
    )
    return db.execute(stmt).all()


def add_route_stop(db: Session, route_id: int, payload: RouteStopCreate) -> RouteStop:
    if db.get(Route, route_id) is None:
        raise NotFoundError("Route", route_id)
    stop = RouteStop(
        route_id=route_id,
        sequence_nr=payload.sequence_nr,
        address_id=payload.address_id,
        purpose=payload.purpose.value,
        eta_at=payload.eta_at,
        etf_at=payload.etf_at,
    )
    db.add(stop)
    db.commit()
    db.refresh(stop)
    return stop


def assign_to_stop(
    db: Session, route_stop_id: int, order_id: int, package_id: int | None = None
) -> Assignment:
    if db.get(RouteStop, route_stop_id) is None:
        raise NotFoundError("RouteStop", route_stop_id)
    assignment = Assignment(
        route_stop_id=route_stop_id, order_id=order_id, package_id=package_id
    )
    db.add(assignment)
    db.commit()
    db.refresh(assignment)
    return assignment


def capture_proof_of_delivery(
    db: Session, payload: ProofOfDeliveryCreate
) -> ProofOfDelivery:
    if db.get(Order, payload.order_id) is None:
        raise NotFoundError("Order", payload.order_id)
    proof = ProofOfDelivery(
        order_id=payload.order_id,
        captured_by_user_id=payload.captured_by_user_id,
        method=payload.method.value,
        artifact_url=payload.artifact_url,
    )
    db.add(proof)
    db.commit()
    db.refresh(proof)
    return proof
