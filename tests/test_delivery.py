from datetime import datetime, timedelta
from decimal import Decimal

from sqlalchemy import select

from nova_mobility.models import ChangeLog, Order, Package, Route
from nova_mobility.models.base import utcnow
from nova_mobility.schemas import (
    OrderCreate,
    OrderItemCreate,
    ProofOfDeliveryCreate,
    RouteStopCreate,
)
from nova_mobility.services.delivery import (
    add_route_stop,
    assign_to_stop,
    capture_proof_of_delivery,
    create_order,
    cross_city_orders,
    delivered_since,
    mark_order_delivered,
    order_counts_by_status,
    orders_overview,
    packages_by_hazard_class,
    routes_per_city,
)


def test_mark_order_delivered_from_assigned(seeded_session):
    assert mark_order_delivered(seeded_session, 2) is True

    order = seeded_session.get(Order, 2)
    assert order.status == "Delivered"
    assert order.delivered_at is not None
    entry = seeded_session.scalars(
        select(ChangeLog).where(ChangeLog.table_name == "orders")
    ).one()
    assert entry.primary_key_json == '{"id": 2}'


def test_mark_order_delivered_is_not_repeated(seeded_session):
    assert mark_order_delivered(seeded_session, 3) is True
    assert mark_order_delivered(seeded_session, 3) is False


def test_pending_order_cannot_be_delivered(seeded_session):
    assert mark_order_delivered(seeded_session, 1) is False
    assert seeded_session.get(Order, 1).status == "Pending"


def test_missing_order_cannot_be_delivered(seeded_session):
    assert mark_order_delivered(seeded_session, 9999) is False


def test_delivered_since(seeded_session):
    mark_order_delivered(seeded_session, 2)

    # Seeded Delivered orders carry no delivery time.
    assert [order.id for order in delivered_since(seeded_session)] == [2]


def test_delivered_since_excludes_older_deliveries(seeded_session):
    order = seeded_session.get(Order, 4)
    order.delivered_at = utcnow() - timedelta(days=10)
    seeded_session.commit()

    assert delivered_since(seeded_session, days=7) == []
    assert [o.id for o in delivered_since(seeded_session, days=30)] == [4]


def test_order_counts_by_status(seeded_session):
    rows = order_counts_by_status(seeded_session)

    assert [(row.status, row.cnt) for row in rows] == [
        ("Assigned", 5),
        ("Delivered", 5),
        ("InTransit", 5),
        ("Pending", 5),
    ]


def test_packages_by_hazard_class_merges_missing_class(seeded_session):
    seeded_session.add(
        Package(order_id=1, label_code="PKG-NULL", weight_kg=Decimal("1.000"))
    )
    seeded_session.commit()

    rows = packages_by_hazard_class(seeded_session)

    assert [(row.hazard, row.cnt) for row in rows] == [
        ("None", 16),
        ("Fragile", 3),
        ("Battery", 2),
    ]


def test_routes_per_city_ranks_within_city(seeded_session):
    seeded_session.add(
        Route(
            city_id=1,
            vehicle_id=2,
            planned_start_at=datetime(2026, 1, 1, 8, 0),
            status="Planned",
        )
    )
    seeded_session.commit()

    rows = [row for row in routes_per_city(seeded_session) if row.city_id == 1]

    assert [(row.route_id, row.city_route_seq) for row in rows] == [(1, 1), (21, 2)]


def test_cross_city_orders(seeded_session):
    rows = cross_city_orders(seeded_session)

    assert len(rows) == 20
    assert all(row.pickup_city_id != row.dropoff_city_id for row in rows)


def test_orders_overview(seeded_session):
    rows = orders_overview(seeded_session)

    assert len(rows) == 20
    first = next(row for row in rows if row.id == 1)
    assert first.merchant_name == "Urban Fresh Foods"
    assert first.pickup_line1 == "350 5th Ave"


def test_order_lifecycle(seeded_session):
    order = create_order(
        seeded_session,
        OrderCreate(
            merchant_id=1,
            customer_id=1,
            city_id=1,
            pickup_address_id=1,
            dropoff_address_id=2,
            items=[OrderItemCreate(catalog_item_id=1, quantity=Decimal("2"))],
        ),
    )
    assert order.status == "Pending"
    assert len(order.items) == 1

    stop = add_route_stop(
        seeded_session,
        1,
        RouteStopCreate(sequence_nr=99, address_id=2, purpose="Dropoff"),
    )
    assignment = assign_to_stop(seeded_session, stop.id, order.id)
    order.status = "Assigned"
    seeded_session.commit()

    assert mark_order_delivered(seeded_session, order.id) is True
    proof = capture_proof_of_delivery(
        seeded_session,
        ProofOfDeliveryCreate(
            order_id=order.id, captured_by_user_id=7, method="Signature"
        ),
    )

    assert assignment.route_stop_id == stop.id
    assert proof.captured_at is not None
