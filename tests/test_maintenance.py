import pytest

from nova_mobility.exceptions import NotFoundError, PreconditionFailed
from nova_mobility.schemas import MaintenanceOrderCreate
from nova_mobility.services.fleet import (
    append_maintenance_log,
    close_maintenance_order,
    open_maintenance_order,
    open_maintenance_orders,
)


def test_open_append_close(seeded_session):
    order = open_maintenance_order(
        seeded_session,
        MaintenanceOrderCreate(vehicle_id=7, opened_by_user_id=2, priority="Critical"),
    )
    assert order.status == "Open"
    append_maintenance_log(seeded_session, order.id, 2, "Propeller replaced.")

    listed = {row.id: row for row in open_maintenance_orders(seeded_session)}
    assert listed[order.id].last_log_at is not None

    closed = close_maintenance_order(seeded_session, order.id)

    assert closed.status == "Closed"
    assert closed.closed_at is not None
    assert order.id not in {row.id for row in open_maintenance_orders(seeded_session)}


def test_closing_twice_fails(seeded_session):
    # Order 3 is seeded as Closed.
    with pytest.raises(PreconditionFailed):
        close_maintenance_order(seeded_session, 3)


def test_unknown_order(seeded_session):
    with pytest.raises(NotFoundError):
        close_maintenance_order(seeded_session, 9999)
    with pytest.raises(NotFoundError):
        append_maintenance_log(seeded_session, 9999, 1, "Nothing to log.")


def test_unknown_vehicle(seeded_session):
    with pytest.raises(NotFoundError):
        open_maintenance_order(
            seeded_session,
            MaintenanceOrderCreate(vehicle_id=9999, opened_by_user_id=1),
        )
