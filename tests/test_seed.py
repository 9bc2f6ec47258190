from datetime import date, timedelta

import pytest

from nova_mobility import seed_data
from nova_mobility.models import Invoice, Route, User, UserRole, Vehicle, Zone
from nova_mobility.seed import SEED_PLAN, seed_all, seed_values
from nova_mobility.services.security import hash_password

# Route times are shifted to load time and user roles have no surrogate key.
ROUND_TRIP = [
    pytest.param(model, columns, rows, id=model.__tablename__)
    for model, columns, rows in SEED_PLAN
    if model not in (UserRole, Route)
]


def test_seed_loads_every_table(db_session):
    created = seed_all(db_session)

    assert len(created) == 32
    assert created["cities"] == 30
    assert created["user_roles"] == 90
    assert created["invoice_lines"] == 19
    assert created["change_log"] == 20


def test_seed_skips_populated_tables(seeded_session):
    created = seed_all(seeded_session)

    assert set(created.values()) == {0}


def _expected(model, values):
    if model is User:
        values["password_hash"] = hash_password(values["password_hash"])
    elif model is Zone:
        values["is_restricted"] = bool(values["is_restricted"])
    elif model is Invoice:
        values["issue_date"] = date.fromisoformat(values["issue_date"])
        values["due_date"] = date.fromisoformat(values["due_date"])
    return values


@pytest.mark.parametrize("model, columns, rows", ROUND_TRIP)
def test_seeded_rows_read_back_unchanged(seeded_session, model, columns, rows):
    for position, values in enumerate(seed_values(columns, rows), start=1):
        row = seeded_session.get(model, position)
        assert row is not None, f"{model.__tablename__} {position}"
        for column, expected in _expected(model, values).items():
            assert getattr(row, column) == expected, (
                f"{model.__tablename__} {position}.{column}"
            )


def test_seeded_user_roles(seeded_session):
    for values in seed_values(("user_id", "role_id"), seed_data.USER_ROLES):
        assert seeded_session.get(UserRole, (values["user_id"], values["role_id"]))


def test_route_times_are_relative_to_load(seeded_session):
    route = seeded_session.get(Route, 6)

    assert route.planned_end_at - route.planned_start_at == timedelta(hours=1)
    assert route.status == "Live"
    assert seeded_session.get(Vehicle, route.vehicle_id) is not None
