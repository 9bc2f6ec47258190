from sqlalchemy import select

from nova_mobility.models import ChangeLog, User
from nova_mobility.schemas import ZoneUpsert
from nova_mobility.services.audit import recent_changes
from nova_mobility.services.reference import (
    active_cities,
    organizations_by_type,
    upsert_zone,
)
from nova_mobility.services.security import (
    assign_role,
    hash_password,
    lock_user,
    upsert_role,
    users_with_person,
)


def test_active_cities_sorted_by_name(seeded_session):
    names = [city.name for city in active_cities(seeded_session)]

    assert len(names) == 30
    assert names == sorted(names)


def test_organizations_filtered_by_type(seeded_session):
    merchants = organizations_by_type(seeded_session, ["Merchant"])

    assert merchants
    assert {org.type for org in merchants} == {"Merchant"}
    assert len(organizations_by_type(seeded_session)) == 30


def test_upsert_zone_inserts_then_updates(seeded_session):
    payload = ZoneUpsert(
        city_id=1,
        code="NYC-BK",
        name="Brooklyn",
        polygon_wkt="POLYGON((2 2,2 3,3 3,3 2,2 2))",
    )

    zone, created = upsert_zone(seeded_session, payload)
    assert created is True

    renamed, created = upsert_zone(
        seeded_session, payload.model_copy(update={"name": "Brooklyn North"})
    )
    assert created is False
    assert renamed.id == zone.id
    assert renamed.name == "Brooklyn North"


def test_upsert_existing_zone_by_city_and_code(seeded_session):
    zone, created = upsert_zone(
        seeded_session,
        ZoneUpsert(
            city_id=1,
            code="NYC-DT",
            name="Downtown",
            polygon_wkt="POLYGON((0 0,0 1,1 1,1 0,0 0))",
            is_restricted=True,
        ),
    )

    assert created is False
    assert zone.id == 1
    assert zone.is_restricted is True


def test_upsert_role_is_idempotent(seeded_session):
    role, created = upsert_role(seeded_session, "Dispatcher")
    again, created_again = upsert_role(seeded_session, "Dispatcher")

    assert created is True
    assert created_again is False
    assert again.id == role.id == 11


def test_assign_role(seeded_session):
    role, _ = upsert_role(seeded_session, "Dispatcher")

    link = assign_role(seeded_session, 5, role.id)

    assert link.assigned_at is not None
    assert role.name in {r.name for r in seeded_session.get(User, 5).roles}


def test_users_with_person(seeded_session):
    rows = users_with_person(seeded_session)

    assert len(rows) == 30
    assert rows[0].username == "johnsmith"
    assert rows[0].email == "john.smith@example.com"


def test_lock_user_records_change(seeded_session):
    assert lock_user(seeded_session, 4, actor_user_id=1) is True

    user = seeded_session.get(User, 4)
    assert user.is_locked is True
    assert user.last_login_at is None

    entry = seeded_session.scalars(
        select(ChangeLog).where(ChangeLog.table_name == "users")
    ).one()
    assert entry.operation == "UPDATE"
    assert entry.primary_key_json == '{"id": 4}'
    assert entry.changed_by_user_id == 1
    assert recent_changes(seeded_session, limit=1)[0].id == entry.id


def test_lock_missing_user(seeded_session):
    assert lock_user(seeded_session, 9999) is False


def test_seeded_password_hashes(seeded_session):
    user = seeded_session.get(User, 1)

    assert user.password_hash == hash_password("Pass@101")
    assert len(user.password_hash) == 32
