from decimal import Decimal

import pytest
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from nova_mobility.models import Order, Person, Role
from nova_mobility.schemas import CatalogItemCreate, PaymentCreate, RouteStopCreate
from nova_mobility.services.commerce import add_catalog_item, duplicate_skus
from nova_mobility.services.delivery import add_route_stop


def test_sku_is_unique_per_merchant(seeded_session):
    payload = CatalogItemCreate(
        merchant_id=1, sku="UFF-APL-1KG", name="Apples again", weight_kg=Decimal("1")
    )

    with pytest.raises(IntegrityError):
        add_catalog_item(seeded_session, payload)
    seeded_session.rollback()

    assert duplicate_skus(seeded_session) == []


def test_same_sku_allowed_for_another_merchant(seeded_session):
    item = add_catalog_item(
        seeded_session,
        CatalogItemCreate(
            merchant_id=2, sku="UFF-APL-1KG", name="Apples", weight_kg=Decimal("1")
        ),
    )

    assert item.id is not None


def test_role_name_is_unique(seeded_session):
    seeded_session.add(Role(name="Admin"))

    with pytest.raises(IntegrityError):
        seeded_session.commit()
    seeded_session.rollback()


def test_person_email_is_unique(seeded_session):
    seeded_session.add(
        Person(first_name="John", last_name="Again", email="john.smith@example.com")
    )

    with pytest.raises(IntegrityError):
        seeded_session.commit()
    seeded_session.rollback()


def test_order_status_outside_enumeration_is_rejected(seeded_session):
    order = seeded_session.get(Order, 1)
    order.status = "Shipped"

    with pytest.raises(IntegrityError):
        seeded_session.commit()
    seeded_session.rollback()


def test_route_stop_sequence_is_unique_per_route(seeded_session):
    with pytest.raises(IntegrityError):
        add_route_stop(
            seeded_session,
            1,
            RouteStopCreate(sequence_nr=1, address_id=5, purpose="Dropoff"),
        )
    seeded_session.rollback()


def test_payment_method_outside_enumeration_is_rejected():
    with pytest.raises(ValidationError):
        PaymentCreate(amount=Decimal("10"), method="Crypto")


def test_foreign_keys_are_enforced(seeded_session):
    order = seeded_session.get(Order, 1)
    order.customer_id = 9999

    with pytest.raises(IntegrityError):
        seeded_session.commit()
    seeded_session.rollback()
