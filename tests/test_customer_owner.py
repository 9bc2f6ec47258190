import pytest
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from nova_mobility.models import Customer
from nova_mobility.schemas import CustomerCreate
from nova_mobility.services.billing import create_customer


@pytest.mark.parametrize(
    "person_id, organization_id", [(1, 1), (None, None)], ids=["both", "neither"]
)
def test_database_requires_exactly_one_owner(seeded_session, person_id, organization_id):
    seeded_session.add(
        Customer(
            person_id=person_id,
            organization_id=organization_id,
            default_currency="USD",
        )
    )

    with pytest.raises(IntegrityError):
        seeded_session.commit()
    seeded_session.rollback()


@pytest.mark.parametrize(
    "person_id, organization_id", [(1, 1), (None, None)], ids=["both", "neither"]
)
def test_payload_requires_exactly_one_owner(person_id, organization_id):
    with pytest.raises(ValidationError):
        CustomerCreate(
            person_id=person_id,
            organization_id=organization_id,
            default_currency="USD",
        )


def test_create_customer_for_organization(seeded_session):
    customer = create_customer(
        seeded_session, CustomerCreate(organization_id=3, default_currency="EUR")
    )

    assert customer.id is not None
    assert customer.person_id is None
    assert customer.organization.id == 3
