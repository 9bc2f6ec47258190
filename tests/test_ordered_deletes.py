import json

import pytest
from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError

from nova_mobility.models import (
    ChangeLog,
    Customer,
    Invoice,
    InvoiceLine,
    Payment,
    Ticket,
    TicketMessage,
)
from nova_mobility.services.billing import delete_invoice
from nova_mobility.services.stats import row_counts
from nova_mobility.services.support import delete_ticket


def _count(db, model, *criteria):
    return db.scalar(select(func.count()).select_from(model).where(*criteria))


def test_invoice_with_children_cannot_be_deleted_directly(seeded_session):
    with pytest.raises(IntegrityError):
        seeded_session.execute(delete(Invoice).where(Invoice.id == 3))
    seeded_session.rollback()

    assert seeded_session.get(Invoice, 3) is not None


def test_orm_delete_does_not_cascade(seeded_session):
    seeded_session.delete(seeded_session.get(Invoice, 3))

    with pytest.raises(IntegrityError):
        seeded_session.commit()
    seeded_session.rollback()


def test_customer_with_invoices_cannot_be_deleted(seeded_session):
    with pytest.raises(IntegrityError):
        seeded_session.execute(delete(Customer).where(Customer.id == 1))
    seeded_session.rollback()


def test_delete_invoice_removes_children_first(seeded_session):
    assert _count(seeded_session, InvoiceLine, InvoiceLine.invoice_id == 3) == 4

    assert delete_invoice(seeded_session, 3, actor_user_id=2) is True

    assert seeded_session.get(Invoice, 3) is None
    assert _count(seeded_session, InvoiceLine, InvoiceLine.invoice_id == 3) == 0
    assert _count(seeded_session, Payment, Payment.invoice_id == 3) == 0
    assert row_counts(seeded_session) == {
        "invoices": 19,
        "invoice_lines": 15,
        "payments": 19,
        "orders": 20,
        "packages": 20,
    }
    entry = seeded_session.scalars(
        select(ChangeLog).where(ChangeLog.table_name == "invoices")
    ).one()
    assert entry.operation == "DELETE"
    assert entry.changed_by_user_id == 2
    assert json.loads(entry.snapshot_json)["invoice_number"] == "INV-0003"


def test_delete_missing_invoice(seeded_session):
    assert delete_invoice(seeded_session, 9999) is False


def test_delete_ticket_removes_messages(seeded_session):
    assert delete_ticket(seeded_session, 7) is True

    assert seeded_session.get(Ticket, 7) is None
    assert _count(seeded_session, TicketMessage, TicketMessage.ticket_id == 7) == 0
    assert _count(seeded_session, TicketMessage) == 19


def test_delete_missing_ticket(seeded_session):
    assert delete_ticket(seeded_session, 9999) is False
