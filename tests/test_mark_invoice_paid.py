from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy import func, select

from nova_mobility.models import ChangeLog, Invoice, PaymentMethodEnum
from nova_mobility.schemas import InvoiceCreate, InvoiceLineCreate, PaymentCreate
from nova_mobility.services.billing import (
    MarkPaidOutcome,
    add_invoice_line,
    create_invoice,
    mark_invoice_paid,
    record_payment,
)


def _status(db, invoice_id):
    return db.scalar(select(Invoice.status).where(Invoice.id == invoice_id))


def _invoice_changes(db, invoice_id):
    return db.scalar(
        select(func.count())
        .select_from(ChangeLog)
        .where(
            ChangeLog.table_name == "invoices",
            ChangeLog.primary_key_json == f'{{"id": {invoice_id}}}',
        )
    )


@pytest.fixture()
def open_invoice(seeded_session):
    invoice = create_invoice(
        seeded_session,
        InvoiceCreate(
            customer_id=2,
            invoice_number="INV-PAY-1",
            status="Open",
            currency="USD",
            issue_date=date(2026, 2, 1),
            due_date=date(2026, 2, 8),
        ),
    )
    add_invoice_line(
        seeded_session,
        invoice.id,
        InvoiceLineCreate(
            description="Base delivery fee",
            quantity=Decimal("1"),
            unit_price=Decimal("100.00"),
            tax_rate_pct=Decimal("8.50"),
        ),
    )
    return invoice.id


def _pay(db, invoice_id, amount):
    record_payment(
        db,
        invoice_id,
        PaymentCreate(amount=Decimal(amount), method=PaymentMethodEnum.CARD),
    )


def test_partial_payment_leaves_invoice_open(seeded_session, open_invoice):
    _pay(seeded_session, open_invoice, "100.00")

    outcome = mark_invoice_paid(seeded_session, open_invoice)

    assert outcome is MarkPaidOutcome.NOT_COVERED
    assert _status(seeded_session, open_invoice) == "Open"
    assert _invoice_changes(seeded_session, open_invoice) == 0


def test_covering_payments_mark_paid_once(seeded_session, open_invoice):
    _pay(seeded_session, open_invoice, "100.00")
    _pay(seeded_session, open_invoice, "8.50")

    first = mark_invoice_paid(seeded_session, open_invoice, actor_user_id=3)
    second = mark_invoice_paid(seeded_session, open_invoice, actor_user_id=3)

    assert first is MarkPaidOutcome.MARKED_PAID
    assert second is MarkPaidOutcome.ALREADY_PAID
    assert _status(seeded_session, open_invoice) == "Paid"
    assert _invoice_changes(seeded_session, open_invoice) == 1


def test_split_payments_with_fractional_cents_cover_total(seeded_session):
    invoice = create_invoice(
        seeded_session,
        InvoiceCreate(
            customer_id=2,
            invoice_number="INV-PAY-2",
            status="Open",
            currency="USD",
            issue_date=date(2026, 2, 1),
            due_date=date(2026, 2, 8),
        ),
    )
    add_invoice_line(
        seeded_session,
        invoice.id,
        InvoiceLineCreate(
            description="Thirds", quantity=Decimal("3"), unit_price=Decimal("33.3333")
        ),
    )
    for _ in range(3):
        _pay(seeded_session, invoice.id, "33.3333")

    assert mark_invoice_paid(seeded_session, invoice.id) is MarkPaidOutcome.MARKED_PAID


def test_over_payment_counts_as_covered(seeded_session):
    # INV-0005: one 108.50 line, 120.00 paid.
    assert mark_invoice_paid(seeded_session, 5) is MarkPaidOutcome.MARKED_PAID
    assert _status(seeded_session, 5) == "Paid"


def test_seeded_underpaid_invoice_is_not_covered(seeded_session):
    # INV-0012: one 96.00 line, 75.50 paid.
    assert mark_invoice_paid(seeded_session, 12) is MarkPaidOutcome.NOT_COVERED
    assert _status(seeded_session, 12) == "Open"


def test_seeded_paid_invoice_reports_already_paid(seeded_session):
    assert mark_invoice_paid(seeded_session, 1) is MarkPaidOutcome.ALREADY_PAID


def test_void_invoice_is_never_paid(seeded_session):
    invoice = create_invoice(
        seeded_session,
        InvoiceCreate(
            customer_id=2,
            invoice_number="INV-VOID-1",
            status="Void",
            currency="USD",
            issue_date=date(2026, 2, 1),
            due_date=date(2026, 2, 8),
        ),
    )
    _pay(seeded_session, invoice.id, "10.00")

    assert mark_invoice_paid(seeded_session, invoice.id) is MarkPaidOutcome.INVOICE_VOID
    assert _status(seeded_session, invoice.id) == "Void"


def test_missing_invoice(seeded_session):
    assert mark_invoice_paid(seeded_session, 9999) is MarkPaidOutcome.NOT_FOUND
