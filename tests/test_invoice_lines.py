from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy import select, text, update

from nova_mobility.models import InvoiceLine, compute_line_total
from nova_mobility.schemas import InvoiceCreate, InvoiceLineCreate
from nova_mobility.services.billing import add_invoice_line, create_invoice


@pytest.mark.parametrize(
    "quantity, unit_price, tax_rate_pct, expected",
    [
        (1, "100.00", "8.50", "108.5000"),
        (2, "19.99", "7.25", "42.8786"),
        (3, "10", "0", "30.0000"),
        (1, "0.00005", "0", "0.0001"),
    ],
)
def test_compute_line_total(quantity, unit_price, tax_rate_pct, expected):
    total = compute_line_total(quantity, Decimal(unit_price), Decimal(tax_rate_pct))

    assert total == Decimal(expected)
    assert total.as_tuple().exponent == -4


@pytest.fixture()
def invoice(seeded_session):
    return create_invoice(
        seeded_session,
        InvoiceCreate(
            customer_id=1,
            invoice_number="INV-TEST-1",
            currency="USD",
            issue_date=date(2026, 1, 1),
            due_date=date(2026, 1, 8),
        ),
    )


def test_line_total_is_persisted(seeded_session, invoice):
    line = add_invoice_line(
        seeded_session,
        invoice.id,
        InvoiceLineCreate(
            description="Base delivery fee",
            quantity=Decimal("1"),
            unit_price=Decimal("100.00"),
            tax_rate_pct=Decimal("8.50"),
        ),
    )

    assert line.line_total == Decimal("108.5000")


def test_line_total_follows_updates(seeded_session, invoice):
    line = add_invoice_line(
        seeded_session,
        invoice.id,
        InvoiceLineCreate(
            description="Base delivery fee",
            quantity=Decimal("1"),
            unit_price=Decimal("100.00"),
            tax_rate_pct=Decimal("8.50"),
        ),
    )

    line.quantity = Decimal("2")
    seeded_session.commit()
    seeded_session.refresh(line)

    assert line.line_total == Decimal("217.0000")


def test_tax_rate_defaults_to_zero(seeded_session, invoice):
    line = add_invoice_line(
        seeded_session,
        invoice.id,
        InvoiceLineCreate(
            description="Handling", quantity=Decimal("3"), unit_price=Decimal("2.50")
        ),
    )

    assert line.tax_rate_pct == Decimal("0")
    assert line.line_total == Decimal("7.5000")


@pytest.mark.parametrize(
    "line_id, expected",
    [(1, "108.5000"), (6, "135.6000"), (11, "96.0000"), (16, "108.9000")],
)
def test_seeded_line_totals(seeded_session, line_id, expected):
    line = seeded_session.get(InvoiceLine, line_id)

    assert line.line_total == Decimal(expected)


def test_bulk_update_recomputes_line_total(seeded_session):
    seeded_session.execute(
        update(InvoiceLine).where(InvoiceLine.id == 1).values(quantity=7)
    )
    seeded_session.commit()

    stored = seeded_session.scalar(
        select(InvoiceLine.line_total).where(InvoiceLine.id == 1)
    )
    assert stored == Decimal("759.5000")
    assert stored == compute_line_total(7, Decimal("100.00"), Decimal("8.50"))


def test_plain_sql_insert_gets_line_total(seeded_session, invoice):
    seeded_session.execute(
        text(
            "INSERT INTO invoice_lines "
            "(invoice_id, description, quantity, unit_price, tax_rate_pct) "
            "VALUES (:invoice_id, 'Night surcharge', 2, 12.5, 10)"
        ),
        {"invoice_id": invoice.id},
    )
    seeded_session.commit()

    stored = seeded_session.scalar(
        select(InvoiceLine.line_total).where(InvoiceLine.invoice_id == invoice.id)
    )
    assert stored == Decimal("27.5000")
