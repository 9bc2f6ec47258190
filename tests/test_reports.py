from datetime import date
from decimal import Decimal

from nova_mobility import seed_data
from nova_mobility.models import Payment, Vehicle
from nova_mobility.services.billing import (
    invoice_balances,
    invoice_detail,
    invoices_page,
    orphan_invoice_lines,
    outstanding_invoices,
    payments_received_on,
)
from nova_mobility.services.commerce import merchants_overview
from nova_mobility.services.fleet import (
    open_maintenance_orders,
    vehicles_needing_maintenance,
)
from nova_mobility.services.stats import referencing_foreign_keys, row_counts


def test_invoice_balances_count_each_payment_once(seeded_session):
    balances = {b.invoice_id: b for b in invoice_balances(seeded_session)}

    assert len(balances) == 20
    assert balances[1].total == Decimal("108.5000")
    assert balances[1].paid == Decimal("108.5000")
    assert balances[1].outstanding == Decimal("0.0000")
    # INV-0003: two 108.50 and two 135.60 lines, one 150.75 payment.
    assert balances[3].total == Decimal("488.2000")
    assert balances[3].paid == Decimal("150.7500")
    assert balances[3].outstanding == Decimal("337.4500")
    # INV-0020 has a payment but no lines.
    assert balances[20].total == Decimal("0.0000")
    assert balances[20].outstanding == Decimal("-85.2000")


def test_outstanding_invoices_largest_first(seeded_session):
    rows = outstanding_invoices(seeded_session)
    amounts = [row.outstanding for row in rows]

    assert rows[0].invoice_id == 3
    assert amounts == sorted(amounts, reverse=True)
    assert all(amount > 0 for amount in amounts)


def test_invoice_detail_loads_children(seeded_session):
    invoice = invoice_detail(seeded_session, 4)

    assert invoice.invoice_number == "INV-0004"
    assert len(invoice.lines) == 3
    assert [p.reference for p in invoice.payments] == ["TXN-USD-0004"]


def test_invoices_page(seeded_session):
    page = invoices_page(seeded_session, page=2, page_size=10)

    assert [invoice.id for invoice in page] == list(range(11, 21))
    assert invoices_page(seeded_session, page=3, page_size=10) == []


def test_payments_received_today(seeded_session):
    today = seeded_session.get(Payment, 1).received_at.date()

    assert len(payments_received_on(seeded_session, today)) == 20
    assert payments_received_on(seeded_session, date(2000, 1, 1)) == []


def test_no_orphan_invoice_lines(seeded_session):
    assert orphan_invoice_lines(seeded_session) == []


def test_vehicles_needing_maintenance(seeded_session):
    rows = vehicles_needing_maintenance(seeded_session)
    flagged = [row for row in seed_data.VEHICLES if row[5] == "Maintenance"]

    assert len(rows) == len(flagged)
    assert {row.status for row in rows} == {"Maintenance"}
    assert all(row.hub_name for row in rows)


def test_low_battery_vehicle_needs_maintenance(seeded_session):
    seeded_session.get(Vehicle, 1).battery_pct = 12
    seeded_session.commit()

    rows = vehicles_needing_maintenance(seeded_session, battery_threshold=30)

    assert rows[0].id == 1
    assert rows[0].battery_pct == 12


def test_open_maintenance_orders_most_urgent_first(seeded_session):
    rows = open_maintenance_orders(seeded_session)
    rank = {"Critical": 4, "High": 3, "Medium": 2, "Low": 1}

    assert rows
    assert {row.status for row in rows} <= {"Open", "InProgress"}
    keys = [(rank[row.priority], row.id) for row in rows]
    assert keys == sorted(keys, reverse=True)
    assert rows[0].priority == "Critical"


def test_merchants_overview(seeded_session):
    rows = merchants_overview(seeded_session)

    assert len(rows) == 10
    assert rows[0].organization_name == "Urban Fresh Foods"
    assert rows[0].default_city == "New York"


def test_row_counts(seeded_session):
    assert row_counts(seeded_session) == {
        "invoices": 20,
        "invoice_lines": 19,
        "payments": 20,
        "orders": 20,
        "packages": 20,
    }


def test_referencing_foreign_keys():
    found = referencing_foreign_keys("invoices")

    assert found == [
        (
            "fk_invoice_lines_invoice_id_invoices",
            "invoice_lines",
            "invoice_id",
            "invoices",
            "id",
        ),
        ("fk_payments_invoice_id_invoices", "payments", "invoice_id", "invoices", "id"),
    ]
