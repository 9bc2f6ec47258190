import logging
from datetime import date, datetime, time, timedelta
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from sqlalchemy import delete, func, select, update
from sqlalchemy.orm import Session, selectinload

from ..exceptions import NotFoundError
from ..models import (
    ChangeOperationEnum,
    Customer,
    Invoice,
    InvoiceLine,
    InvoiceStatusEnum,
    Payment,
    compute_line_total,
)
from ..schemas import (
    CustomerCreate,
    InvoiceBalance,
    InvoiceCreate,
    InvoiceLineCreate,
    PaymentCreate,
)
from .audit import record_change, snapshot_of

logger = logging.getLogger(__name__)

__all__ = [
    "MarkPaidOutcome",
    "add_invoice_line",
    "compute_line_total",
    "create_customer",
    "create_invoice",
    "delete_invoice",
    "invoice_balances",
    "invoice_detail",
    "invoices_page",
    "mark_invoice_paid",
    "orphan_invoice_lines",
    "outstanding_invoices",
    "payments_received_on",
    "record_payment",
]

AMOUNT_QUANTUM = Decimal("0.0001")


class MarkPaidOutcome(str, Enum):
    MARKED_PAID = "marked_paid"
    ALREADY_PAID = "already_paid"
    NOT_COVERED = "not_covered"
    INVOICE_VOID = "invoice_void"
    NOT_FOUND = "not_found"


def _amount(value) -> Decimal:
    if value is None:
        return Decimal("0.0000")
    return Decimal(str(value)).quantize(AMOUNT_QUANTUM, rounding=ROUND_HALF_UP)


def create_customer(db: Session, payload: CustomerCreate) -> Customer:
    customer = Customer(**payload.model_dump())
    db.add(customer)
    db.commit()
    db.refresh(customer)
    return customer


def create_invoice(db: Session, payload: InvoiceCreate) -> Invoice:
    invoice = Invoice(
        customer_id=payload.customer_id,
        invoice_number=payload.invoice_number,
        status=payload.status.value,
        currency=payload.currency,
        issue_date=payload.issue_date,
        due_date=payload.due_date,
    )
    db.add(invoice)
    db.commit()
    db.refresh(invoice)
    return invoice


def add_invoice_line(
    db: Session, invoice_id: int, payload: InvoiceLineCreate
) -> InvoiceLine:
    if db.get(Invoice, invoice_id) is None:
        raise NotFoundError("Invoice", invoice_id)
    line = InvoiceLine(invoice_id=invoice_id, **payload.model_dump())
    db.add(line)
    db.commit()
    db.refresh(line)
    return line


def record_payment(db: Session, invoice_id: int, payload: PaymentCreate) -> Payment:
    if db.get(Invoice, invoice_id) is None:
        raise NotFoundError("Invoice", invoice_id)
    payment = Payment(
        invoice_id=invoice_id,
        amount=payload.amount,
        method=payload.method.value,
        reference=payload.reference,
    )
    if payload.received_at is not None:
        payment.received_at = payload.received_at
    db.add(payment)
    db.commit()
    db.refresh(payment)
    logger.info("Recorded payment of %s on invoice %s", payload.amount, invoice_id)
    return payment


def _balance_query():
    # Lines and payments are summed separately before the join so that an
    # invoice with several payments does not multiply its line total.
    line_totals = (
        select(
            InvoiceLine.invoice_id,
            func.sum(InvoiceLine.line_total).label("total"),
        )
        .group_by(InvoiceLine.invoice_id)
        .subquery()
    )
    paid_totals = (
        select(Payment.invoice_id, func.sum(Payment.amount).label("paid"))
        .group_by(Payment.invoice_id)
        .subquery()
    )
    total = func.coalesce(line_totals.c.total, 0)
    paid = func.coalesce(paid_totals.c.paid, 0)
    outstanding = func.round(total - paid, 4)
    stmt = (
        select(
            Invoice.id.label("invoice_id"),
            Invoice.invoice_number,
            Invoice.status,
            Invoice.currency,
            total.label("total"),
            paid.label("paid"),
            outstanding.label("outstanding"),
        )
        .outerjoin(line_totals, line_totals.c.invoice_id == Invoice.id)
        .outerjoin(paid_totals, paid_totals.c.invoice_id == Invoice.id)
    )
    return stmt, outstanding


def _to_balance(row) -> InvoiceBalance:
    return InvoiceBalance(
        invoice_id=row.invoice_id,
        invoice_number=row.invoice_number,
        status=row.status,
        currency=row.currency,
        total=_amount(row.total),
        paid=_amount(row.paid),
        outstanding=_amount(row.outstanding),
    )


def invoice_balances(db: Session) -> list[InvoiceBalance]:
    stmt, _ = _balance_query()
    return [_to_balance(row) for row in db.execute(stmt.order_by(Invoice.id))]


def outstanding_invoices(db: Session) -> list[InvoiceBalance]:
    stmt, outstanding = _balance_query()
    stmt = stmt.where(outstanding > 0).order_by(outstanding.desc(), Invoice.id)
    return [_to_balance(row) for row in db.execute(stmt)]


def invoice_detail(db: Session, invoice_id: int) -> Invoice:
    stmt = (
        select(Invoice)
        .where(Invoice.id == invoice_id)
        .options(
            selectinload(Invoice.customer),
            selectinload(Invoice.lines),
            selectinload(Invoice.payments),
        )
    )
    invoice = db.scalars(stmt).one_or_none()
    if invoice is None:
        raise NotFoundError("Invoice", invoice_id)
    return invoice


def invoices_page(db: Session, page: int = 1, page_size: int = 10) -> list[Invoice]:
    if page < 1 or page_size < 1:
        raise ValueError("page and page_size start at 1")
    stmt = (
        select(Invoice)
        .order_by(Invoice.id)
        .offset((page - 1) * page_size)
        .limit(page_size)
    )
    return list(db.scalars(stmt))


def payments_received_on(db: Session, day: date) -> list[Payment]:
    start = datetime.combine(day, time.min)
    end = start + timedelta(days=1)
    stmt = (
        select(Payment)
        .where(Payment.received_at >= start, Payment.received_at < end)
        .order_by(Payment.received_at.desc(), Payment.id.desc())
    )
    return list(db.scalars(stmt))


def _paid_sum():
    return (
        select(func.coalesce(func.sum(Payment.amount), 0))
        .where(Payment.invoice_id == Invoice.id)
        .scalar_subquery()
    )


def _line_sum():
    return (
        select(func.coalesce(func.sum(InvoiceLine.line_total), 0))
        .where(InvoiceLine.invoice_id == Invoice.id)
        .scalar_subquery()
    )


def _unpaid_outcome(db: Session, invoice_id: int) -> MarkPaidOutcome:
    status = db.scalar(select(Invoice.status).where(Invoice.id == invoice_id))
    if status is None:
        return MarkPaidOutcome.NOT_FOUND
    if status == InvoiceStatusEnum.PAID.value:
        return MarkPaidOutcome.ALREADY_PAID
    if status == InvoiceStatusEnum.VOID.value:
        return MarkPaidOutcome.INVOICE_VOID
    return MarkPaidOutcome.NOT_COVERED


def mark_invoice_paid(
    db: Session, invoice_id: int, actor_user_id: int | None = None
) -> MarkPaidOutcome:
    """Set the invoice to Paid when its payments cover its lines.

    Coverage and status are checked by the UPDATE itself, so a concurrent
    payment or status change cannot slip between check and write. When no
    row changes, the current status explains why.
    """
    stmt = (
        update(Invoice)
        .where(
            Invoice.id == invoice_id,
            Invoice.status.not_in(
                [InvoiceStatusEnum.PAID.value, InvoiceStatusEnum.VOID.value]
            ),
            func.round(_paid_sum(), 4) >= func.round(_line_sum(), 4),
        )
        .values(status=InvoiceStatusEnum.PAID.value)
        .execution_options(synchronize_session=False)
    )
    try:
        if db.execute(stmt).rowcount == 1:
            outcome = MarkPaidOutcome.MARKED_PAID
            record_change(
                db,
                Invoice.__tablename__,
                {"id": invoice_id},
                ChangeOperationEnum.UPDATE,
                actor_user_id=actor_user_id,
                snapshot={"status": InvoiceStatusEnum.PAID.value},
            )
        else:
            outcome = _unpaid_outcome(db, invoice_id)
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Marking invoice %s paid failed", invoice_id)
        raise
    logger.info("Mark invoice %s paid: %s", invoice_id, outcome.value)
    return outcome


def delete_invoice(
    db: Session, invoice_id: int, actor_user_id: int | None = None
) -> bool:
    """Delete payments, then lines, then the invoice, in one transaction."""
    invoice = db.get(Invoice, invoice_id)
    if invoice is None:
        return False
    snapshot = snapshot_of(invoice)
    try:
        db.execute(delete(Payment).where(Payment.invoice_id == invoice_id))
        db.execute(delete(InvoiceLine).where(InvoiceLine.invoice_id == invoice_id))
        db.execute(delete(Invoice).where(Invoice.id == invoice_id))
        record_change(
            db,
            Invoice.__tablename__,
            {"id": invoice_id},
            ChangeOperationEnum.DELETE,
            actor_user_id=actor_user_id,
            snapshot=snapshot,
        )
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Deleting invoice %s failed", invoice_id)
        raise
    logger.info("Deleted invoice %s", invoice_id)
    return True


def orphan_invoice_lines(db: Session) -> list[InvoiceLine]:
    stmt = (
        select(InvoiceLine)
        .outerjoin(Invoice, Invoice.id == InvoiceLine.invoice_id)
        .where(Invoice.id.is_(None))
        .order_by(InvoiceLine.id)
    )
    return list(db.scalars(stmt))
