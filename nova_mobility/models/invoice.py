from datetime import date, datetime
from enum import Enum

import sqlalchemy as sa
from sqlalchemy import Date, DateTime, ForeignKey, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, BigIntPK, enum_check


class InvoiceStatusEnum(str, Enum):
    DRAFT = "Draft"
    OPEN = "Open"
    PAID = "Paid"
    VOID = "Void"


class Invoice(Base):
    __tablename__ = "invoices"
    __table_args__ = (
        sa.UniqueConstraint("invoice_number", name="uq_invoices_invoice_number"),
        enum_check("status", InvoiceStatusEnum, "ck_invoices_status"),
        sa.Index("ix_invoices_customer_id", "customer_id"),
    )

    id: Mapped[int] = mapped_column(BigIntPK, primary_key=True)
    customer_id: Mapped[int] = mapped_column(ForeignKey("customers.id"), nullable=False)
    invoice_number: Mapped[str] = mapped_column(String(40), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    currency: Mapped[str] = mapped_column(sa.CHAR(3), nullable=False)
    issue_date: Mapped[date] = mapped_column(Date, nullable=False)
    due_date: Mapped[date] = mapped_column(Date, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )
    customer: Mapped["Customer"] = relationship("Customer")
    # Children are never cascaded; they must be removed before the invoice.
    lines: Mapped[list["InvoiceLine"]] = relationship(
        "InvoiceLine", order_by="InvoiceLine.id", passive_deletes="all"
    )
    payments: Mapped[list["Payment"]] = relationship(
        "Payment", order_by="Payment.id", passive_deletes="all"
    )
