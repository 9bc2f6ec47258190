from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy import Computed, ForeignKey, Numeric, String, text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, BigIntPK

LINE_TOTAL_QUANTUM = Decimal("0.0001")

# Stored generated column; the database recomputes it on every write.
LINE_TOTAL_SQL = "ROUND(quantity * unit_price * (1 + tax_rate_pct / 100.0), 4)"


def _decimal(value) -> Decimal:
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def compute_line_total(quantity, unit_price, tax_rate_pct) -> Decimal:
    """quantity * unit_price * (1 + tax_rate_pct / 100), rounded to 4 places.

    Mirrors ``invoice_lines.line_total`` for values not yet stored.
    Halves round away from zero, matching ROUND() on the database side.
    """
    gross = (
        _decimal(quantity)
        * _decimal(unit_price)
        * (Decimal("1") + _decimal(tax_rate_pct) / Decimal("100"))
    )
    return gross.quantize(LINE_TOTAL_QUANTUM, rounding=ROUND_HALF_UP)


class InvoiceLine(Base):
    __tablename__ = "invoice_lines"

    id: Mapped[int] = mapped_column(BigIntPK, primary_key=True)
    invoice_id: Mapped[int] = mapped_column(ForeignKey("invoices.id"), nullable=False)
    description: Mapped[str] = mapped_column(String(200), nullable=False)
    quantity: Mapped[Decimal] = mapped_column(Numeric(18, 4), nullable=False)
    unit_price: Mapped[Decimal] = mapped_column(Numeric(18, 4), nullable=False)
    tax_rate_pct: Mapped[Decimal] = mapped_column(
        Numeric(5, 2), nullable=False, default=Decimal("0"), server_default=text("0")
    )
    line_total: Mapped[Decimal] = mapped_column(
        Numeric(18, 4), Computed(LINE_TOTAL_SQL, persisted=True), nullable=False
    )
