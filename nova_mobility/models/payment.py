from datetime import datetime
from decimal import Decimal
from enum import Enum

from sqlalchemy import DateTime, ForeignKey, Numeric, String, func
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, BigIntPK, enum_check


class PaymentMethodEnum(str, Enum):
    CARD = "Card"
    WALLET = "Wallet"
    WIRE = "Wire"
    CASH = "Cash"


class Payment(Base):
    __tablename__ = "payments"
    __table_args__ = (enum_check("method", PaymentMethodEnum, "ck_payments_method"),)

    id: Mapped[int] = mapped_column(BigIntPK, primary_key=True)
    invoice_id: Mapped[int] = mapped_column(ForeignKey("invoices.id"), nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(18, 4), nullable=False)
    method: Mapped[str] = mapped_column(String(20), nullable=False)
    received_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )
    reference: Mapped[str | None] = mapped_column(String(120))
