from datetime import datetime
from decimal import Decimal

import sqlalchemy as sa
from sqlalchemy import DateTime, ForeignKey, Numeric, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, BigIntPK


class CatalogItem(Base):
    __tablename__ = "catalog_items"
    __table_args__ = (
        sa.UniqueConstraint("merchant_id", "sku", name="uq_catalog_items_merchant_id_sku"),
    )

    id: Mapped[int] = mapped_column(BigIntPK, primary_key=True)
    merchant_id: Mapped[int] = mapped_column(ForeignKey("merchants.id"), nullable=False)
    sku: Mapped[str] = mapped_column(String(80), nullable=False)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    weight_kg: Mapped[Decimal] = mapped_column(Numeric(7, 3), nullable=False)
    length_cm: Mapped[Decimal | None] = mapped_column(Numeric(7, 2))
    width_cm: Mapped[Decimal | None] = mapped_column(Numeric(7, 2))
    height_cm: Mapped[Decimal | None] = mapped_column(Numeric(7, 2))
    hazard_class: Mapped[str | None] = mapped_column(String(40))
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )
    merchant: Mapped["Merchant"] = relationship("Merchant")
