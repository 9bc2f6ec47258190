from datetime import datetime
from decimal import Decimal
from enum import Enum

import sqlalchemy as sa
from sqlalchemy import DateTime, ForeignKey, Numeric, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, BigIntPK, enum_check


class OrderStatusEnum(str, Enum):
    PENDING = "Pending"
    ASSIGNED = "Assigned"
    IN_TRANSIT = "InTransit"
    DELIVERED = "Delivered"
    CANCELED = "Canceled"


class Order(Base):
    __tablename__ = "orders"
    __table_args__ = (
        enum_check("status", OrderStatusEnum, "ck_orders_status"),
        sa.Index("ix_orders_status", "status"),
        sa.Index("ix_orders_customer_id", "customer_id"),
    )

    id: Mapped[int] = mapped_column(BigIntPK, primary_key=True)
    merchant_id: Mapped[int] = mapped_column(ForeignKey("merchants.id"), nullable=False)
    customer_id: Mapped[int] = mapped_column(ForeignKey("customers.id"), nullable=False)
    city_id: Mapped[int] = mapped_column(ForeignKey("cities.id"), nullable=False)
    pickup_address_id: Mapped[int] = mapped_column(
        ForeignKey("addresses.id"), nullable=False
    )
    dropoff_address_id: Mapped[int] = mapped_column(
        ForeignKey("addresses.id"), nullable=False
    )
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    requested_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )
    delivered_at: Mapped[datetime | None] = mapped_column(DateTime)
    notes: Mapped[str | None] = mapped_column(String(500))
    merchant: Mapped["Merchant"] = relationship("Merchant")
    customer: Mapped["Customer"] = relationship("Customer")
    pickup_address: Mapped["Address"] = relationship(
        "Address", foreign_keys=[pickup_address_id]
    )
    dropoff_address: Mapped["Address"] = relationship(
        "Address", foreign_keys=[dropoff_address_id]
    )
    items: Mapped[list["OrderItem"]] = relationship(
        "OrderItem", order_by="OrderItem.id", passive_deletes="all"
    )


class OrderItem(Base):
    __tablename__ = "order_items"

    id: Mapped[int] = mapped_column(BigIntPK, primary_key=True)
    order_id: Mapped[int] = mapped_column(ForeignKey("orders.id"), nullable=False)
    catalog_item_id: Mapped[int] = mapped_column(
        ForeignKey("catalog_items.id"), nullable=False
    )
    quantity: Mapped[Decimal] = mapped_column(Numeric(18, 4), nullable=False)
    declared_value: Mapped[Decimal | None] = mapped_column(Numeric(18, 2))
    catalog_item: Mapped["CatalogItem"] = relationship("CatalogItem")
