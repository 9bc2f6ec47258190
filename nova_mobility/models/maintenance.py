from datetime import datetime
from enum import Enum

from sqlalchemy import DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import AppendOnly, Base, enum_check


class MaintenanceStatusEnum(str, Enum):
    OPEN = "Open"
    IN_PROGRESS = "InProgress"
    CLOSED = "Closed"


class MaintenancePriorityEnum(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class MaintenanceOrder(Base):
    __tablename__ = "maintenance_orders"
    __table_args__ = (
        enum_check("status", MaintenanceStatusEnum, "ck_maintenance_orders_status"),
        enum_check(
            "priority", MaintenancePriorityEnum, "ck_maintenance_orders_priority"
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    vehicle_id: Mapped[int] = mapped_column(ForeignKey("vehicles.id"), nullable=False)
    opened_by_user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id"), nullable=False
    )
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    priority: Mapped[str] = mapped_column(String(10), nullable=False)
    opened_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )
    closed_at: Mapped[datetime | None] = mapped_column(DateTime)
    notes: Mapped[str | None] = mapped_column(String(1000))
    vehicle: Mapped["Vehicle"] = relationship("Vehicle")
    logs: Mapped[list["MaintenanceLog"]] = relationship(
        "MaintenanceLog", order_by="MaintenanceLog.entry_at", passive_deletes="all"
    )


class MaintenanceLog(AppendOnly, Base):
    __tablename__ = "maintenance_logs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    maintenance_order_id: Mapped[int] = mapped_column(
        ForeignKey("maintenance_orders.id"), nullable=False
    )
    logged_by_user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id"), nullable=False
    )
    entry_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )
    entry: Mapped[str] = mapped_column(String(2000), nullable=False)
