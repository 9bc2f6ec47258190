from datetime import datetime

import sqlalchemy as sa
from sqlalchemy import DateTime, ForeignKey, Integer, SmallInteger, String, func
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class VehicleBattery(Base):
    __tablename__ = "vehicle_batteries"
    __table_args__ = (
        sa.UniqueConstraint("serial_number", name="uq_vehicle_batteries_serial_number"),
        sa.CheckConstraint(
            "health_pct BETWEEN 0 AND 100", name="ck_vehicle_batteries_health_pct"
        ),
        sa.CheckConstraint(
            "cycle_count >= 0", name="ck_vehicle_batteries_cycle_count"
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    vehicle_id: Mapped[int] = mapped_column(ForeignKey("vehicles.id"), nullable=False)
    serial_number: Mapped[str] = mapped_column(String(120), nullable=False)
    health_pct: Mapped[int] = mapped_column(
        SmallInteger, nullable=False, server_default=sa.text("100")
    )
    cycle_count: Mapped[int] = mapped_column(
        Integer, nullable=False, server_default=sa.text("0")
    )
    installed_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )
