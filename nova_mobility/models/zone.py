from datetime import datetime

import sqlalchemy as sa
from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class Zone(Base):
    __tablename__ = "zones"
    __table_args__ = (
        sa.UniqueConstraint("city_id", "code", name="uq_zones_city_id_code"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    city_id: Mapped[int] = mapped_column(ForeignKey("cities.id"), nullable=False)
    code: Mapped[str] = mapped_column(String(50), nullable=False)
    name: Mapped[str] = mapped_column(String(150), nullable=False)
    # WKT text, stored and returned verbatim.
    polygon_wkt: Mapped[str] = mapped_column(Text, nullable=False)
    is_restricted: Mapped[bool] = mapped_column(
        sa.Boolean, nullable=False, server_default=sa.false()
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )
    city: Mapped["City"] = relationship("City")
