import uuid
from datetime import datetime

import sqlalchemy as sa
from sqlalchemy import DateTime, ForeignKey, Integer, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class Merchant(Base):
    __tablename__ = "merchants"
    __table_args__ = (sa.UniqueConstraint("api_key", name="uq_merchants_api_key"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    organization_id: Mapped[int] = mapped_column(
        ForeignKey("organizations.id"), nullable=False
    )
    default_city_id: Mapped[int] = mapped_column(
        ForeignKey("cities.id"), nullable=False
    )
    api_key: Mapped[uuid.UUID] = mapped_column(
        sa.Uuid, nullable=False, default=uuid.uuid4
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )
    organization: Mapped["Organization"] = relationship("Organization")
    default_city: Mapped["City"] = relationship("City")
