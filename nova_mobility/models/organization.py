from datetime import datetime
from enum import Enum

import sqlalchemy as sa
from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, enum_check


class OrganizationTypeEnum(str, Enum):
    MERCHANT = "Merchant"
    PARTNER = "Partner"
    INTERNAL = "Internal"


class Organization(Base):
    __tablename__ = "organizations"
    __table_args__ = (
        sa.UniqueConstraint("name", name="uq_organizations_name"),
        enum_check("type", OrganizationTypeEnum, "ck_organizations_type"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(160), nullable=False)
    type: Mapped[str] = mapped_column(String(40), nullable=False)
    is_active: Mapped[bool] = mapped_column(
        sa.Boolean, nullable=False, server_default=sa.true()
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )
