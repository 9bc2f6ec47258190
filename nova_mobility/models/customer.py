from datetime import datetime

import sqlalchemy as sa
from sqlalchemy import DateTime, ForeignKey, Integer, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class Customer(Base):
    """The paying party for orders: either a person or an organization."""

    __tablename__ = "customers"
    __table_args__ = (
        sa.CheckConstraint(
            "(person_id IS NOT NULL AND organization_id IS NULL)"
            " OR (person_id IS NULL AND organization_id IS NOT NULL)",
            name="ck_customers_owner",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    person_id: Mapped[int | None] = mapped_column(ForeignKey("persons.id"))
    organization_id: Mapped[int | None] = mapped_column(
        ForeignKey("organizations.id")
    )
    default_currency: Mapped[str] = mapped_column(sa.CHAR(3), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )
    person: Mapped["Person | None"] = relationship("Person")
    organization: Mapped["Organization | None"] = relationship("Organization")
