from datetime import datetime
from enum import Enum

from sqlalchemy import DateTime, ForeignKey, String, func
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, BigIntPK, enum_check


class PodMethodEnum(str, Enum):
    SIGNATURE = "Signature"
    PHOTO = "Photo"
    PIN = "Pin"


class ProofOfDelivery(Base):
    __tablename__ = "proofs_of_delivery"
    __table_args__ = (
        enum_check("method", PodMethodEnum, "ck_proofs_of_delivery_method"),
    )

    id: Mapped[int] = mapped_column(BigIntPK, primary_key=True)
    order_id: Mapped[int] = mapped_column(ForeignKey("orders.id"), nullable=False)
    captured_by_user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id"), nullable=False
    )
    captured_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )
    method: Mapped[str] = mapped_column(String(20), nullable=False)
    artifact_url: Mapped[str | None] = mapped_column(String(400))
