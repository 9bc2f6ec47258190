from datetime import datetime
from enum import Enum

from sqlalchemy import DateTime, ForeignKey, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from .base import AppendOnly, Base, BigIntPK, enum_check


class ChangeOperationEnum(str, Enum):
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


class ChangeLog(AppendOnly, Base):
    """Audit row for one mutation of any table; the logged row has no foreign key."""

    __tablename__ = "change_log"
    __table_args__ = (
        enum_check("operation", ChangeOperationEnum, "ck_change_log_operation"),
    )

    id: Mapped[int] = mapped_column(BigIntPK, primary_key=True)
    table_name: Mapped[str] = mapped_column(String(160), nullable=False)
    primary_key_json: Mapped[str] = mapped_column(String(500), nullable=False)
    operation: Mapped[str] = mapped_column(String(10), nullable=False)
    changed_by_user_id: Mapped[int | None] = mapped_column(ForeignKey("users.id"))
    changed_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )
    snapshot_json: Mapped[str | None] = mapped_column(Text)
