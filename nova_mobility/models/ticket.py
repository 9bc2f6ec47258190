from datetime import datetime
from enum import Enum

from sqlalchemy import DateTime, ForeignKey, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import AppendOnly, Base, BigIntPK, enum_check


class TicketStatusEnum(str, Enum):
    OPEN = "Open"
    PENDING = "Pending"
    RESOLVED = "Resolved"
    CLOSED = "Closed"


class TicketPriorityEnum(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    URGENT = "Urgent"


class Ticket(Base):
    __tablename__ = "tickets"
    __table_args__ = (
        enum_check("status", TicketStatusEnum, "ck_tickets_status"),
        enum_check("priority", TicketPriorityEnum, "ck_tickets_priority"),
    )

    id: Mapped[int] = mapped_column(BigIntPK, primary_key=True)
    opened_by_user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id"), nullable=False
    )
    related_order_id: Mapped[int | None] = mapped_column(ForeignKey("orders.id"))
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    priority: Mapped[str] = mapped_column(String(10), nullable=False)
    subject: Mapped[str] = mapped_column(String(200), nullable=False)
    opened_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )
    closed_at: Mapped[datetime | None] = mapped_column(DateTime)
    messages: Mapped[list["TicketMessage"]] = relationship(
        "TicketMessage",
        order_by=lambda: (TicketMessage.sent_at, TicketMessage.id),
        passive_deletes="all",
    )


class TicketMessage(AppendOnly, Base):
    __tablename__ = "ticket_messages"

    id: Mapped[int] = mapped_column(BigIntPK, primary_key=True)
    ticket_id: Mapped[int] = mapped_column(ForeignKey("tickets.id"), nullable=False)
    sender_user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False)
    sent_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )
    body: Mapped[str] = mapped_column(String(2000), nullable=False)
