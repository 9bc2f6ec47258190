import logging

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from ..exceptions import NotFoundError
from ..models import ChangeOperationEnum, Ticket, TicketMessage, TicketStatusEnum
from ..schemas import TicketCreate
from .audit import record_change, snapshot_of

logger = logging.getLogger(__name__)

_CLOSING_STATUSES = (TicketStatusEnum.RESOLVED.value, TicketStatusEnum.CLOSED.value)


def open_ticket(db: Session, payload: TicketCreate) -> Ticket:
    ticket = Ticket(
        opened_by_user_id=payload.opened_by_user_id,
        related_order_id=payload.related_order_id,
        status=TicketStatusEnum.OPEN.value,
        priority=payload.priority.value,
        subject=payload.subject,
    )
    db.add(ticket)
    db.commit()
    db.refresh(ticket)
    return ticket


def set_ticket_status(
    db: Session, ticket_id: int, status: TicketStatusEnum | str
) -> Ticket:
    ticket = db.get(Ticket, ticket_id)
    if ticket is None:
        raise NotFoundError("Ticket", ticket_id)
    ticket.status = TicketStatusEnum(status).value
    ticket.closed_at = func.now() if ticket.status in _CLOSING_STATUSES else None
    db.commit()
    db.refresh(ticket)
    logger.info("Ticket %s is now %s", ticket_id, ticket.status)
    return ticket


def search_tickets(db: Session, keyword: str) -> list[Ticket]:
    stmt = (
        select(Ticket)
        .where(Ticket.subject.icontains(keyword, autoescape=True))
        .order_by(Ticket.opened_at.desc(), Ticket.id.desc())
    )
    return list(db.scalars(stmt))


def latest_message_per_ticket(db: Session):
    rn = (
        func.row_number()
        .over(
            partition_by=TicketMessage.ticket_id,
            order_by=(TicketMessage.sent_at.desc(), TicketMessage.id.desc()),
        )
        .label("rn")
    )
    ranked = select(
        TicketMessage.ticket_id,
        TicketMessage.id.label("message_id"),
        TicketMessage.sender_user_id,
        TicketMessage.sent_at,
        TicketMessage.body,
        rn,
    ).subquery()
    stmt = (
        select(
            ranked.c.ticket_id,
            ranked.c.message_id,
            ranked.c.sender_user_id,
            ranked.c.sent_at,
            ranked.c.body,
        )
        .where(ranked.c.rn == 1)
        .order_by(ranked.c.ticket_id)
    )
    return db.execute(stmt).all()


def post_message(
    db: Session, ticket_id: int, sender_user_id: int, body: str
) -> TicketMessage:
    if db.get(Ticket, ticket_id) is None:
        raise NotFoundError("Ticket", ticket_id)
    message = TicketMessage(
        ticket_id=ticket_id, sender_user_id=sender_user_id, body=body
    )
    db.add(message)
    db.commit()
    db.refresh(message)
    return message


def delete_ticket(
    db: Session, ticket_id: int, actor_user_id: int | None = None
) -> bool:
    ticket = db.get(Ticket, ticket_id)
    if ticket is None:
        return False
    snapshot = snapshot_of(ticket)
    try:
        db.execute(delete(TicketMessage).where(TicketMessage.ticket_id == ticket_id))
        db.execute(delete(Ticket).where(Ticket.id == ticket_id))
        record_change(
            db,
            Ticket.__tablename__,
            {"id": ticket_id},
            ChangeOperationEnum.DELETE,
            actor_user_id=actor_user_id,
            snapshot=snapshot,
        )
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Deleting ticket %s failed", ticket_id)
        raise
    logger.info("Deleted ticket %s", ticket_id)
    return True
