import json

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models import Event
from ..schemas import EventCreate


def record_event(db: Session, payload: EventCreate) -> Event:
    event = Event(
        event_type=payload.event_type,
        actor_user_id=payload.actor_user_id,
        entity_type=payload.entity_type,
        entity_id_big=payload.entity_id_big,
        city_id=payload.city_id,
        payload_json=json.dumps(payload.payload) if payload.payload is not None else None,
    )
    if payload.occurred_at is not None:
        event.occurred_at = payload.occurred_at
    db.add(event)
    db.commit()
    db.refresh(event)
    return event


def recent_events(
    db: Session, entity_type: str | None = "Order", limit: int = 50
) -> list[Event]:
    stmt = select(Event).order_by(Event.occurred_at.desc(), Event.id.desc()).limit(limit)
    if entity_type is not None:
        stmt = stmt.where(Event.entity_type == entity_type)
    return list(db.scalars(stmt))
