import json

from nova_mobility.models import TicketMessage
from nova_mobility.schemas import EventCreate, TicketCreate
from nova_mobility.services.analytics import recent_events, record_event
from nova_mobility.services.support import (
    latest_message_per_ticket,
    open_ticket,
    post_message,
    search_tickets,
    set_ticket_status,
)


def test_search_tickets_matches_subject(seeded_session):
    tickets = search_tickets(seeded_session, "delivery")

    assert {t.subject for t in tickets} == {"Late delivery", "Proof-of-delivery"}


def test_latest_message_per_ticket(seeded_session):
    post_message(seeded_session, 1, 5, "Courier has left the hub.")

    rows = latest_message_per_ticket(seeded_session)

    assert len(rows) == 20
    assert len({row.ticket_id for row in rows}) == 20
    assert rows[0].ticket_id == 1
    assert rows[0].body == "Courier has left the hub."


def test_ticket_messages_in_order(seeded_session):
    ticket = open_ticket(
        seeded_session,
        TicketCreate(opened_by_user_id=3, subject="Parcel left outside"),
    )
    post_message(seeded_session, ticket.id, 3, "First")
    post_message(seeded_session, ticket.id, 8, "Second")

    seeded_session.refresh(ticket)

    assert ticket.status == "Open"
    assert [m.body for m in ticket.messages] == ["First", "Second"]
    assert all(isinstance(m, TicketMessage) for m in ticket.messages)


def test_closing_ticket_stamps_closed_at(seeded_session):
    ticket = set_ticket_status(seeded_session, 1, "Closed")

    assert ticket.closed_at is not None

    reopened = set_ticket_status(seeded_session, 1, "Open")
    assert reopened.closed_at is None


def test_record_and_list_events(seeded_session):
    event = record_event(
        seeded_session,
        EventCreate(
            event_type="Order.Delivered",
            actor_user_id=4,
            entity_type="Order",
            entity_id_big=2,
            city_id=2,
            payload={"proof": "photo"},
        ),
    )

    assert json.loads(event.payload_json) == {"proof": "photo"}

    order_events = recent_events(seeded_session)
    assert order_events[0].id == event.id
    assert {e.entity_type for e in order_events} == {"Order"}
    assert len(recent_events(seeded_session, entity_type="Route")) == 5
    assert len(recent_events(seeded_session, limit=3)) == 3


def test_search_tickets_treats_wildcards_literally(seeded_session):
    ticket = open_ticket(
        seeded_session,
        TicketCreate(opened_by_user_id=3, subject="Refund 50% of fee"),
    )

    assert [t.id for t in search_tickets(seeded_session, "50%")] == [ticket.id]
    assert [t.id for t in search_tickets(seeded_session, "%")] == [ticket.id]
    assert search_tickets(seeded_session, "_") == []
