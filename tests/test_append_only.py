import pytest

from nova_mobility.exceptions import AppendOnlyError
from nova_mobility.models import ChangeLog, Event, MaintenanceLog, TicketMessage
from nova_mobility.services.fleet import append_maintenance_log
from nova_mobility.services.support import post_message


@pytest.mark.parametrize(
    "model, attribute, value",
    [
        (TicketMessage, "body", "edited"),
        (MaintenanceLog, "entry", "edited"),
        (Event, "event_type", "Order.Edited"),
        (ChangeLog, "operation", "DELETE"),
    ],
)
def test_append_only_rows_reject_updates(seeded_session, model, attribute, value):
    row = seeded_session.get(model, 1)
    setattr(row, attribute, value)

    with pytest.raises(AppendOnlyError):
        seeded_session.commit()
    seeded_session.rollback()

    seeded_session.expire_all()
    assert getattr(seeded_session.get(model, 1), attribute) != value


def test_new_entries_can_be_appended(seeded_session):
    message = post_message(seeded_session, 1, 2, "Courier is five minutes away.")
    log = append_maintenance_log(seeded_session, 1, 2, "Battery replaced.")

    assert message.id == 21
    assert message.sent_at is not None
    assert log.maintenance_order_id == 1
