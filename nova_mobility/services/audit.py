import json
import logging
from typing import Any

from sqlalchemy import inspect, select
from sqlalchemy.orm import Session

from ..models import ChangeLog, ChangeOperationEnum

logger = logging.getLogger(__name__)


def _to_json(value: dict[str, Any]) -> str:
    return json.dumps(value, sort_keys=True, default=str)


def snapshot_of(obj, exclude: tuple[str, ...] = ()) -> dict[str, Any]:
    """Column values of a mapped instance, keyed by attribute name."""
    return {
        attr.key: getattr(obj, attr.key)
        for attr in inspect(obj).mapper.column_attrs
        if attr.key not in exclude
    }


def record_change(
    db: Session,
    table_name: str,
    primary_key: dict[str, Any],
    operation: ChangeOperationEnum | str,
    actor_user_id: int | None = None,
    snapshot: dict[str, Any] | None = None,
) -> ChangeLog:
    """Stage a change-log row in the caller's transaction.

    Nothing is committed here; the entry lands together with the change it
    describes.
    """
    entry = ChangeLog(
        table_name=table_name,
        primary_key_json=_to_json(primary_key),
        operation=ChangeOperationEnum(operation).value,
        changed_by_user_id=actor_user_id,
        snapshot_json=_to_json(snapshot) if snapshot is not None else None,
    )
    db.add(entry)
    logger.debug("Recorded %s on %s %s", entry.operation, table_name, primary_key)
    return entry


def recent_changes(db: Session, limit: int = 100) -> list[ChangeLog]:
    stmt = (
        select(ChangeLog)
        .order_by(ChangeLog.changed_at.desc(), ChangeLog.id.desc())
        .limit(limit)
    )
    return list(db.scalars(stmt))
