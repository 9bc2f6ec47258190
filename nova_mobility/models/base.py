from datetime import datetime, timezone
from enum import Enum

import sqlalchemy as sa
from sqlalchemy import event
from sqlalchemy.orm import DeclarativeBase

from ..exceptions import AppendOnlyError

# BIGINT keys stay INTEGER on SQLite so that rowid autoincrement applies.
BigIntPK = sa.BigInteger().with_variant(sa.Integer(), "sqlite")

NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Base(DeclarativeBase):
    metadata = sa.MetaData(naming_convention=NAMING_CONVENTION)


def enum_values(enum_cls: type[Enum]) -> list[str]:
    return [member.value for member in enum_cls]


def enum_check(column: str, enum_cls: type[Enum], name: str) -> sa.CheckConstraint:
    """CHECK constraint limiting ``column`` to the values of ``enum_cls``."""
    allowed = ", ".join(f"'{value}'" for value in enum_values(enum_cls))
    return sa.CheckConstraint(f"{column} IN ({allowed})", name=name)


class AppendOnly:
    """Mixin for rows that are inserted once and never updated."""


@event.listens_for(AppendOnly, "before_update", propagate=True)
def _reject_update(mapper, connection, target) -> None:
    raise AppendOnlyError(f"{type(target).__name__} rows are append-only")
