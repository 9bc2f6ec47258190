from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ..models import Base, Invoice, InvoiceLine, Order, Package, Payment

COUNTED_MODELS = (Invoice, InvoiceLine, Payment, Order, Package)


def row_counts(db: Session) -> dict[str, int]:
    return {
        model.__tablename__: db.scalar(select(func.count()).select_from(model))
        for model in COUNTED_MODELS
    }


def referencing_foreign_keys(table_name: str) -> list[tuple[str, str, str, str, str]]:
    """Foreign keys in the schema that point at ``table_name``.

    Each entry is (constraint, child table, child column, parent table,
    parent column), ordered by child table and constraint name.
    """
    found = []
    for table in Base.metadata.sorted_tables:
        for constraint in table.foreign_key_constraints:
            if constraint.referred_table.name != table_name:
                continue
            for element in constraint.elements:
                found.append(
                    (
                        constraint.name,
                        table.name,
                        element.parent.name,
                        element.column.table.name,
                        element.column.name,
                    )
                )
    return sorted(found, key=lambda entry: (entry[1], entry[0]))
