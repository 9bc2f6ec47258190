import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models import City, Organization, OrganizationTypeEnum, Zone
from ..schemas import ZoneUpsert

logger = logging.getLogger(__name__)


def active_cities(db: Session) -> list[City]:
    stmt = select(City).where(City.is_active.is_(True)).order_by(City.name)
    return list(db.scalars(stmt))


def organizations_by_type(
    db: Session, types: list[OrganizationTypeEnum | str] | None = None
) -> list[Organization]:
    stmt = select(Organization).order_by(
        Organization.created_at.desc(), Organization.id.desc()
    )
    if types:
        stmt = stmt.where(
            Organization.type.in_([OrganizationTypeEnum(t).value for t in types])
        )
    return list(db.scalars(stmt))


def upsert_zone(db: Session, payload: ZoneUpsert) -> tuple[Zone, bool]:
    """Insert the zone or update the one already holding (city_id, code).

    Returns the zone and whether it was created.
    """
    zone = db.scalars(
        select(Zone).where(Zone.city_id == payload.city_id, Zone.code == payload.code)
    ).one_or_none()
    created = zone is None
    if created:
        zone = Zone(city_id=payload.city_id, code=payload.code)
        db.add(zone)
    zone.name = payload.name
    zone.polygon_wkt = payload.polygon_wkt
    zone.is_restricted = payload.is_restricted
    try:
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Zone upsert failed for %s/%s", payload.city_id, payload.code)
        raise
    db.refresh(zone)
    return zone, created
