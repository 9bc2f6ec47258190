from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ..exceptions import NotFoundError
from ..models import CatalogItem, City, Merchant, Organization
from ..schemas import CatalogItemCreate


def merchants_overview(db: Session):
    stmt = (
        select(
            Merchant.id,
            Organization.name.label("organization_name"),
            City.name.label("default_city"),
            Merchant.api_key,
            Merchant.created_at,
        )
        .join(Organization, Organization.id == Merchant.organization_id)
        .join(City, City.id == Merchant.default_city_id)
        .order_by(Merchant.id)
    )
    return db.execute(stmt).all()


def add_catalog_item(db: Session, payload: CatalogItemCreate) -> CatalogItem:
    if db.get(Merchant, payload.merchant_id) is None:
        raise NotFoundError("Merchant", payload.merchant_id)
    item = CatalogItem(**payload.model_dump())
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


def duplicate_skus(db: Session):
    """(merchant_id, sku) pairs held by more than one catalog item."""
    stmt = (
        select(CatalogItem.merchant_id, CatalogItem.sku, func.count().label("cnt"))
        .group_by(CatalogItem.merchant_id, CatalogItem.sku)
        .having(func.count() > 1)
        .order_by(CatalogItem.merchant_id, CatalogItem.sku)
    )
    return db.execute(stmt).all()
