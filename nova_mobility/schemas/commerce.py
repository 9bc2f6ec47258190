from decimal import Decimal

from pydantic import BaseModel, Field


class CatalogItemCreate(BaseModel):
    merchant_id: int
    sku: str = Field(min_length=1, max_length=80)
    name: str = Field(min_length=1, max_length=200)
    weight_kg: Decimal = Field(ge=0)
    length_cm: Decimal | None = None
    width_cm: Decimal | None = None
    height_cm: Decimal | None = None
    hazard_class: str | None = Field(default=None, max_length=40)
