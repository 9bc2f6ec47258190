from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from ..models import PodMethodEnum, StopPurposeEnum


class OrderItemCreate(BaseModel):
    catalog_item_id: int
    quantity: Decimal = Field(gt=0)
    declared_value: Decimal | None = None


class OrderCreate(BaseModel):
    merchant_id: int
    customer_id: int
    city_id: int
    pickup_address_id: int
    dropoff_address_id: int
    notes: str | None = Field(default=None, max_length=500)
    items: list[OrderItemCreate] = []


class RouteStopCreate(BaseModel):
    sequence_nr: int = Field(ge=1)
    address_id: int
    purpose: StopPurposeEnum
    eta_at: datetime | None = None
    etf_at: datetime | None = None


class ProofOfDeliveryCreate(BaseModel):
    order_id: int
    captured_by_user_id: int
    method: PodMethodEnum
    artifact_url: str | None = Field(default=None, max_length=400)
