from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field, model_validator

from ..models import InvoiceStatusEnum, PaymentMethodEnum


class CustomerCreate(BaseModel):
    person_id: int | None = None
    organization_id: int | None = None
    default_currency: str = Field(min_length=3, max_length=3)

    @model_validator(mode="after")
    def _exactly_one_owner(self) -> "CustomerCreate":
        if (self.person_id is None) == (self.organization_id is None):
            raise ValueError("a customer belongs to exactly one of person or organization")
        return self


class InvoiceCreate(BaseModel):
    customer_id: int
    invoice_number: str = Field(min_length=1, max_length=40)
    status: InvoiceStatusEnum = InvoiceStatusEnum.DRAFT
    currency: str = Field(min_length=3, max_length=3)
    issue_date: date
    due_date: date


class InvoiceLineCreate(BaseModel):
    description: str = Field(min_length=1, max_length=200)
    quantity: Decimal
    unit_price: Decimal
    tax_rate_pct: Decimal = Decimal("0")


class PaymentCreate(BaseModel):
    amount: Decimal = Field(gt=0)
    method: PaymentMethodEnum
    reference: str | None = Field(default=None, max_length=120)
    received_at: datetime | None = None


class InvoiceBalance(BaseModel):
    invoice_id: int
    invoice_number: str
    status: str
    currency: str
    total: Decimal
    paid: Decimal
    outstanding: Decimal

    model_config = {"from_attributes": True}
