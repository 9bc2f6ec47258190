from pydantic import BaseModel, Field

from ..models import TicketPriorityEnum


class TicketCreate(BaseModel):
    opened_by_user_id: int
    related_order_id: int | None = None
    priority: TicketPriorityEnum = TicketPriorityEnum.MEDIUM
    subject: str = Field(min_length=1, max_length=200)
