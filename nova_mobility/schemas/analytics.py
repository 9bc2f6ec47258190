from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class EventCreate(BaseModel):
    event_type: str = Field(min_length=1, max_length=60)
    actor_user_id: int | None = None
    entity_type: str | None = Field(default=None, max_length=40)
    entity_id_big: int | None = None
    city_id: int | None = None
    payload: dict[str, Any] | None = None
    occurred_at: datetime | None = None
