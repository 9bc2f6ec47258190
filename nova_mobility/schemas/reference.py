from pydantic import BaseModel, Field


class ZoneUpsert(BaseModel):
    city_id: int
    code: str = Field(min_length=1, max_length=50)
    name: str = Field(min_length=1, max_length=150)
    polygon_wkt: str
    is_restricted: bool = False
