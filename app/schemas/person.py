import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.common import FlashOut

class PersonOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    children: int | None = None
    city_id: int | None = None
    rating: float | None = None
    income: Decimal | None = None
    birthdate: datetime.date | None = None
    remarks: str | None = None

class PeopleIndexOut(BaseModel):
    entries: list[PersonOut] = Field(default_factory=list)
    flash: FlashOut = Field(default_factory=FlashOut)
