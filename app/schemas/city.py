from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.schemas.common import FlashOut

class CityCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    country_code: str = Field(..., min_length=1, max_length=3)

class CityUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    country_code: str | None = Field(default=None, min_length=1, max_length=3)

    # omitted means "leave as is"; an explicit null would clear a NOT NULL column
    @field_validator("name", "country_code")
    @classmethod
    def not_null(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("may be omitted but not null")
        return v

class CityOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    country_code: str

class CityIndexOut(BaseModel):
    entries: list[CityOut] = Field(default_factory=list)
    flash: FlashOut = Field(default_factory=FlashOut)
