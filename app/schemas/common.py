from pydantic import BaseModel


class FlashOut(BaseModel):
    alert: str | None = None
    notice: str | None = None
