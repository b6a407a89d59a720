import datetime
from decimal import Decimal

from sqlalchemy import Date, Float, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base

class Person(Base):
    __tablename__ = "people"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    children: Mapped[int | None] = mapped_column(Integer, nullable=True)

    # plain column, no FK; cities.destroy checks for inhabitants itself
    city_id: Mapped[int | None] = mapped_column(Integer, nullable=True)

    rating: Mapped[float | None] = mapped_column(Float, nullable=True)
    income: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    birthdate: Mapped[datetime.date | None] = mapped_column(Date, nullable=True)
    remarks: Mapped[str | None] = mapped_column(Text, nullable=True)
