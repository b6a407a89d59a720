from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.city import City
from app.models.person import Person
from app.services.crud import CrudResource


async def count_inhabitants(db: AsyncSession, city_id: int) -> int:
    stmt = select(func.count()).select_from(Person).where(Person.city_id == city_id)
    return (await db.execute(stmt)).scalar_one()


async def city_has_inhabitants(db: AsyncSession, city: City) -> bool:
    return await count_inhabitants(db, city.id) > 0


cities = CrudResource(
    model=City,
    label="city",
    order_by=(City.country_code, City.name),
    has_dependents=city_has_inhabitants,
)
