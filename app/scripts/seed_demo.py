import asyncio
import datetime
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker

from app.core.config import settings
from app.models.city import City
from app.models.person import Person

DEMO_CITIES = [
    {"name": "New York", "country_code": "USA"},
    {"name": "Rio de Janeiro", "country_code": "BR"},
    {"name": "Bern", "country_code": "CH"},
]

async def main():
    engine = create_async_engine(settings.database_url, pool_pre_ping=True)
    Session = async_sessionmaker(engine, expire_on_commit=False)

    async with Session() as db:
        existing = (await db.execute(select(City.name))).scalars().all()
        missing = [c for c in DEMO_CITIES if c["name"] not in existing]
        if missing:
            db.add_all([City(**c) for c in missing])
            await db.commit()
            print(f"Inserted {len(missing)} cities")
        else:
            print("Demo cities already exist")

        ny = (await db.execute(select(City).where(City.name == "New York"))).scalar_one()
        resident = (await db.execute(select(Person).where(Person.city_id == ny.id))).scalars().first()
        if not resident:
            db.add(Person(
                name="John Doe",
                children=2,
                city_id=ny.id,
                rating=4.5,
                income=Decimal("85000.00"),
                birthdate=datetime.date(1980, 5, 17),
                remarks="Demo inhabitant",
            ))
            await db.commit()
            print("Inserted demo inhabitant of New York")

    await engine.dispose()

if __name__ == "__main__":
    asyncio.run(main())
# Seeds three demo cities and one New York inhabitant, which keeps New York from being deleted.
