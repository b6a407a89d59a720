import datetime
from decimal import Decimal

import pytest_asyncio

from app.models.city import City
from app.models.person import Person

CITY_FIXTURES = {
    "ny": {"name": "New York", "country_code": "USA"},
    "rj": {"name": "Rio de Janeiro", "country_code": "BR"},
    "be": {"name": "Bern", "country_code": "CH"},
}


@pytest_asyncio.fixture
async def seed_cities(db_session):
    cities = {key: City(**attrs) for key, attrs in CITY_FIXTURES.items()}
    db_session.add_all(cities.values())
    await db_session.commit()
    return cities


@pytest_asyncio.fixture
async def seed_inhabitants(db_session, seed_cities):
    ny = seed_cities["ny"]
    people = [
        Person(
            name="John Doe",
            children=2,
            city_id=ny.id,
            rating=4.5,
            income=Decimal("85000.00"),
            birthdate=datetime.date(1980, 5, 17),
            remarks="Lives in Manhattan",
        ),
        Person(name="Jane Roe", city_id=ny.id),
    ]
    db_session.add_all(people)
    await db_session.commit()

    return {**seed_cities, "people": people}
