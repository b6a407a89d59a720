from decimal import Decimal

import pytest
from sqlalchemy import select, func

from app.models.person import Person


@pytest.mark.asyncio
async def test_index_lists_people_by_name(client, seed_inhabitants):
    r = await client.get("/v1/people")
    assert r.status_code == 200, r.text
    entries = r.json()["entries"]

    assert [e["name"] for e in entries] == ["Jane Roe", "John Doe"]
    john = entries[1]
    assert john["city_id"] == seed_inhabitants["ny"].id
    assert john["children"] == 2
    assert Decimal(str(john["income"])) == Decimal("85000.00")
    assert john["birthdate"] == "1980-05-17"


@pytest.mark.asyncio
async def test_show_redirects_to_index(client, seed_inhabitants):
    person = seed_inhabitants["people"][0]
    r = await client.get(f"/v1/people/{person.id}")
    assert r.status_code == 303
    assert r.headers["location"] == "/v1/people"


@pytest.mark.asyncio
async def test_destroy_is_never_blocked(client, db_session, seed_inhabitants):
    person = seed_inhabitants["people"][0]

    r = await client.delete(f"/v1/people/{person.id}")
    assert r.status_code == 303
    assert r.headers["location"] == "/v1/people"

    remaining = (await db_session.execute(select(func.count()).select_from(Person))).scalar_one()
    assert remaining == 1


@pytest.mark.asyncio
async def test_destroy_missing_person_is_404(client, seed_inhabitants):
    r = await client.delete("/v1/people/9999")
    assert r.status_code == 404
