from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from app.api.v1.redirects import redirect_to
from app.core.db import get_db
from app.core.flash import pop_flash, set_flash
from app.schemas.city import CityCreate, CityIndexOut, CityOut, CityUpdate
from app.services.cities import cities
from app.services.crud import DependencyConflict, RecordNotFound


log = logging.getLogger(__name__)
router = APIRouter()


@router.get("/cities", response_model=CityIndexOut, name="cities.index")
async def index(request: Request, db: AsyncSession = Depends(get_db)) -> CityIndexOut:
    entries = await cities.list_entries(db)
    return CityIndexOut(
        entries=[CityOut.model_validate(c) for c in entries],
        flash=pop_flash(request),
    )


@router.get("/cities/{city_id}", name="cities.show")
async def show(city_id: int, request: Request, db: AsyncSession = Depends(get_db)) -> RedirectResponse:
    """
    There is no detail page: a found city bounces back to the list,
    leaving any pending flash for the list to display.
    """
    try:
        await cities.find_entry(db, city_id)
    except RecordNotFound:
        raise HTTPException(status_code=404, detail="City not found")

    return redirect_to(request, "cities.index")


@router.post("/cities", name="cities.create")
async def create(payload: CityCreate, request: Request, db: AsyncSession = Depends(get_db)) -> RedirectResponse:
    try:
        city = await cities.create_entry(db, payload.model_dump())
    except IntegrityError:
        await db.rollback()
        log.exception("city create failed: integrity error")
        raise HTTPException(status_code=409, detail="Constraint violation")

    set_flash(request, notice=f"City {city.name} was successfully created.")
    return redirect_to(request, "cities.show", city_id=city.id)


@router.put("/cities/{city_id}", name="cities.update")
async def update(city_id: int, payload: CityUpdate, request: Request, db: AsyncSession = Depends(get_db)) -> RedirectResponse:
    try:
        city = await cities.update_entry(db, city_id, payload.model_dump(exclude_unset=True))
    except RecordNotFound:
        raise HTTPException(status_code=404, detail="City not found")
    except IntegrityError:
        await db.rollback()
        log.exception("city update failed: integrity error")
        raise HTTPException(status_code=409, detail="Constraint violation")

    set_flash(request, notice=f"City {city.name} was successfully updated.")
    return redirect_to(request, "cities.show", city_id=city.id)


@router.delete("/cities/{city_id}", name="cities.destroy")
async def destroy(city_id: int, request: Request, db: AsyncSession = Depends(get_db)) -> RedirectResponse:
    try:
        await cities.destroy_entry(db, city_id)
    except RecordNotFound:
        raise HTTPException(status_code=404, detail="City not found")
    except DependencyConflict:
        # the city stays; send the user back to it with the reason
        set_flash(request, alert="City could not be deleted because it still has inhabitants.")
        return redirect_to(request, "cities.show", city_id=city_id)

    set_flash(request, notice="City was successfully deleted.")
    return redirect_to(request, "cities.index")
