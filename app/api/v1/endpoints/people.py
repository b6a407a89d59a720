from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.redirects import redirect_to
from app.core.db import get_db
from app.core.flash import pop_flash, set_flash
from app.schemas.person import PeopleIndexOut, PersonOut
from app.services.crud import RecordNotFound
from app.services.people import people


router = APIRouter()


@router.get("/people", response_model=PeopleIndexOut, name="people.index")
async def index(request: Request, db: AsyncSession = Depends(get_db)) -> PeopleIndexOut:
    entries = await people.list_entries(db)
    return PeopleIndexOut(
        entries=[PersonOut.model_validate(p) for p in entries],
        flash=pop_flash(request),
    )


@router.get("/people/{person_id}", name="people.show")
async def show(person_id: int, request: Request, db: AsyncSession = Depends(get_db)) -> RedirectResponse:
    try:
        await people.find_entry(db, person_id)
    except RecordNotFound:
        raise HTTPException(status_code=404, detail="Person not found")

    return redirect_to(request, "people.index")


@router.delete("/people/{person_id}", name="people.destroy")
async def destroy(person_id: int, request: Request, db: AsyncSession = Depends(get_db)) -> RedirectResponse:
    try:
        await people.destroy_entry(db, person_id)
    except RecordNotFound:
        raise HTTPException(status_code=404, detail="Person not found")

    set_flash(request, notice="Person was successfully deleted.")
    return redirect_to(request, "people.index")
