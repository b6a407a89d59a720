from fastapi import APIRouter

from app.api.v1.endpoints.health import router as health_router
from app.api.v1.endpoints.cities import router as cities_router
from app.api.v1.endpoints.people import router as people_router


router = APIRouter(prefix="/v1")
router.include_router(health_router, tags=["health"])
router.include_router(cities_router, tags=["cities"])
router.include_router(people_router, tags=["people"])
