from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware

from app.api.v1.router import router as v1_router
from app.core.config import settings
from app.core.telemetry import setup_telemetry

app = FastAPI(title="Cities Admin API", version="0.1.0")

app.add_middleware(
    SessionMiddleware,
    secret_key=settings.session_secret_key.get_secret_value(),
    same_site="lax",
    https_only=settings.env != "dev",
    max_age=settings.session_max_age,
)

setup_telemetry(app)
app.include_router(v1_router)
