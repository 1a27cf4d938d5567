"""
Marigold Catering API process entry.
"""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from auth import router as auth_router
from auth import security
from careers import router as careers_router
from contacts import router as contacts_router
from core import db, settings, uploadthing
from core.errors import register_exception_handlers
from core.log import configure_logging
from corporate_services import router as corporate_services_router
from exclusive_locations import router as exclusive_locations_router
from menu_items import router as menu_items_router
from services import router as services_router
from team import router as team_router
from testimonials import router as testimonials_router
from uploads import file_routes as upload_file_routes
from uploads import router as uploads_router
from venues import router as venues_router

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Production refuses to start without a signing secret.
    security.jwt_secret()
    # Initialize the DB pool once per process.
    await db.init_pool()
    uploadthing.log_config()
    logger.info("api_started env=%s", settings.app_env())
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(title="Marigold Catering API", lifespan=lifespan)

register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "request method=%s path=%s status=%s duration_ms=%.1f",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
    )
    return response


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router.router, prefix="/api/auth", tags=["auth"])
app.include_router(contacts_router.router, prefix="/api/contacts", tags=["contacts"])
app.include_router(careers_router.router, prefix="/api/careers", tags=["careers"])
app.include_router(venues_router.router, prefix="/api/venues", tags=["venues"])
app.include_router(services_router.router, prefix="/api/services", tags=["services"])
app.include_router(menu_items_router.router, prefix="/api/menu-items", tags=["menu-items"])
app.include_router(
    corporate_services_router.router,
    prefix="/api/corporate-services",
    tags=["corporate-services"],
)
app.include_router(
    exclusive_locations_router.router,
    prefix="/api/exclusive-locations",
    tags=["exclusive-locations"],
)
app.include_router(team_router.router, prefix="/api/team", tags=["team"])
app.include_router(testimonials_router.router, prefix="/api/testimonials", tags=["testimonials"])
app.include_router(uploads_router.router, prefix="/api/uploads", tags=["uploads"])
app.include_router(upload_file_routes.router, prefix="/api/uploadthing", tags=["uploads"])


@app.get("/api/health")
def health() -> dict:
    return {
        "success": True,
        "message": "Marigold Catering API is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.app_env(),
    }


@app.get("/")
def root() -> dict:
    return {"success": True, "message": "Marigold Catering API"}


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=settings.port())
