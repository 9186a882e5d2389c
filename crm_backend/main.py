"""FastAPI application — main entry point."""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from crm_backend import __version__
from crm_backend.config import get_settings
from crm_backend.infrastructure.database import engine, Base, SessionLocal
from crm_backend.core.logging import configure_logging
from crm_backend.core.middleware import setup_middleware
from crm_backend.core.exceptions import AppError, app_error_handler, global_exception_handler

# Import all models so SQLAlchemy knows about them
import crm_backend.domain.models  # noqa: F401

from crm_backend.interfaces.api.auth import router as auth_router
from crm_backend.interfaces.api.admin import router as admin_router
from crm_backend.interfaces.api.dashboard import router as dashboard_router

settings = get_settings()

# Configure logging immediately
configure_logging(settings)
logger = structlog.get_logger(__name__)


def bootstrap_admin() -> None:
    """Create the configured admin account if it does not exist yet."""
    if not (settings.ADMIN_EMAIL and settings.ADMIN_PASSWORD):
        return

    from crm_backend.application.services.security import PasswordHasher
    from crm_backend.application.services.user_service import ensure_admin
    from crm_backend.infrastructure.repositories.user_repository import SQLAlchemyUserRepository

    db = SessionLocal()
    try:
        ensure_admin(
            SQLAlchemyUserRepository(db),
            PasswordHasher(rounds=settings.BCRYPT_ROUNDS),
            email=settings.ADMIN_EMAIL,
            password=settings.ADMIN_PASSWORD,
            display_name=settings.ADMIN_DISPLAY_NAME,
        )
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown events."""
    logger.info("Starting CRM backend", env=settings.ENVIRONMENT)

    # Create DB tables (dev only — use migrations in production)
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created/verified")

    bootstrap_admin()

    yield

    engine.dispose()
    logger.info("CRM backend stopped")


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"success": False, "message": "Invalid request body"},
    )


app = FastAPI(
    title="CRM Backend",
    description="Authentication, user administration and dashboard metrics",
    version=__version__,
    lifespan=lifespan,
)

setup_middleware(app, settings)

app.add_exception_handler(AppError, app_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)
app.add_exception_handler(Exception, global_exception_handler)

app.include_router(auth_router)
app.include_router(admin_router)
app.include_router(dashboard_router)


@app.get("/")
def root():
    return {
        "name": "CRM Backend",
        "version": __version__,
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
def health():
    return {"status": "healthy"}
