# main.py
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv

# Ensure repo-root .env is loaded for the running server process.
load_dotenv(dotenv_path=Path(__file__).resolve().parents[1] / ".env", override=False)

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from careerhub.config import build_sqlalchemy_db_url, settings
from careerhub.database import Base, engine, mask_db_url
from careerhub.db.gateway import DataAccessError
from careerhub.logging_setup import setup_logging
from careerhub.api.routes.health import router as health_router
from careerhub.routers import (
    career_paths,
    courses,
    dashboard,
    educator,
    jobs,
    mentorship,
    profile,
    recommendations,
    recruiter,
    skills,
)
import careerhub.models  # noqa: F401  # ensure all models are registered


logger = logging.getLogger(__name__)


async def _data_access_error_handler(request: Request, exc: DataAccessError) -> JSONResponse:
    logger.error("data access failure path=%s: %s", request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content={"detail": str(exc)})


def create_app() -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level)
        logger.info("starting %s v%s db=%s", settings.app_name, settings.version, mask_db_url(db_url))
        yield

    application = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_exception_handler(DataAccessError, _data_access_error_handler)

    # Health endpoints (do not depend on API_PREFIX)
    application.include_router(health_router)

    application.include_router(recommendations.router, prefix=settings.api_prefix)
    application.include_router(skills.router, prefix=settings.api_prefix)
    application.include_router(courses.router, prefix=settings.api_prefix)
    application.include_router(career_paths.router, prefix=settings.api_prefix)
    application.include_router(jobs.router, prefix=settings.api_prefix)
    application.include_router(mentorship.router, prefix=settings.api_prefix)
    application.include_router(dashboard.router, prefix=settings.api_prefix)
    application.include_router(profile.router, prefix=settings.api_prefix)
    application.include_router(recruiter.router, prefix=settings.api_prefix)
    application.include_router(educator.router, prefix=settings.api_prefix)

    # Avoid accidental schema changes in shared databases.
    # For local/test sqlite usage, auto-create ORM tables is still convenient.
    db_url = build_sqlalchemy_db_url(settings)
    if db_url.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)
    return application


app = create_app()
