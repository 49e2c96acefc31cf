"""uniconnect FastAPI application."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .__version__ import __version__
from .api.exception_handlers import register_exception_handlers
from .config.logging_config import setup_logging
from .config.settings import AppSettings, get_settings
from .container import ServiceContainer, build_services
from .database.connection import DatabaseManager
from .database.schema import create_schema
from .features.auth.routers import router as auth_router
from .features.students.routers import router as students_router
from .features.study_groups.routers import router as study_groups_router
from .features.system.routers import router as health_router
from .middleware.timing import TimingMiddleware

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[AppSettings] = None,
    services: Optional[ServiceContainer] = None,
) -> FastAPI:
    """Create the API.

    When ``services`` is given it is used as-is and no database pool is
    opened; otherwise the lifespan creates the pool, applies the schema and
    builds the services.
    """
    settings = settings or get_settings()
    setup_logging(settings)
    
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if services is not None:
            app.state.services = services
            yield
            return
        
        database = DatabaseManager.from_settings(settings)
        await database.create_pool()
        try:
            await create_schema(database)
            app.state.services = build_services(settings, database)
            logger.info(f"{settings.app_name} {__version__} started ({settings.environment})")
            yield
        finally:
            await database.close_pool()
    
    app = FastAPI(
        title="UniConnect API",
        version=__version__,
        description="Student accounts, sessions, profiles and study groups",
        lifespan=lifespan,
        docs_url=None if settings.is_production else "/docs",
    )
    
    # Injected services are usable even when the lifespan never runs
    if services is not None:
        app.state.services = services
    
    app.add_middleware(TimingMiddleware, exclude_paths=["/health"])
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=settings.cors_origin_list != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    register_exception_handlers(app, is_production=settings.is_production)
    
    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(students_router)
    app.include_router(study_groups_router)
    
    return app
