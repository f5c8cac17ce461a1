"""
FastAPI application entry point
Application factory and configuration
Reference: https://fastapi.tiangolo.com/tutorial/bigger-applications/
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from nursery.api.api import build_api_router
from nursery.api.errors import register_exception_handlers
from nursery.core.config import Settings, settings
from nursery.core.database import Base, create_db_lock, create_engine_for, create_session_maker
from nursery.core.logging import configure_logging
from nursery.services.seed import seed_database

# Importing the models registers their tables on Base.metadata
import nursery.models  # noqa: F401

logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application

    Args:
        app_settings: Settings to use instead of the environment-loaded defaults

    Returns:
        Configured FastAPI instance; the database engine is created when the
        application starts and disposed when it stops
    """
    app_settings = app_settings or settings
    configure_logging(app_settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Lifespan context manager for startup and shutdown events
        Creates the engine and session factory, the tables and the seed catalog
        Reference: https://fastapi.tiangolo.com/advanced/events/
        """
        engine = create_engine_for(app_settings.DATABASE_URL)
        session_maker = create_session_maker(engine)
        app.state.engine = engine
        app.state.session_maker = session_maker
        app.state.db_lock = create_db_lock(engine)

        if app_settings.CREATE_TABLES:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info("✓ Database tables ready")

        if app_settings.SEED_DATA:
            async with session_maker() as session:
                await seed_database(session)
                await session.commit()

        yield

        # Shutdown: Dispose of database connections
        await engine.dispose()
        logger.info("Database connections closed")

    app = FastAPI(
        title=app_settings.PROJECT_NAME,
        version=app_settings.VERSION,
        description="Inventory API for plants, their variants, size profiles, seasonal care and fertilizer schedules",
        docs_url="/docs",  # Swagger UI documentation
        redoc_url="/redoc",  # ReDoc documentation
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(build_api_router(app_settings.API_PREFIX))

    @app.get("/")
    async def root():
        """
        Root endpoint
        Provides basic information about the API
        """
        return {
            "message": f"Welcome to {app_settings.PROJECT_NAME}",
            "version": app_settings.VERSION,
            "docs": "/docs",
        }

    return app


# Application instance used by uvicorn (nursery.main:app)
app = create_app()
