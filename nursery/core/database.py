"""
Database connection and session management
Uses SQLAlchemy async engine (in-memory SQLite by default, PostgreSQL in production)
Reference: https://docs.sqlalchemy.org/en/20/orm/extensions/asyncio.html
"""
import asyncio
import uuid
from contextlib import nullcontext
from datetime import datetime, timezone
from typing import AsyncContextManager, AsyncIterator, Optional

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool, StaticPool


def new_id() -> str:
    """Generate a primary key for a new record (UUID4 string)"""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    """Creation timestamp for new records"""
    return datetime.now(timezone.utc)


def create_engine_for(database_url: str) -> AsyncEngine:
    """
    Create the async engine for a database URL

    SQLite (including the default in-memory database) shares a single
    connection through StaticPool so every session sees the same data.
    Other databases use NullPool and open a connection per session.
    Reference: https://docs.sqlalchemy.org/en/20/dialects/sqlite.html#using-a-memory-database-in-multiple-threads
    """
    if database_url.startswith("sqlite"):
        return create_async_engine(
            database_url,
            echo=False,  # Set to True for SQL query logging (useful for debugging)
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )

    # Reference: https://docs.sqlalchemy.org/en/20/core/pooling.html#switching-pool-implementations
    return create_async_engine(
        database_url,
        echo=False,
        poolclass=NullPool,
        connect_args={
            # asyncpg-specific connection arguments
            # Reference: https://magicstack.github.io/asyncpg/current/api/index.html#connection
            "command_timeout": 60,
            "server_settings": {
                "application_name": "nursery_inventory_api",
            },
        },
    )


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Create the session factory bound to an engine
    Reference: https://docs.sqlalchemy.org/en/20/orm/extensions/asyncio.html#session-basics
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Keep objects accessible after commit
        autoflush=False,
    )


def create_db_lock(engine: AsyncEngine) -> Optional[asyncio.Lock]:
    """
    Lock serializing sessions on engines that share one connection

    With StaticPool every session uses the same SQLite connection, so one
    session's rollback or close would discard another's uncommitted writes.
    Returns None for pooled databases, which need no serialization.
    """
    if engine.dialect.name == "sqlite":
        return asyncio.Lock()
    return None


def connection_guard(lock: Optional[asyncio.Lock]) -> AsyncContextManager:
    """Hold lock for the duration of a block, or do nothing when lock is None"""
    return lock if lock is not None else nullcontext()


# Base class for all database models
# Reference: https://docs.sqlalchemy.org/en/20/orm/declarative_styles.html
class Base(DeclarativeBase):
    """Base class for SQLAlchemy declarative models"""
    pass


# Dependency to get database session
# The session factory is created by the application lifespan and kept on app.state
# Reference: https://fastapi.tiangolo.com/tutorial/dependencies/dependencies-with-yield/
async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """
    Dependency function that provides a database session

    - Commits on success
    - Rolls back on error
    - Always closes the session
    - On SQLite, holds the app lock until the session is closed
    """
    session_maker = request.app.state.session_maker
    async with connection_guard(request.app.state.db_lock):
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                # Re-raise the original exception so FastAPI can handle it properly
                raise
