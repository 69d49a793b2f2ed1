# app/database/connection.py
import logging
from typing import AsyncIterator

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):  # all surveillance tables share this metadata
    pass


def build_engine(database_url: str, echo: bool = False, enforce_foreign_keys: bool = True) -> AsyncEngine:
    """Create the async engine. SQLite gets foreign keys and case-sensitive LIKE per connection."""
    engine = create_async_engine(
        database_url,
        echo=echo,
        pool_pre_ping=not database_url.startswith("sqlite"),
        future=True,
    )

    if database_url.startswith("sqlite"):

        @event.listens_for(engine.sync_engine, "connect")
        def _configure_sqlite(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            # LIKE must respect case for the district filter, as on PostgreSQL
            cursor.execute("PRAGMA case_sensitive_like=ON")
            if enforce_foreign_keys:
                cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )


async def create_tables(engine: AsyncEngine) -> None:
    # Importing the registry fills Base.metadata with every table
    from app.database import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(f"✅ Tables ready: {', '.join(sorted(Base.metadata.tables))}")


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """One session per request, taken from the factory built at startup."""
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        yield session
