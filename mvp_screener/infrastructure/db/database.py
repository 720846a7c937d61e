"""
Database Configuration
SQLAlchemy async setup for PostgreSQL
"""

import os
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from mvp_screener.config import settings


class Base(DeclarativeBase):
    """Base class for all database models"""
    pass


def to_async_url(url: str) -> str:
    """Convert postgres:// and postgresql:// URLs to postgresql+asyncpg://"""
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)
    if url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def to_sync_url(url: str) -> str:
    """Convert an async URL to the psycopg2 driver used by Alembic"""
    url = to_async_url(url)
    return url.replace("+asyncpg", "+psycopg2", 1)


DATABASE_URL = to_async_url(settings.DATABASE_URL)

# Avoid creating the async engine during Alembic runs
ALEMBIC_MODE = os.getenv("ALEMBIC_MODE") == "1" or os.getenv("ALEMBIC_CONTEXT") == "1"

engine: AsyncEngine | None = None
async_session_factory: async_sessionmaker[AsyncSession] | None = None

if not ALEMBIC_MODE:
    # Engine creation is lazy about connecting; nothing touches the
    # database until the first session executes a statement.
    engine = create_async_engine(
        DATABASE_URL,
        echo=settings.DEBUG,
        pool_pre_ping=True,
        pool_recycle=3600,
    )

    async_session_factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False
    )


async def close_db():
    """Close database connections"""
    if engine is not None:
        await engine.dispose()
