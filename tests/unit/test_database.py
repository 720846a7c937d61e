import pytest

from mvp_screener.infrastructure.db import database
from mvp_screener.infrastructure.db.database import to_async_url, to_sync_url


@pytest.mark.parametrize(
    "url, expected",
    [
        ("postgres://u:p@db:5432/mvp", "postgresql+asyncpg://u:p@db:5432/mvp"),
        ("postgresql://u:p@db:5432/mvp", "postgresql+asyncpg://u:p@db:5432/mvp"),
        ("postgresql+asyncpg://u:p@db/mvp", "postgresql+asyncpg://u:p@db/mvp"),
        ("sqlite+aiosqlite:///test.db", "sqlite+aiosqlite:///test.db"),
    ],
)
def test_to_async_url(url, expected):
    assert to_async_url(url) == expected


@pytest.mark.parametrize(
    "url, expected",
    [
        ("postgres://u:p@db:5432/mvp", "postgresql+psycopg2://u:p@db:5432/mvp"),
        ("postgresql://u:p@db:5432/mvp", "postgresql+psycopg2://u:p@db:5432/mvp"),
        ("postgresql+asyncpg://u:p@db/mvp", "postgresql+psycopg2://u:p@db/mvp"),
    ],
)
def test_to_sync_url_for_migrations(url, expected):
    assert to_sync_url(url) == expected


def test_module_exposes_only_engine_lifecycle():
    # Sessions come from async_session_factory; tables come from Alembic
    assert database.async_session_factory is not None
    assert not hasattr(database, "get_db")
    assert not hasattr(database, "init_db")


@pytest.mark.asyncio
async def test_close_db_is_safe_without_connections():
    await database.close_db()
