from datetime import date, timedelta
from decimal import Decimal
from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from mvp_screener.domain.models import Observation, SymbolSeries
from mvp_screener.infrastructure.db.database import Base
from mvp_screener.infrastructure.db import models  # noqa: F401


# Oldest day of every generated history
BASE_DATE = date(2026, 1, 5)


@pytest.fixture
def make_series():
    """Build a SymbolSeries from plain numbers (index 0 = newest)"""

    def _make(symbol="TEST", prices=None, volumes=None, **kwargs):
        prices = prices if prices is not None else [100] * 15
        volumes = volumes if volumes is not None else [1000] * 15
        return SymbolSeries(
            symbol=symbol,
            prices=[Decimal(str(p)) for p in prices],
            volumes=list(volumes),
            **kwargs,
        )

    return _make


@pytest.fixture
def make_observations():
    """
    Build daily observations from newest-first prices/volumes.
    The last element lands on BASE_DATE, earlier elements on later days.
    """

    def _make(symbol, prices, volumes, start=BASE_DATE):
        count = len(prices)
        return [
            Observation(
                symbol=symbol,
                date=start + timedelta(days=count - 1 - i),
                price=Decimal(str(price)),
                volume=volume,
            )
            for i, (price, volume) in enumerate(zip(prices, volumes))
        ]

    return _make


@pytest.fixture
async def db_engine(tmp_path):
    db_path = tmp_path / "test.db"
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{db_path}",
        echo=False
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session
