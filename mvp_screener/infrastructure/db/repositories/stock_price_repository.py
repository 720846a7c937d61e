"""
Stock Price Repository
Read recent price/volume history for screening
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from decimal import Decimal
from typing import Iterable, List

from mvp_screener.domain.models import WINDOW_DAYS, Observation
from mvp_screener.infrastructure.db.models import StockPriceModel


class StockPriceRepository:
    """Repository for stock_prices"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def fetch_recent_observations(self, window: int = WINDOW_DAYS) -> List[Observation]:
        """
        Get the `window` most recent rows of every symbol.

        Rows are ranked per symbol by date descending and filtered in the
        query, so at most `window` rows per symbol leave the database.
        Rows sharing a (symbol, date) are ranked in whatever order the
        database produces.

        Returns:
            Observations ordered by symbol, then date descending
        """
        if window <= 0:
            raise ValueError("window must be positive")

        ranked = (
            select(
                StockPriceModel.stock_symbol,
                StockPriceModel.date,
                StockPriceModel.price,
                StockPriceModel.volume,
                func.row_number()
                .over(
                    partition_by=StockPriceModel.stock_symbol,
                    order_by=StockPriceModel.date.desc(),
                )
                .label("rn"),
            )
            .subquery("ranked_prices")
        )

        result = await self.session.execute(
            select(
                ranked.c.stock_symbol,
                ranked.c.date,
                ranked.c.price,
                ranked.c.volume,
            )
            .where(ranked.c.rn <= window)
            .order_by(ranked.c.stock_symbol, ranked.c.rn)
        )

        return [
            Observation(
                symbol=row.stock_symbol,
                date=row.date,
                price=Decimal(str(row.price)),
                volume=int(row.volume),
            )
            for row in result
        ]

    async def list_symbols(self) -> List[str]:
        result = await self.session.execute(
            select(StockPriceModel.stock_symbol)
            .distinct()
            .order_by(StockPriceModel.stock_symbol)
        )
        return list(result.scalars().all())

    async def add_observations(self, observations: Iterable[Observation]) -> int:
        """
        Insert observations.

        Returns:
            Number of rows added
        """
        models = [
            StockPriceModel(
                stock_symbol=observation.symbol,
                date=observation.date,
                price=observation.price,
                volume=observation.volume,
            )
            for observation in observations
        ]
        self.session.add_all(models)
        await self.session.flush()
        return len(models)
