"""
Load daily price/volume history from CSV into stock_prices.

CSV columns: symbol,date,price,volume (date as YYYY-MM-DD)

Usage:
    python scripts/seed_prices.py data/prices.csv
"""

import argparse
import asyncio
import csv
import logging
import sys
from datetime import date
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from mvp_screener.core.logging import setup_logging
from mvp_screener.domain.models import Observation
from mvp_screener.infrastructure.db import database
from mvp_screener.infrastructure.db.repositories.stock_price_repository import StockPriceRepository

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("symbol", "date", "price", "volume")


def read_observations(path: Path) -> List[Observation]:
    """Parse a CSV file into observations. Raises ValueError on bad rows."""
    with open(path, newline="") as f:
        reader = csv.DictReader(f)
        missing = [c for c in REQUIRED_COLUMNS if c not in (reader.fieldnames or [])]
        if missing:
            raise ValueError(f"{path}: missing columns {', '.join(missing)}")

        observations = []
        for line_no, row in enumerate(reader, start=2):
            try:
                observations.append(
                    Observation(
                        symbol=row["symbol"].strip(),
                        date=date.fromisoformat(row["date"].strip()),
                        price=Decimal(row["price"].strip()),
                        volume=int(row["volume"].strip()),
                    )
                )
            except (ValueError, InvalidOperation) as exc:
                raise ValueError(f"{path}:{line_no}: {exc}") from exc

    return observations


async def seed(session_factory: async_sessionmaker[AsyncSession], observations: List[Observation]) -> int:
    async with session_factory() as session:
        added = await StockPriceRepository(session).add_observations(observations)
        await session.commit()
    return added


async def _main(path: Path) -> int:
    try:
        observations = read_observations(path)
    except (OSError, ValueError) as exc:
        logger.error(f"Failed to read {path}: {exc}")
        return 1

    try:
        added = await seed(database.async_session_factory, observations)
    finally:
        await database.close_db()

    logger.info(f"Seeded {added} rows from {path}")
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Seed stock_prices from a CSV file")
    parser.add_argument("csv_path", type=Path, help="CSV with symbol,date,price,volume")
    args = parser.parse_args(argv)

    setup_logging("INFO")
    return asyncio.run(_main(args.csv_path))


if __name__ == "__main__":
    sys.exit(main())
