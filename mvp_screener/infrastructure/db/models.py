"""
Database Models (SQLAlchemy ORM)
Daily price/volume history read by the screener
"""

from sqlalchemy import BigInteger, Column, Date, Index, Integer, Numeric, String

from mvp_screener.infrastructure.db.database import Base


class StockPriceModel(Base):
    """One closing price and traded volume per symbol per trading day"""
    __tablename__ = "stock_prices"

    id = Column(Integer, primary_key=True, autoincrement=True)
    stock_symbol = Column(String(32), nullable=False)
    date = Column(Date, nullable=False)
    price = Column(Numeric(14, 4), nullable=False)
    volume = Column(BigInteger, nullable=False)

    __table_args__ = (
        Index("idx_stock_prices_symbol_date", "stock_symbol", "date"),
    )
