"""MVP Screener: Momentum / Volume / Price stock screening"""

__version__ = "0.1.0"
