"""Position sizing and risk calculator for a trading journal."""

__version__ = "0.1.0"
