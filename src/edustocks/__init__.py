"""EduStocks: educational stock-trading simulator backend."""

__version__ = "0.1.0"
