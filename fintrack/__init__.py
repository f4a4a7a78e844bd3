"""Record income and expense transactions, summarise and filter them, and export them to CSV."""

__version__ = "0.1.0"
__all__ = ["manager", "transaction"]