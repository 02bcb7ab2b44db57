"""FinDash: expense and salary summaries for the finance dashboard."""

__version__ = "0.1.0"
