"""Dashboard API access module."""
from .client import DashboardApiClient
from .query_cache import QueryCache, InvalidationTrigger

__all__ = ["DashboardApiClient", "QueryCache", "InvalidationTrigger"]
