"""Dashboard orchestration module."""
from .dashboard import DashboardService

__all__ = ["DashboardService"]
