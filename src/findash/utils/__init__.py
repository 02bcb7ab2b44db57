"""Utility modules."""
from .logger import get_logger, configure_logging, set_dashboard_context
from .exceptions import (
    FinDashError,
    ConfigError,
    DataError,
    NetworkError,
    RetryableError,
    RetryableNetworkError
)
from .retry import retry_with_backoff

__all__ = [
    "get_logger",
    "configure_logging",
    "set_dashboard_context",
    "FinDashError",
    "ConfigError",
    "DataError",
    "NetworkError",
    "RetryableError",
    "RetryableNetworkError",
    "retry_with_backoff"
]
