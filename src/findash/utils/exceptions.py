"""Custom exception classes for FinDash."""


class FinDashError(Exception):
    """Base exception for FinDash."""
    pass


class ConfigError(FinDashError):
    """Configuration and argument errors."""
    pass


class DataError(FinDashError):
    """Malformed or missing fields in expense/salary records."""
    pass


class NetworkError(FinDashError):
    """Dashboard API errors."""
    pass


# Retryable errors
class RetryableError(FinDashError):
    """Base class for errors that should trigger retry."""
    pass


class RetryableNetworkError(RetryableError, NetworkError):
    """Network errors that can be retried."""
    pass
