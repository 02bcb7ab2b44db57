"""Logging infrastructure with dashboard context."""
import logging
import os
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def default_log_dir() -> Path:
    """Resolve the log directory from FINDASH_HOME (defaults to ~/.findash)."""
    home = os.getenv("FINDASH_HOME")
    base = Path(home) if home else Path.home() / ".findash"
    return base / "logs"


class DashboardContextFilter(logging.Filter):
    """Add dashboard context to log records."""

    def __init__(self):
        super().__init__()
        self.dashboard: Optional[str] = None

    def filter(self, record):
        """Add dashboard to record."""
        record.dashboard = self.dashboard or "system"
        return True


class FinDashLogger:
    """Centralized logging manager."""

    def __init__(
        self,
        log_level: str = "INFO",
        log_dir: Optional[Path] = None,
        max_file_size_mb: int = 10,
        backup_count: int = 30
    ):
        self.log_dir = Path(log_dir) if log_dir else default_log_dir()
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.log_file = self.log_dir / "findash.log"
        self.context_filter = DashboardContextFilter()

        self.logger = logging.getLogger("findash")
        self.logger.setLevel(getattr(logging, log_level.upper()))
        self.logger.propagate = False

        # Close and remove existing handlers
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

        file_handler = RotatingFileHandler(
            self.log_file,
            maxBytes=max_file_size_mb * 1024 * 1024,
            backupCount=backup_count,
            encoding="utf-8"
        )
        file_handler.setLevel(logging.DEBUG)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)

        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [dashboard:%(dashboard)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

        file_handler.setFormatter(formatter)
        console_handler.setFormatter(formatter)

        file_handler.addFilter(self.context_filter)
        console_handler.addFilter(self.context_filter)

        self.logger.addHandler(file_handler)
        self.logger.addHandler(console_handler)

    def set_dashboard_context(self, dashboard: Optional[str]):
        """Set current dashboard context for logging."""
        self.context_filter.dashboard = dashboard

    def set_level(self, log_level: str):
        """Change the logger level after construction."""
        self.logger.setLevel(getattr(logging, log_level.upper()))

    def get_logger(self) -> logging.Logger:
        """Get the configured logger."""
        return self.logger


# Global logger instance
_logger_instance: Optional[FinDashLogger] = None


def get_logger(log_level: str = "INFO") -> logging.Logger:
    """Get or create global logger instance."""
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = FinDashLogger(log_level)
    return _logger_instance.get_logger()


def configure_logging(
    log_level: str,
    log_dir: Optional[Path] = None,
    max_file_size_mb: int = 10,
    backup_count: int = 30
) -> logging.Logger:
    """Rebuild the global logger from application settings."""
    global _logger_instance
    _logger_instance = FinDashLogger(log_level, log_dir, max_file_size_mb, backup_count)
    return _logger_instance.get_logger()


def set_dashboard_context(dashboard: Optional[str]):
    """Set dashboard context for logging."""
    global _logger_instance
    if _logger_instance:
        _logger_instance.set_dashboard_context(dashboard)
