"""Application settings loader from YAML configuration."""
import os
import yaml
from pathlib import Path
from typing import List, Optional
from dataclasses import dataclass

from ..api.query_cache import InvalidationTrigger
from ..utils.exceptions import ConfigError
from ..utils.logger import LOG_LEVELS

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "config.yaml"


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass
class AppSettings:
    """Application-wide settings loaded from config.yaml."""

    # App info
    app_name: str
    app_version: str

    # Logging
    log_level: str
    log_max_file_size_mb: int
    log_backup_count: int
    logs_dir: Optional[str]

    # API
    api_base_url: str
    api_timeout_seconds: float

    # Query cache
    cache_stale_time_seconds: float
    cache_refetch_on: List[str]

    # Retry
    retry_max_retries: int
    retry_initial_delay_seconds: float
    retry_backoff_factor: float

    # Dashboard
    window_size: int
    recent_limit: int

    @classmethod
    def load(cls, config_path: Path = None) -> "AppSettings":
        """Load settings from YAML file."""
        if config_path is None:
            env_path = os.getenv("FINDASH_CONFIG")
            config_path = Path(env_path) if env_path else DEFAULT_CONFIG_PATH
        config_path = Path(config_path)

        if not config_path.exists():
            raise ConfigError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file is empty or not a mapping: {config_path}")

        try:
            settings = cls(
                app_name=config["app"]["name"],
                app_version=str(config["app"]["version"]),
                log_level=config["logging"]["level"],
                log_max_file_size_mb=config["logging"]["max_file_size_mb"],
                log_backup_count=config["logging"]["backup_count"],
                logs_dir=config["logging"].get("logs_dir"),
                api_base_url=config["api"]["base_url"],
                api_timeout_seconds=config["api"]["timeout_seconds"],
                cache_stale_time_seconds=config["cache"]["stale_time_seconds"],
                cache_refetch_on=list(config["cache"].get("refetch_on", [])),
                retry_max_retries=config["retry"]["max_retries"],
                retry_initial_delay_seconds=config["retry"]["initial_delay_seconds"],
                retry_backoff_factor=config["retry"]["backoff_factor"],
                window_size=config["dashboard"]["window_size"],
                recent_limit=config["dashboard"]["recent_limit"]
            )
        except (KeyError, TypeError) as e:
            raise ConfigError(f"Missing configuration key in {config_path}: {e}") from e

        settings.validate()
        return settings

    def validate(self) -> None:
        """Reject values the dashboard cannot run with."""
        if not self.api_base_url:
            raise ConfigError("api.base_url is required")
        if isinstance(self.window_size, bool) or not isinstance(self.window_size, int) or self.window_size <= 0:
            raise ConfigError(f"dashboard.window_size must be a positive integer, got {self.window_size!r}")
        if isinstance(self.recent_limit, bool) or not isinstance(self.recent_limit, int) or self.recent_limit < 0:
            raise ConfigError(f"dashboard.recent_limit must be a non-negative integer, got {self.recent_limit!r}")
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(
                f"logging.level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
            )
        for name, value in (
            ("logging.max_file_size_mb", self.log_max_file_size_mb),
            ("logging.backup_count", self.log_backup_count),
            ("retry.max_retries", self.retry_max_retries),
        ):
            if not _is_int(value):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
        for name, value in (
            ("api.timeout_seconds", self.api_timeout_seconds),
            ("cache.stale_time_seconds", self.cache_stale_time_seconds),
            ("retry.initial_delay_seconds", self.retry_initial_delay_seconds),
            ("retry.backoff_factor", self.retry_backoff_factor),
        ):
            if not _is_number(value):
                raise ConfigError(f"{name} must be a number, got {value!r}")
        if self.cache_stale_time_seconds < 0:
            raise ConfigError("cache.stale_time_seconds must be >= 0")
        if self.retry_max_retries < 1:
            raise ConfigError("retry.max_retries must be at least 1")
        self.refetch_triggers()

    def refetch_triggers(self) -> List[InvalidationTrigger]:
        """Parse cache.refetch_on names into triggers."""
        triggers = []
        for name in self.cache_refetch_on:
            try:
                triggers.append(InvalidationTrigger(name))
            except ValueError:
                raise ConfigError(f"Unknown cache refetch trigger: {name!r}") from None
        return triggers


# Global settings instance
_settings: AppSettings = None


def get_settings() -> AppSettings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = AppSettings.load()
    return _settings
