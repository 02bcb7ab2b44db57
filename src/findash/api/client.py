"""HTTP client for the dashboard records API."""
from typing import Any, List, Optional

import requests

from ..utils.exceptions import DataError, NetworkError, RetryableNetworkError
from ..utils.logger import get_logger
from ..utils.retry import retry_with_backoff

logger = get_logger()

RETRYABLE_STATUS = {429}


class DashboardApiClient:
    """Fetches expense and salary record lists as JSON."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
        max_retries: int = 3,
        initial_delay: float = 1.0,
        backoff_factor: float = 2.0,
        sleep=None
    ):
        """
        Initialize API client.

        Args:
            base_url: Server root, e.g. http://localhost:5000
            timeout: Per-request timeout in seconds
            session: Optional requests session (shared connection pool)
            max_retries: Attempts for retryable failures
            initial_delay: First backoff delay in seconds
            backoff_factor: Backoff multiplier
            sleep: Sleep function override for the retry loop
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

        retry_kwargs = dict(
            max_retries=max_retries,
            initial_delay=initial_delay,
            backoff_factor=backoff_factor,
            retryable_exceptions=(RetryableNetworkError,)
        )
        if sleep is not None:
            retry_kwargs["sleep"] = sleep
        self._get_with_retry = retry_with_backoff(**retry_kwargs)(self._get_once)

    def get_records(self, path: str) -> List[Any]:
        """
        GET a record list.

        Args:
            path: Endpoint path, e.g. /api/expenses

        Returns:
            Decoded JSON list
        """
        payload = self._get_with_retry(path)
        if not isinstance(payload, list):
            raise DataError(f"Expected a JSON list from {path}, got {type(payload).__name__}")
        logger.info(f"Fetched {len(payload)} records from {path}")
        return payload

    def fetch_expenses(self, path: str = "/api/expenses") -> List[Any]:
        return self.get_records(path)

    def fetch_salaries(self, path: str = "/api/salaries") -> List[Any]:
        return self.get_records(path)

    def _get_once(self, path: str) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.get(url, timeout=self.timeout, headers={"Accept": "application/json"})
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            raise RetryableNetworkError(f"GET {url} failed: {e}") from e
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"GET {url} failed: {e}") from e

        status = response.status_code
        if status >= 500 or status in RETRYABLE_STATUS:
            raise RetryableNetworkError(f"GET {url} returned HTTP {status}")
        if status >= 400:
            raise NetworkError(f"GET {url} returned HTTP {status}")

        try:
            return response.json()
        except ValueError as e:
            raise DataError(f"Invalid JSON from {url}: {e}") from e
