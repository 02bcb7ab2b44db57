"""Ties the API client, query cache and aggregator into one dashboard load."""
from typing import Optional

from ..api.client import DashboardApiClient
from ..api.query_cache import QueryCache, InvalidationTrigger
from ..summary.aggregator import FinanceAggregator
from ..summary.models import SummaryResult
from ..summary.variants import STANDARD, DashboardVariant
from ..utils.logger import get_logger, set_dashboard_context

logger = get_logger()


class DashboardService:
    """Orchestrates the flow: API -> cache -> aggregator."""

    def __init__(
        self,
        client: DashboardApiClient,
        cache: Optional[QueryCache] = None,
        aggregator: Optional[FinanceAggregator] = None,
        variant: DashboardVariant = STANDARD
    ):
        self.client = client
        self.cache = cache or QueryCache()
        self.aggregator = aggregator or FinanceAggregator()
        self.variant = variant

    def load_summary(self, window_size: Optional[int] = None, limit: Optional[int] = None) -> SummaryResult:
        """Fetch both record lists (through the cache) and summarize them."""
        set_dashboard_context(self.variant.name)
        try:
            expenses = self.cache.fetch(
                self.variant.expenses_path,
                lambda: self.client.fetch_expenses(self.variant.expenses_path)
            )
            salaries = self.cache.fetch(
                self.variant.salaries_path,
                lambda: self.client.fetch_salaries(self.variant.salaries_path)
            )
            return self.aggregator.summarize(
                expenses,
                salaries,
                variant=self.variant,
                window_size=window_size,
                limit=limit
            )
        finally:
            set_dashboard_context(None)

    def refresh(self, trigger: InvalidationTrigger = InvalidationTrigger.MUTATION) -> int:
        """Forward an invalidation event; returns the number of dropped queries."""
        return self.cache.notify(trigger)
