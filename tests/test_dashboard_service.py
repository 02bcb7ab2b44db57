"""Tests for dashboard orchestration."""
import unittest
from datetime import date
from decimal import Decimal

from findash.api.query_cache import QueryCache, InvalidationTrigger
from findash.orchestrator.dashboard import DashboardService
from findash.summary.aggregator import FinanceAggregator
from findash.summary.variants import INDIA
from findash.utils.exceptions import DataError


class FakeClient:
    """Serves canned records per path and counts calls."""

    def __init__(self, records):
        self.records = records
        self.calls = []

    def fetch_expenses(self, path):
        self.calls.append(path)
        return self.records[path]

    def fetch_salaries(self, path):
        self.calls.append(path)
        return self.records[path]


class TestDashboardService(unittest.TestCase):
    """Test DashboardService functionality."""

    def setUp(self):
        """Set up test fixtures."""
        self.client = FakeClient({
            "/api/expenses": [
                {"id": 1, "amount": "120.00", "category": "Groceries", "date": "2024-07-02"},
                {"id": 2, "amount": "80.00", "category": "Fuel", "date": "2024-06-11"},
            ],
            "/api/indian-expenses": [
                {"id": 10, "amount": "2500", "category": "Rent", "date": "2024-07-01T00:00:00.000Z"},
            ],
            "/api/salaries": [{"id": 1, "amount": "1000", "month": "July"}],
        })
        self.aggregator = FinanceAggregator(clock=lambda: date(2024, 7, 20))

    def test_load_summary_standard(self):
        """Test end-to-end summary for the standard dashboard."""
        service = DashboardService(self.client, aggregator=self.aggregator)
        result = service.load_summary()

        self.assertEqual(result.totals.total_expense, Decimal("200.00"))
        self.assertEqual(result.totals.balance, Decimal("800.00"))
        self.assertEqual(result.monthly_series[-1].total_income, Decimal("1000"))
        self.assertEqual(self.client.calls, ["/api/expenses", "/api/salaries"])

    def test_load_summary_india(self):
        """Test the India dashboard reads its own endpoint."""
        service = DashboardService(self.client, aggregator=self.aggregator, variant=INDIA)
        result = service.load_summary()

        self.assertEqual(result.category_totals, {"Rent": Decimal("2500")})
        self.assertEqual(result.monthly_series[-1].label, "Jul 2024")
        self.assertIn("/api/indian-expenses", self.client.calls)

    def test_cache_and_refresh(self):
        """Test cached loads and event-driven refetch."""
        cache = QueryCache(stale_time=300, clock=lambda: 0.0)
        service = DashboardService(self.client, cache=cache, aggregator=self.aggregator)

        service.load_summary()
        service.load_summary()
        self.assertEqual(len(self.client.calls), 2)

        self.assertEqual(service.refresh(InvalidationTrigger.WINDOW_FOCUS), 2)
        service.load_summary()
        self.assertEqual(len(self.client.calls), 4)

    def test_malformed_records_propagate(self):
        """Test validation errors reach the caller."""
        self.client.records["/api/expenses"] = [{"id": 1, "amount": "x", "category": "a", "date": "2024-01-01"}]
        service = DashboardService(self.client, aggregator=self.aggregator)

        with self.assertRaises(DataError):
            service.load_summary()


if __name__ == "__main__":
    unittest.main()
