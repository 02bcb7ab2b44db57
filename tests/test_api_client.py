"""Tests for dashboard API client."""
import unittest

import requests

from findash.api.client import DashboardApiClient
from findash.utils.exceptions import DataError, NetworkError, RetryableNetworkError


class FakeResponse:
    def __init__(self, status_code=200, payload=None, invalid_json=False):
        self.status_code = status_code
        self.payload = payload
        self.invalid_json = invalid_json

    def json(self):
        if self.invalid_json:
            raise ValueError("Expecting value")
        return self.payload


class FakeSession:
    """Replays queued responses or exceptions."""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.requests = []

    def get(self, url, timeout=None, headers=None):
        self.requests.append((url, timeout))
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class TestDashboardApiClient(unittest.TestCase):
    """Test DashboardApiClient functionality."""

    def make_client(self, session, max_retries=3):
        self.sleeps = []
        return DashboardApiClient(
            "http://api.local/",
            timeout=5,
            session=session,
            max_retries=max_retries,
            initial_delay=1,
            backoff_factor=2,
            sleep=self.sleeps.append
        )

    def test_fetch_expenses(self):
        """Test successful list fetch."""
        records = [{"id": 1, "amount": "5", "category": "Food", "date": "2024-01-01"}]
        session = FakeSession(FakeResponse(payload=records))
        client = self.make_client(session)

        self.assertEqual(client.fetch_expenses(), records)
        self.assertEqual(session.requests, [("http://api.local/api/expenses", 5)])

    def test_retries_server_errors(self):
        """Test 5xx and 429 are retried with backoff."""
        session = FakeSession(
            FakeResponse(status_code=503),
            FakeResponse(status_code=429),
            FakeResponse(payload=[])
        )
        client = self.make_client(session)

        self.assertEqual(client.fetch_salaries(), [])
        self.assertEqual(len(session.requests), 3)
        self.assertEqual(self.sleeps, [1, 2])

    def test_retries_connection_errors_then_gives_up(self):
        """Test retry exhaustion re-raises."""
        session = FakeSession(
            requests.exceptions.ConnectionError("refused"),
            requests.exceptions.Timeout("slow")
        )
        client = self.make_client(session, max_retries=2)

        with self.assertRaises(RetryableNetworkError):
            client.get_records("/api/expenses")
        self.assertEqual(len(session.requests), 2)

    def test_client_error_not_retried(self):
        """Test 4xx fails immediately."""
        session = FakeSession(FakeResponse(status_code=404))
        client = self.make_client(session)

        with self.assertRaises(NetworkError) as ctx:
            client.get_records("/api/missing")
        self.assertNotIsInstance(ctx.exception, RetryableNetworkError)
        self.assertEqual(self.sleeps, [])

    def test_non_list_payload(self):
        """Test body must be a JSON list."""
        client = self.make_client(FakeSession(FakeResponse(payload={"error": "nope"})))
        with self.assertRaises(DataError):
            client.get_records("/api/expenses")

    def test_invalid_json(self):
        """Test undecodable body."""
        client = self.make_client(FakeSession(FakeResponse(invalid_json=True)))
        with self.assertRaises(DataError):
            client.get_records("/api/expenses")


if __name__ == "__main__":
    unittest.main()
