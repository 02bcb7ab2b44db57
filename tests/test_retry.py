"""Tests for retry decorator and logging setup."""
import logging
import os
import shutil
import tempfile
import unittest
from logging.handlers import RotatingFileHandler
from pathlib import Path

from findash.utils.exceptions import DataError, RetryableNetworkError
from findash.utils.logger import DashboardContextFilter, configure_logging
from findash.utils.retry import retry_with_backoff


class TestRetryWithBackoff(unittest.TestCase):
    """Test retry_with_backoff functionality."""

    def setUp(self):
        """Set up test fixtures."""
        self.sleeps = []
        self.attempts = 0

    def test_succeeds_after_retryable_failures(self):
        """Test exponential waits between attempts."""
        @retry_with_backoff(max_retries=4, initial_delay=0.5, backoff_factor=3, sleep=self.sleeps.append)
        def flaky():
            self.attempts += 1
            if self.attempts < 3:
                raise RetryableNetworkError("temporary")
            return "ok"

        self.assertEqual(flaky(), "ok")
        self.assertEqual(self.sleeps, [0.5, 1.5])

    def test_non_retryable_propagates_immediately(self):
        """Test other errors are not retried."""
        @retry_with_backoff(max_retries=4, sleep=self.sleeps.append)
        def broken():
            self.attempts += 1
            raise DataError("bad record")

        with self.assertRaises(DataError):
            broken()
        self.assertEqual(self.attempts, 1)
        self.assertEqual(self.sleeps, [])


class TestDashboardContextFilter(unittest.TestCase):
    """Test log record context."""

    def test_default_and_explicit_context(self):
        """Test dashboard name injection."""
        context_filter = DashboardContextFilter()
        record = logging.LogRecord("findash", logging.INFO, __file__, 1, "msg", None, None)

        context_filter.filter(record)
        self.assertEqual(record.dashboard, "system")

        context_filter.dashboard = "india"
        context_filter.filter(record)
        self.assertEqual(record.dashboard, "india")


class TestConfigureLogging(unittest.TestCase):
    """Test rebuilding the global logger."""

    def setUp(self):
        """Set up test fixtures."""
        self.first_dir = Path(tempfile.mkdtemp())
        self.second_dir = Path(tempfile.mkdtemp())

    def tearDown(self):
        """Clean up test fixtures."""
        for handler in list(logging.getLogger("findash").handlers):
            handler.close()
        shutil.rmtree(self.first_dir, ignore_errors=True)
        shutil.rmtree(self.second_dir, ignore_errors=True)

    def file_handlers(self, logger):
        return [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]

    def test_reconfigure_closes_previous_file_handler(self):
        """Test the old log file is closed and only one file handler remains."""
        logger = configure_logging("INFO", self.first_dir)
        old_handler = self.file_handlers(logger)[0]
        logger.info("first")

        logger = configure_logging("DEBUG", self.second_dir)
        handlers = self.file_handlers(logger)

        self.assertIsNone(old_handler.stream)
        self.assertNotIn(old_handler, logger.handlers)
        self.assertEqual(len(handlers), 1)
        self.assertEqual(handlers[0].baseFilename, os.path.abspath(self.second_dir / "findash.log"))
        self.assertEqual(len(logger.handlers), 2)
        self.assertEqual(logger.level, logging.DEBUG)


if __name__ == "__main__":
    unittest.main()
