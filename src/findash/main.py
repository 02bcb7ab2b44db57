"""Command-line entry point."""
import sys
import json
import argparse
from pathlib import Path

from .api.client import DashboardApiClient
from .api.query_cache import QueryCache
from .config.settings import AppSettings
from .orchestrator.dashboard import DashboardService
from .summary.categories import tag_for
from .summary.models import SummaryResult
from .summary.variants import VARIANTS, get_variant
from .utils.exceptions import FinDashError
from .utils.logger import configure_logging, get_logger

logger = get_logger()


def _build_service(settings: AppSettings, variant_name: str) -> DashboardService:
    """Wire client, cache and aggregator from settings."""
    client = DashboardApiClient(
        base_url=settings.api_base_url,
        timeout=settings.api_timeout_seconds,
        max_retries=settings.retry_max_retries,
        initial_delay=settings.retry_initial_delay_seconds,
        backoff_factor=settings.retry_backoff_factor
    )
    cache = QueryCache(
        stale_time=settings.cache_stale_time_seconds,
        refetch_on=settings.refetch_triggers()
    )
    return DashboardService(client, cache=cache, variant=get_variant(variant_name))


def _print_summary(result: SummaryResult) -> None:
    """Print summary cards, monthly series and recent activity."""
    totals = result.totals
    print(f"\nTotal income:   {totals.total_income:>14,.2f}")
    print(f"Total expenses: {totals.total_expense:>14,.2f}  ({result.expense_count} expenses total)")
    print(f"Balance:        {totals.balance:>14,.2f}")

    if result.is_empty:
        print("\nNo data available.")
        return

    print(f"\n{'Month':<10} {'Expenses':>14} {'Income':>14}")
    print("-" * 40)
    for bucket in result.monthly_series:
        income = "-" if bucket.total_income is None else f"{bucket.total_income:,.2f}"
        print(f"{bucket.label:<10} {bucket.total_expense:>14,.2f} {income:>14}")

    print("\nRecent activity:")
    if not result.recent_expenses:
        print("  No expenses recorded.")
    for expense in result.recent_expenses:
        description = expense.description or expense.category
        print(f"  {expense.date.isoformat()}  {description:<30} {expense.amount:>12,.2f}")


def _print_categories(result: SummaryResult) -> None:
    """Print category breakdown with shares and display tags."""
    if not result.category_shares:
        print("No expense categories found.")
        return

    print(f"\n{'Category':<25} {'Tag':<14} {'Amount':>14} {'Share':>8}")
    print("-" * 64)
    for share in result.category_shares:
        flag = " !" if share.exceeds_threshold else ""
        print(
            f"{share.category or '(none)':<25} {tag_for(share.category).value:<14} "
            f"{share.amount:>14,.2f} {share.percent:>7.1f}%{flag}"
        )


def main(argv=None) -> int:
    """Main entry point for the FinDash CLI."""
    parser = argparse.ArgumentParser(description="FinDash personal finance dashboard")
    parser.add_argument(
        "command",
        nargs="?",
        choices=["summary", "categories"],
        default="summary",
        help="Command to execute (default: summary)"
    )
    parser.add_argument(
        "--variant",
        choices=sorted(VARIANTS),
        default="standard",
        help="Dashboard variant (default: standard)"
    )
    parser.add_argument("--config", type=Path, help="Path to config.yaml")
    parser.add_argument("--json", action="store_true", help="Print the summary as JSON")

    args = parser.parse_args(argv)

    try:
        settings = AppSettings.load(args.config)
        configure_logging(
            settings.log_level,
            Path(settings.logs_dir) if settings.logs_dir else None,
            settings.log_max_file_size_mb,
            settings.log_backup_count
        )
        service = _build_service(settings, args.variant)
        result = service.load_summary(window_size=settings.window_size, limit=settings.recent_limit)
    except FinDashError as e:
        logger.critical(f"Failed to load dashboard: {e}")
        return 1

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    elif args.command == "categories":
        _print_categories(result)
    else:
        _print_summary(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
