#!/usr/bin/env python3
"""Expand stored accounts into projected occurrences.

Reads accounts payable/receivable rows from a JSON file shaped like
``{"payable": [...], "receivable": [...]}`` (or generates sample
accounts), expands recurring ones and writes the occurrences plus the
dashboard totals as JSON.

Usage:
    python scripts/project_accounts.py --accounts 50 --seed 42
    python scripts/project_accounts.py --input rows.json --today 2024-06-01 --console
    LOG_FORMAT=json python scripts/project_accounts.py --accounts 10
"""

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from backoffice.config import BackofficeConfig, ProjectionConfig
from backoffice.dashboard import compute_totals, month_summary
from backoffice.exceptions import BackofficeError, ConfigurationError, InvalidAccountError
from backoffice.generators import AccountGenerator
from backoffice.logging import LOG_FORMATS, setup_logging
from backoffice.models import AccountKind
from backoffice.recurrence import RecurrenceExpander
from backoffice.sinks import ConsoleSink, JsonFileSink
from backoffice.store import AccountStore

logger = logging.getLogger(__name__)


def load_store(args: argparse.Namespace, config: BackofficeConfig, today: date) -> AccountStore:
    """Build the account store from an input file or generated samples."""
    store = AccountStore()
    if args.input:
        with open(args.input, encoding="utf-8") as f:
            payload = json.load(f)
        if not isinstance(payload, dict):
            raise InvalidAccountError(
                f"{args.input} must hold a JSON object with 'payable' and 'receivable' lists"
            )
        for kind in AccountKind:
            rows = payload.get(kind.value, [])
            if not isinstance(rows, list):
                raise InvalidAccountError(f"{args.input}: '{kind.value}' must be a list of rows")
            store.load_rows(rows, kind)
        return store

    generator = AccountGenerator(seed=config.seed, locale=config.locale)
    for account in generator.generate_batch(args.accounts, reference_date=today):
        store.add_account(account)
    logger.info("Generated %d sample accounts", len(store))
    return store


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line options; unset options fall back to the environment."""
    parser = argparse.ArgumentParser(
        description="Project recurring accounts payable/receivable"
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="JSON file with 'payable' and 'receivable' row lists",
    )
    parser.add_argument(
        "--accounts",
        type=int,
        default=20,
        help="Number of sample accounts to generate when no input is given (default: 20)",
    )
    parser.add_argument(
        "--today",
        type=date.fromisoformat,
        default=None,
        help="Reference date in ISO format (default: current date)",
    )
    parser.add_argument(
        "--horizon-months",
        type=int,
        default=None,
        help="Projection horizon in months (default: PROJECTION_HORIZON_MONTHS or 12)",
    )
    parser.add_argument(
        "--max-occurrences",
        type=int,
        default=None,
        help="Follow-on cap per account (default: PROJECTION_MAX_OCCURRENCES or 24)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for sample generation (default: SEED)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for JSON output (default: OUTPUT_DIR or ./output)",
    )
    parser.add_argument(
        "--console",
        action="store_true",
        help="Print to stdout instead of writing files",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default: LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--log-format",
        choices=LOG_FORMATS,
        default=None,
        help="Log output format (default: LOG_FORMAT or standard)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        config = BackofficeConfig.from_env()
    except ConfigurationError as exc:
        setup_logging(args.log_level or "INFO", args.log_format or "standard")
        logger.error("Invalid configuration: %s", exc)
        return 1

    setup_logging(args.log_level or config.log_level, args.log_format or config.log_format)
    if args.seed is not None:
        config.seed = args.seed
    today = args.today or date.today()

    try:
        expander = RecurrenceExpander(
            ProjectionConfig(
                horizon_months=(
                    args.horizon_months
                    if args.horizon_months is not None
                    else config.projection.horizon_months
                ),
                max_occurrences=(
                    args.max_occurrences
                    if args.max_occurrences is not None
                    else config.projection.max_occurrences
                ),
            )
        )
        store = load_store(args, config, today)
        occurrences = store.project(today, expander)
        totals = compute_totals(occurrences)
        current_month = month_summary(occurrences, today.year, today.month)

        if args.console:
            sink = ConsoleSink(pretty=config.output.pretty_json, max_records=50)
        else:
            sink = JsonFileSink(
                args.output_dir or config.output.json_output_dir,
                pretty=config.output.pretty_json,
            )
        sink.write_batch("occurrences", occurrences)
        sink.write_batch("totals", [totals, current_month])
        sink.close()
    except (BackofficeError, OSError, json.JSONDecodeError) as exc:
        logger.error("Projection failed: %s", exc)
        return 1

    logger.info(
        "Projected %d occurrences from %d accounts "
        "(receivable=%s payable=%s overdue=%s)",
        len(occurrences),
        len(store),
        totals.total_receivable,
        totals.total_payable,
        totals.total_overdue,
        extra={"account_count": len(store), "occurrence_count": len(occurrences)},
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
