"""
Order export command line tool.

Filters and sorts the configured order set (or the demo set) and writes
the result to the export directory.

Usage:
    orderbrowser-export [options]

Options:
    --format FMT        csv, tsv, json or xlsx (default: csv)
    --search TEXT       Free-text search
    --status NAME       Order status; repeat for several
    --delivery NAME     Delivery status; repeat for several
    --department NAME   Department; repeat for several
    --min-price N       Minimum price, inclusive
    --max-price N       Maximum price, inclusive
    --sort SPEC         Sort keys, e.g. "status,price:desc"
    --output PATH       Output file name inside the export directory
    --orders PATH       JSON orders file to read instead of the configured one
    --log-file          Also write logs to logs/orders_<date>.log
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from orderbrowser.analysis import EXPORT_FORMATS, OrderExporter
from orderbrowser.config import config, get_logger, setup_logging
from orderbrowser.config.logging_config import DEFAULT_LOG_FILE
from orderbrowser.data import OrderStore, OrderStoreError, load_sample_store
from orderbrowser.listview import FilterState, build_view_state, parse_sort_spec

logger = get_logger("cli")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Export filtered order records")
    parser.add_argument("--format", choices=sorted(EXPORT_FORMATS), default="csv")
    parser.add_argument("--orders", type=Path, help="JSON orders file (default: configured or demo set)")
    parser.add_argument("--search", default="")
    parser.add_argument("--status", action="append", default=[])
    parser.add_argument("--delivery", action="append", default=[])
    parser.add_argument("--department", action="append", default=[])
    parser.add_argument("--min-price", type=float)
    parser.add_argument("--max-price", type=float)
    parser.add_argument("--sort", default="")
    parser.add_argument("--output", help="Output file name")
    parser.add_argument("--verbose", "-v", action="store_true")
    parser.add_argument("--log-file", action="store_true", help="Also log to logs/orders_<date>.log")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(
        log_level="DEBUG" if args.verbose else config.app.log_level,
        log_file=DEFAULT_LOG_FILE if args.log_file else None,
    )

    try:
        sort_spec = parse_sort_spec(args.sort)
    except ValueError as e:
        logger.error(f"Invalid sort: {e}")
        return 2

    orders_path = args.orders or config.data.orders_path
    try:
        store = OrderStore.load_json(orders_path) if orders_path else load_sample_store()
    except OrderStoreError as e:
        logger.error(str(e))
        return 1

    filters = FilterState(
        search=args.search,
        statuses=args.status,
        delivery_statuses=args.delivery,
        departments=args.department,
        price_range=(args.min_price, args.max_price),
    )
    view = build_view_state(store, filters, sort_spec, 0, config.app.default_page_size)

    path = OrderExporter().export_to_file(view.sorted, args.format, filename=args.output)
    print(f"{view.total} of {len(store)} orders written to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
