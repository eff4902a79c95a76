"""Entry point for the online store Textual app."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from storefront.config import DEBUG_LOG_PATH, LOG_LEVEL, ORDER_LOG_PATH
from storefront.persistence import MemoryOrderLog, OrderLog, OrderStore
from storefront.store_app import StorefrontApp

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = LOG_LEVEL, log_path: str = DEBUG_LOG_PATH) -> None:
    """Send log records to the debug log file; the terminal belongs to the UI."""
    path = Path(log_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=str(path),
        level=level.upper(),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="storefront", description="Interactive online store simulator")
    parser.add_argument("--order-log", default=ORDER_LOG_PATH, help="Path of the order log file")
    parser.add_argument(
        "--in-memory",
        action="store_true",
        help="Keep order history in memory instead of the order log",
    )
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Debug log level (default: %(default)s)")
    return parser


def build_order_store(args: argparse.Namespace) -> OrderStore:
    if args.in_memory:
        return MemoryOrderLog()
    return OrderLog(args.order_log)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    logging.getLogger(__name__).info("store_start order_log=%s in_memory=%s", args.order_log, args.in_memory)

    StorefrontApp(order_store=build_order_store(args)).run()
    print("Thank you for shopping with us!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
