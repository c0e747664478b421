#!/usr/bin/env python
"""
Command line demo for the GMO Coin client.

Usage:
    python -m gmo_coin status
    python -m gmo_coin ticker BTC
    python -m gmo_coin klines BTC 1min 20210417
    python -m gmo_coin --async active-orders BTC_JPY --count 10

Private commands read GMO_COIN_API_KEY and GMO_COIN_SECRET_KEY.
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, List, Optional, Tuple

from .account_client import AsyncGmoPrivateClient, GmoPrivateClient
from .errors import GmoCoinError
from .models.envelope import Response
from .public_client import AsyncGmoPublicClient, GmoPublicClient

logger = logging.getLogger(__name__)

PRIVATE_COMMANDS = {"margin", "assets", "active-orders", "latest-executions"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gmo-coin", description="GMO Coin API client")
    parser.add_argument("--async", dest="use_async", action="store_true",
                        help="run through the asyncio client")
    parser.add_argument("--log_level", default="WARNING")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("status", help="exchange status")
    ticker = commands.add_parser("ticker", help="latest rates")
    ticker.add_argument("symbol", nargs="?")
    orderbooks = commands.add_parser("orderbooks", help="order book snapshot")
    orderbooks.add_argument("symbol")
    trades = commands.add_parser("trades", help="trade history")
    trades.add_argument("symbol")
    trades.add_argument("--page", type=int)
    trades.add_argument("--count", type=int)
    klines = commands.add_parser("klines", help="candlesticks")
    klines.add_argument("symbol")
    klines.add_argument("interval")
    klines.add_argument("date", help="YYYYMMDD")
    commands.add_parser("symbols", help="trading rules")

    commands.add_parser("margin", help="available margin")
    commands.add_parser("assets", help="asset balances")
    for name in ("active-orders", "latest-executions"):
        listing = commands.add_parser(name)
        listing.add_argument("symbol")
        listing.add_argument("--page", type=int)
        listing.add_argument("--count", type=int)
    return parser


def resolve_call(args: argparse.Namespace) -> Tuple[str, List[Any]]:
    """Map parsed arguments to a client method name and its arguments."""
    command = args.command
    if command == "ticker":
        return "ticker", [args.symbol]
    if command == "orderbooks":
        return "orderbooks", [args.symbol]
    if command == "klines":
        return "klines", [args.symbol, args.interval, args.date]
    if command in ("trades", "active-orders", "latest-executions"):
        return command.replace("-", "_"), [args.symbol, args.page, args.count]
    return command, []


def run_sync(args: argparse.Namespace) -> Response:
    method, call_args = resolve_call(args)
    client_cls = GmoPrivateClient if args.command in PRIVATE_COMMANDS else GmoPublicClient
    with client_cls() as client:
        return getattr(client, method)(*call_args)


async def run_async(args: argparse.Namespace) -> Response:
    method, call_args = resolve_call(args)
    client_cls = AsyncGmoPrivateClient if args.command in PRIVATE_COMMANDS else AsyncGmoPublicClient
    async with client_cls() as client:
        return await getattr(client, method)(*call_args)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        response = asyncio.run(run_async(args)) if args.use_async else run_sync(args)
    except (GmoCoinError, ValueError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(response.to_dict(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
