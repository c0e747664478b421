#!/usr/bin/env python3
"""
Example: Place a BUY limit order for BTC_JPY below the market and cancel it.

This example demonstrates how to:
1. Create an authenticated asyncio client from environment variables
2. Place a LIMIT order well below the best bid
3. Look the order up and cancel it
4. Handle exchange errors

Prerequisites:
- Set GMO_COIN_API_KEY and GMO_COIN_SECRET_KEY environment variables
- Install the package in development mode: pip install -e .

Usage:
    python examples/btc_buy_limit_order.py
"""

import asyncio
import logging
from decimal import Decimal

from gmo_coin import (
    AsyncGmoPrivateClient,
    AsyncGmoPublicClient,
    ExchangeApiError,
    ExecutionType,
    GmoCoinError,
    Side,
    Symbol,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

SYMBOL = Symbol.BTC_JPY
SIZE = Decimal("0.01")
DISCOUNT = Decimal("0.8")  # 20% below the best bid

SIMULATION_MODE = True  # Set to False to send the order


async def main():
    try:
        async with AsyncGmoPublicClient() as public:
            book = (await public.orderbooks(SYMBOL)).data
        price = (book.best_bid.price * DISCOUNT).quantize(Decimal("1"))
        logger.info(f"Best bid {book.best_bid.price}, limit price {price}")

        if SIMULATION_MODE:
            logger.info(f"Simulation: would BUY {SIZE} {SYMBOL} @ {price}")
            return

        async with AsyncGmoPrivateClient() as client:
            order_id = (await client.order(SYMBOL, Side.BUY, ExecutionType.LIMIT, SIZE, price=price)).data
            logger.info(f"Order placed: {order_id}")

            for order in (await client.orders(int(order_id))).data.items:
                logger.info(f"Order {order.order_id}: {order.status}")

            await client.cancel_order(int(order_id))
            logger.info(f"Order {order_id} cancelled")
    except ExchangeApiError as e:
        logger.error(f"Exchange rejected the request: {e.message_codes}")
    except GmoCoinError as e:
        logger.error(f"Request failed: {e}")


if __name__ == "__main__":
    asyncio.run(main())
