#!/usr/bin/env python3
"""
Example: Fetch and display account information.

This example demonstrates how to:
1. Create an authenticated private client using environment variables
2. Fetch available margin and asset balances
3. Retrieve open orders and open leveraged positions

Prerequisites:
- Set GMO_COIN_API_KEY and GMO_COIN_SECRET_KEY environment variables
  (or put them in a .env file)
- Install the package in development mode: pip install -e .

Usage:
    python examples/account_info.py
"""

import logging

from gmo_coin import GmoCoinError, GmoPrivateClient, Symbol

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main():
    try:
        with GmoPrivateClient.from_env() as client:
            margin = client.margin().data
            print("💰 MARGIN")
            print(f"   Available:   ¥{margin.available_amount:,}")
            print(f"   Margin:      ¥{margin.margin:,}")
            print(f"   Profit/Loss: ¥{margin.profit_loss:,}")

            print("\n🏦 ASSETS")
            for asset in client.assets().data:
                if asset.amount:
                    print(f"   {asset.symbol:<6} {asset.amount:>18} (available {asset.available})")

            orders = client.active_orders(Symbol.BTC_JPY).data.items
            print(f"\n📋 ACTIVE ORDERS ({len(orders)})")
            for order in orders:
                print(f"   #{order.order_id} {order.side} {order.size} @ {order.price} [{order.status}]")

            positions = client.open_positions(Symbol.BTC_JPY).data.items
            print(f"\n📈 OPEN POSITIONS ({len(positions)})")
            for position in positions:
                print(
                    f"   #{position.position_id} {position.side} {position.size} @ {position.price} "
                    f"P/L {position.loss_gain}"
                )
    except GmoCoinError as e:
        logger.error(f"Failed to fetch account information: {e}")


if __name__ == "__main__":
    main()
