"""
Order Book Example

This example demonstrates:
- Checking the exchange status before querying market data
- Fetching the latest rate and the order book for a symbol
- Displaying best bid/ask prices and the spread

No API keys required.
"""

import asyncio
import sys
from decimal import Decimal
from pathlib import Path

# Add parent directory to path to import gmo_coin
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from gmo_coin import AsyncGmoPublicClient, GmoCoinError, Symbol


def format_level(price: Decimal, size: Decimal) -> str:
    """Format a single order book level for display."""
    return f"   Price: ¥{price:>14,.0f}  |  Size: {size:>10,.4f}"


async def display_order_book(symbol: Symbol, depth: int = 5):
    """Fetch and display the order book for a symbol."""
    print(f"\n📊 Fetching order book for {symbol}...\n")

    async with AsyncGmoPublicClient() as client:
        status = (await client.status()).data.status
        if status != "OPEN":
            print(f"⚠️  Exchange is {status}")
            return

        rate = (await client.ticker(symbol)).data[0]
        book = (await client.orderbooks(symbol)).data

    if book.best_ask is None or book.best_bid is None:
        print("⚠️  Order book is empty")
        return

    spread = book.best_ask.price - book.best_bid.price

    print("=" * 60)
    print(f"📈 {symbol} Order Book")
    print("=" * 60)
    print(f"   Last:    ¥{rate.last:,.0f}   (24h high ¥{rate.high:,.0f} / low ¥{rate.low:,.0f})")
    print(f"   Spread:  ¥{spread:,.0f}")

    print(f"\n🔴 TOP {min(depth, len(book.asks))} ASKS:")
    for ask in reversed(book.asks[:depth]):
        print(format_level(ask.price, ask.size))

    print(f"\n🟢 TOP {min(depth, len(book.bids))} BIDS:")
    for bid in book.bids[:depth]:
        print(format_level(bid.price, bid.size))


async def main():
    try:
        await display_order_book(Symbol.BTC)
        await display_order_book(Symbol.ETH_JPY, depth=3)
    except GmoCoinError as e:
        print(f"❌ {e}")


if __name__ == "__main__":
    asyncio.run(main())
