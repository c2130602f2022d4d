"""
Example 1: Login and Logout

Opens a session on the demo exchange and closes it again.

Set KALSHI_EMAIL and KALSHI_PASSWORD before running.
"""

import asyncio
import os

from kalshi import Kalshi, TradingEnvironment, KalshiError, setup_logging


async def main():
    """Login/logout example."""
    setup_logging(level="INFO")

    # 1. Create a logged-out handle
    kalshi = Kalshi.new(TradingEnvironment.DEMO)
    print(f"Client: {kalshi}")

    try:
        # 2. Log in (returns a new, logged-in handle)
        session = await kalshi.login(
            os.environ["KALSHI_EMAIL"],
            os.environ["KALSHI_PASSWORD"]
        )
        print(f"✓ Logged in as member {session.member_id}")

        # 3. Log out (returns a new, logged-out handle)
        kalshi = await session.logout()
        print("✓ Logged out")

    except KalshiError as e:
        print(f"❌ {type(e).__name__}: {e.message}")

    finally:
        kalshi.close()


if __name__ == "__main__":
    asyncio.run(main())
