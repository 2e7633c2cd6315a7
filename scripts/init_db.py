#!/usr/bin/env python3
"""
Create the car market tables and seed demo sellers.

Features:
- Creates missing tables (sellers, car_listings, counters); existing ones are left alone
- Deterministic: fixed seed → same sellers (and ids) every run
- Idempotent: sellers that already exist are skipped
- Prints an ACCESS_TOKENS value wiring one demo token per seller

Usage:
    python scripts/init_db.py
"""

from __future__ import annotations

import random
import sys
import uuid

from car_market.infra.db.models import Base, SellerRow
from car_market.infra.db.session import get_engine, get_session


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42  # Fixed seed for deterministic ids
SELLER_NAMES = ["Kim Minjun", "Lee Seoyeon", "Park Jiho", "Choi Yuna", "Jung Hyunwoo"]


def seller_id(rng: random.Random) -> uuid.UUID:
    return uuid.UUID(int=rng.getrandbits(128), version=4)


def init_db(seed: int = RANDOM_SEED) -> None:
    """
    Create tables and insert the demo sellers.

    Args:
        seed: Random seed for deterministic seller ids
    """
    rng = random.Random(seed)

    print("🛠️  Creating tables...")
    Base.metadata.create_all(get_engine())

    tokens = []
    with get_session() as session:
        for index, name in enumerate(SELLER_NAMES, 1):
            sid = seller_id(rng)
            tokens.append(f"demo-token-{index}:{sid}")

            if session.get(SellerRow, sid) is not None:
                print(f"   = {name} ({sid}) already exists")
                continue

            session.add(SellerRow(id=sid, name=name))
            print(f"   + {name} ({sid})")

    print("\n✅ Database ready. Demo access tokens:")
    print(f"   ACCESS_TOKENS={','.join(tokens)}")


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        init_db()
    except Exception as e:
        print(f"❌ Error initializing database: {e}", file=sys.stderr)
        sys.exit(1)
