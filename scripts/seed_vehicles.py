#!/usr/bin/env python3
"""
Seed the vehicles table from a JSON fixture.

Features:
- Cold start only: does nothing if the table already has rows
- Creates the table if it is absent
- Keeps every listing's vehicle_id exactly as given in the fixture

Usage:
    python scripts/seed_vehicles.py                 # bundled fixture
    python scripts/seed_vehicles.py path/to.json    # custom fixture
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from vehicle_listings.domain.errors import SeedError
from vehicle_listings.infra.db.models import Base
from vehicle_listings.infra.db.seed import seed_vehicles
from vehicle_listings.infra.db.session import build_engine, build_session_factory


def main(argv: list[str]) -> int:
    load_dotenv()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    fixture_path = Path(argv[0]) if argv else None

    engine = build_engine()
    try:
        Base.metadata.create_all(engine)
        inserted = seed_vehicles(build_session_factory(engine), fixture_path=fixture_path)
    except SeedError as exc:
        print(f"❌ Error seeding database: {exc}", file=sys.stderr)
        return 1
    finally:
        engine.dispose()

    if inserted:
        print(f"✅ Successfully seeded {inserted} vehicles!")
    else:
        print("Database already seeded, nothing to do.")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
