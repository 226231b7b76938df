#!/usr/bin/env python3
"""
Seed the ships table with deterministic random data.

Features:
- Deterministic: fixed seed → same dataset every run
- Idempotent: safe to run multiple times (clears before seeding)
- Goes through the CreateShip use case, so every ship is validated and rated

Usage:
    python scripts/seed_ships.py
"""

from __future__ import annotations

import random
import sys
from datetime import datetime, timezone
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from space_fleet.adapters.postgres_ship_repository import PostgresShipRepository
from space_fleet.domain.ship import ShipDraft, ShipType
from space_fleet.infra.db.models.ship import ShipRow
from space_fleet.infra.db.session import get_session
from space_fleet.use_cases.create_ship import CreateShip, CreateShipRequest


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42  # Fixed seed for deterministic results
NUM_SHIPS = 40  # Number of ships to generate


# ==============================================================================
# Fleet Data
# ==============================================================================

NAME_PREFIXES = ["Orion", "Daedalus", "Eagle", "Nostromo", "Serenity", "Excelsior", "Valkyrie"]
NAME_SUFFIXES = ["I", "II", "III", "Prime", "Mk IV", "Nova", "Rex"]

PLANETS = ["Mercury", "Venus", "Earth", "Mars", "Jupiter", "Saturn", "Neptune", "Pluto"]

# Crew size bands per ship type
CREW_SIZE_BY_TYPE = {
    ShipType.TRANSPORT: (5, 400),
    ShipType.MILITARY: (100, 5000),
    ShipType.MERCHANT: (3, 150),
}


# ==============================================================================
# Seed Generation
# ==============================================================================


def generate_draft() -> ShipDraft:
    """Generate a single random ship draft within every field constraint."""
    ship_type = random.choice(list(ShipType))
    crew_min, crew_max = CREW_SIZE_BY_TYPE[ship_type]

    # Production year: 2800-3019 (weighted toward recent hulls)
    year = random.choices(
        range(2800, 3020),
        weights=[1 + (y - 2800) // 20 for y in range(2800, 3020)],
        k=1,
    )[0]
    prod_date = datetime(year, random.randint(1, 12), random.randint(1, 28), tzinfo=timezone.utc)

    return ShipDraft(
        name=f"{random.choice(NAME_PREFIXES)} {random.choice(NAME_SUFFIXES)}",
        planet=random.choice(PLANETS),
        ship_type=ship_type,
        prod_date=prod_date,
        is_used=random.random() < 0.4,
        speed=round(random.uniform(0.01, 0.99), 2),
        crew_size=random.randint(crew_min, crew_max),
    )


def seed_ships(num_ships: int = NUM_SHIPS, seed: int = RANDOM_SEED) -> None:
    """
    Seed the database with random ship data.

    Args:
        num_ships: Number of ships to generate
        seed: Random seed for deterministic results
    """
    random.seed(seed)

    print(f"🌱 Seeding database with {num_ships} ships (seed={seed})...")

    with get_session() as session:
        # Step 1: Clear existing data (idempotent)
        print("🗑️  Clearing existing ships...")
        deleted_count = session.query(ShipRow).delete()
        print(f"   Deleted {deleted_count} existing ships")

        # Step 2: Generate and insert new ships
        print(f"🚀 Generating {num_ships} ships...")
        create_ship = CreateShip(ship_repository=PostgresShipRepository(session=session))
        ships = [
            create_ship.execute(CreateShipRequest(draft=generate_draft()))
            for _ in range(num_ships)
        ]

        print(f"✅ Successfully seeded {len(ships)} ships!")

        print("\n📊 Sample ships:")
        for i, ship in enumerate(ships[:5], 1):
            print(
                f"   {i}. {ship.name} ({ship.ship_type.value}, {ship.planet}) - "
                f"speed {ship.speed}, rating {ship.rating}"
            )

        if len(ships) > 5:
            print(f"   ... and {len(ships) - 5} more")


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        seed_ships()
    except Exception as e:
        print(f"❌ Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
