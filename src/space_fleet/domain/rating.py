from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from space_fleet.domain.errors import InvalidFieldValueError
from space_fleet.domain.ship import production_year
from space_fleet.domain.validation import PROD_YEAR_MAX, is_valid_production_year


RATING_FACTOR = 80
USED_SHIP_COEFFICIENT = 0.5
CENTS = Decimal("0.01")


def calculate_rating(speed: float, is_used: bool, prod_date: datetime) -> float:
    """
    Rate a ship from its speed, usage and production year.

    rating = 80 * speed * k / (3019 - year + 1), with k = 0.5 for used ships

    Rounding policy:
    - The raw quotient is taken at its shortest decimal representation
    - It is rounded to 2 decimal places using ROUND_HALF_UP (0.125 -> 0.13)

    Raises:
        InvalidFieldValueError: If the production year is outside 2800..3019
    """
    year = production_year(prod_date)
    if not is_valid_production_year(year):
        raise InvalidFieldValueError(field="prod_date", message="Incorrect Ship.date")

    coefficient = USED_SHIP_COEFFICIENT if is_used else 1
    raw = RATING_FACTOR * speed * coefficient / (PROD_YEAR_MAX - year + 1)

    return round_half_up(raw)


def round_half_up(value: float) -> float:
    return float(Decimal(repr(value)).quantize(CENTS, rounding=ROUND_HALF_UP))
