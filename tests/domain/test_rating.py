"""
Tests for the ship rating formula.

rating = round_half_up(80 * speed * (0.5 if used else 1) / (3019 - year + 1), 2)
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from space_fleet.domain.errors import InvalidFieldValueError
from space_fleet.domain.rating import calculate_rating, round_half_up


def produced_in(year: int) -> datetime:
    return datetime(year, 3, 1, tzinfo=timezone.utc)


# ==============================================================================
# Formula
# ==============================================================================


def test_new_ship_of_current_year() -> None:
    """Year 3019 gives a denominator of 1."""
    assert calculate_rating(0.5, False, produced_in(3019)) == 40.0


def test_used_ship_is_rated_at_half() -> None:
    assert calculate_rating(0.5, True, produced_in(3019)) == 20.0


def test_older_ships_rate_lower() -> None:
    # 80 * 0.5 / 120 = 0.3333...
    assert calculate_rating(0.5, False, produced_in(2900)) == 0.33
    # 80 * 0.5 * 0.5 / 120 = 0.1666...
    assert calculate_rating(0.5, True, produced_in(2900)) == 0.17


def test_oldest_allowed_year() -> None:
    # 80 * 0.99 / 220 = 0.36
    assert calculate_rating(0.99, False, produced_in(2800)) == 0.36


@pytest.mark.parametrize(
    "speed, is_used, year",
    [
        (0.01, False, 2800),
        (0.37, True, 2950),
        (0.64, False, 3001),
        (0.99, True, 3019),
    ],
)
def test_matches_reference_formula(speed: float, is_used: bool, year: int) -> None:
    raw = 80 * speed * (0.5 if is_used else 1) / (3019 - year + 1)

    assert calculate_rating(speed, is_used, produced_in(year)) == round_half_up(raw)


# ==============================================================================
# Rounding
# ==============================================================================


def test_round_half_up_rounds_ties_away_from_zero() -> None:
    assert round_half_up(0.125) == 0.13


def test_round_half_up_below_tie() -> None:
    assert round_half_up(0.124999) == 0.12


def test_round_half_up_is_not_bankers_rounding() -> None:
    """Python's round() gives 2.67 for 2.675 due to binary representation."""
    assert round_half_up(2.675) == 2.68
    assert round_half_up(0.345) == 0.35


def test_rating_tie_rounds_up() -> None:
    # 80 * 0.25 / 160 = 0.125 exactly
    assert calculate_rating(0.25, False, produced_in(2860)) == 0.13


# ==============================================================================
# Out of range years
# ==============================================================================


@pytest.mark.parametrize("year", [2799, 3020, 3100])
def test_unvalidated_year_fails_fast(year: int) -> None:
    with pytest.raises(InvalidFieldValueError) as exc_info:
        calculate_rating(0.5, False, produced_in(year))

    assert exc_info.value.field == "prod_date"
