"""Filter predicates for ship listings.

Each ``by_*`` builder turns optional query parameters into a predicate
descriptor, or None when the parameters put no constraint on the result.
Storage adapters combine the descriptors with AND: the in-memory adapter calls
``matches`` and the SQL adapter translates them to WHERE clauses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from space_fleet.domain.ship import Ship, ShipType, from_epoch_millis


@dataclass(frozen=True, slots=True)
class Contains:
    """Case-sensitive substring match anywhere in a text attribute."""

    field: str
    value: str

    def matches(self, ship: Ship) -> bool:
        return self.value in getattr(ship, self.field)


@dataclass(frozen=True, slots=True)
class Equals:
    field: str
    value: Any

    def matches(self, ship: Ship) -> bool:
        return getattr(ship, self.field) == self.value


@dataclass(frozen=True, slots=True)
class Between:
    """
    Inclusive range on an ordered attribute.

    A missing bound leaves that side open; builders never produce a Between
    with both bounds missing.
    """

    field: str
    lower: Any = None
    upper: Any = None

    def matches(self, ship: Ship) -> bool:
        value = getattr(ship, self.field)
        if self.lower is not None and value < self.lower:
            return False
        if self.upper is not None and value > self.upper:
            return False
        return True


Predicate = Union[Contains, Equals, Between]


def _range(field: str, lower: Any, upper: Any) -> Between | None:
    if lower is None and upper is None:
        return None
    return Between(field=field, lower=lower, upper=upper)


def by_name(name: str | None) -> Contains | None:
    return None if name is None else Contains("name", name)


def by_planet(planet: str | None) -> Contains | None:
    return None if planet is None else Contains("planet", planet)


def by_ship_type(ship_type: ShipType | None) -> Equals | None:
    return None if ship_type is None else Equals("ship_type", ship_type)


def by_prod_date(after: int | None, before: int | None) -> Between | None:
    """
    Production date range.

    Args:
        after: Lower bound as epoch milliseconds (inclusive), or None
        before: Upper bound as epoch milliseconds (inclusive), or None
    """
    lower = from_epoch_millis(after) if after is not None else None
    upper = from_epoch_millis(before) if before is not None else None
    return _range("prod_date", lower, upper)


def by_usage(is_used: bool | None) -> Equals | None:
    return None if is_used is None else Equals("is_used", is_used)


def by_speed(speed_min: float | None, speed_max: float | None) -> Between | None:
    return _range("speed", speed_min, speed_max)


def by_crew_size(crew_size_min: int | None, crew_size_max: int | None) -> Between | None:
    return _range("crew_size", crew_size_min, crew_size_max)


def by_rating(rating_min: float | None, rating_max: float | None) -> Between | None:
    return _range("rating", rating_min, rating_max)


@dataclass(frozen=True, slots=True)
class ShipFilters:
    name: str | None = None
    planet: str | None = None
    ship_type: ShipType | None = None
    after: int | None = None
    before: int | None = None
    is_used: bool | None = None
    speed_min: float | None = None
    speed_max: float | None = None
    crew_size_min: int | None = None
    crew_size_max: int | None = None
    rating_min: float | None = None
    rating_max: float | None = None


def build_predicates(filters: ShipFilters) -> list[Predicate]:
    """
    Build one predicate per constrained attribute.

    Returns:
        Predicates to be combined with AND; empty when nothing is constrained
    """
    candidates: list[Predicate | None] = [
        by_name(filters.name),
        by_planet(filters.planet),
        by_ship_type(filters.ship_type),
        by_prod_date(filters.after, filters.before),
        by_usage(filters.is_used),
        by_speed(filters.speed_min, filters.speed_max),
        by_crew_size(filters.crew_size_min, filters.crew_size_max),
        by_rating(filters.rating_min, filters.rating_max),
    ]
    return [predicate for predicate in candidates if predicate is not None]


def matches_all(ship: Ship, predicates: list[Predicate]) -> bool:
    return all(predicate.matches(ship) for predicate in predicates)
