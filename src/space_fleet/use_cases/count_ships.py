from __future__ import annotations

from dataclasses import dataclass, field

from space_fleet.domain.predicates import ShipFilters, build_predicates
from space_fleet.ports.ship_repository import ShipRepository


@dataclass(frozen=True, slots=True)
class CountShipsRequest:
    filters: ShipFilters = field(default_factory=ShipFilters)


class CountShips:
    """Count the ships matching a set of filters, ignoring paging."""

    def __init__(self, ship_repository: ShipRepository) -> None:
        self._repository = ship_repository

    def execute(self, request: CountShipsRequest) -> int:
        return self._repository.count(build_predicates(request.filters))
