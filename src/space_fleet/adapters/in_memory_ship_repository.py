from __future__ import annotations

from dataclasses import replace

from space_fleet.domain.errors import NotFoundError
from space_fleet.domain.predicates import Predicate, matches_all
from space_fleet.domain.ship import Paging, Ship, ShipOrder
from space_fleet.ports.ship_repository import SearchResult, ShipRepository


class InMemoryShipRepository(ShipRepository):
    """
    Canonical contract implementation for tests.

    - Stores ships keyed by id, assigning ids sequentially from 1
    - Applies AND-semantics filtering via the predicate descriptors
    - Sorts by the requested order, then by id
    - Applies paging AFTER filtering and sorting
    - Returns total_count of matching ships before paging
    """

    def __init__(self, ships: list[Ship] | None = None) -> None:
        self._ships: dict[int, Ship] = {}
        self._next_id = 1
        for ship in ships or []:
            self._insert(ship)

    def find_by_id(self, ship_id: int) -> Ship | None:
        return self._ships.get(ship_id)

    def exists_by_id(self, ship_id: int) -> bool:
        return ship_id in self._ships

    def find_all(self) -> list[Ship]:
        return [self._ships[ship_id] for ship_id in sorted(self._ships)]

    def search(
        self,
        predicates: list[Predicate],
        paging: Paging | None,
        order: ShipOrder = ShipOrder.ID,
    ) -> SearchResult:
        # Trust that UseCase has validated inputs (contract programming)
        matches = [ship for ship in self.find_all() if matches_all(ship, predicates)]
        matches.sort(key=lambda ship: (getattr(ship, order.value), ship.id))
        total_count = len(matches)  # Count BEFORE paging

        if paging is not None:
            matches = matches[paging.offset : paging.offset + paging.limit]

        return SearchResult(ships=matches, total_count=total_count)

    def count(self, predicates: list[Predicate]) -> int:
        return sum(1 for ship in self._ships.values() if matches_all(ship, predicates))

    def save(self, ship: Ship) -> Ship:
        """
        Raises:
            NotFoundError: If ship.id is set but no such ship is stored
        """
        if ship.id is not None and ship.id not in self._ships:
            raise NotFoundError(resource="Ship", identifier=str(ship.id))
        return self._insert(ship)

    def delete_by_id(self, ship_id: int) -> None:
        self._ships.pop(ship_id, None)

    def _insert(self, ship: Ship) -> Ship:
        """Store a ship, keeping a preset id and assigning the next one otherwise."""
        if ship.id is None:
            ship = replace(ship, id=self._next_id)
        self._next_id = max(self._next_id, ship.id + 1)
        self._ships[ship.id] = ship
        return ship
