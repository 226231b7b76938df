from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from space_fleet.domain.predicates import Predicate
from space_fleet.domain.ship import Paging, Ship, ShipOrder


@dataclass(frozen=True)
class SearchResult:
    """Result from ship search including pagination metadata."""

    ships: list[Ship]
    total_count: int | None = None  # Total matching ships before paging (None if not calculated)


class ShipRepository(ABC):
    """
    Port for ship data access.

    Implementations store ships, assign identifiers on first save and run
    filtered, ordered and paged searches.

    Contract (Preconditions):
        - ships passed to save() have been validated and rated by the caller (UseCase)
        - search() predicates are combined with AND; an empty list matches every ship
        - paging parameters must be pre-validated by caller
    """

    @abstractmethod
    def find_by_id(self, ship_id: int) -> Ship | None:
        """Return the ship with the given id, or None if it does not exist."""
        ...

    @abstractmethod
    def exists_by_id(self, ship_id: int) -> bool: ...

    @abstractmethod
    def find_all(self) -> list[Ship]: ...

    @abstractmethod
    def search(
        self,
        predicates: list[Predicate],
        paging: Paging | None,
        order: ShipOrder = ShipOrder.ID,
    ) -> SearchResult:
        """
        Search ships matching every predicate, sorted and optionally paged.

        Args:
            predicates: Filter descriptors (AND semantics)
            paging: Pagination parameters - pre-validated; None returns every match
            order: Attribute to sort ascending on; ties broken by id

        Returns:
            SearchResult containing the page of ships and the total count
        """
        ...

    @abstractmethod
    def count(self, predicates: list[Predicate]) -> int:
        """Number of ships matching every predicate."""
        ...

    @abstractmethod
    def save(self, ship: Ship) -> Ship:
        """
        Insert or update a ship.

        A ship with ``id=None`` is inserted and returned with its new id;
        otherwise the stored ship with the same id is replaced.
        """
        ...

    @abstractmethod
    def delete_by_id(self, ship_id: int) -> None: ...
