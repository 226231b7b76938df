from __future__ import annotations

from dataclasses import dataclass, field

from space_fleet.domain.predicates import ShipFilters, build_predicates
from space_fleet.domain.ship import Paging, Ship, ShipOrder
from space_fleet.ports.ship_repository import ShipRepository


@dataclass(frozen=True, slots=True)
class SearchShipsRequest:
    filters: ShipFilters = field(default_factory=ShipFilters)
    paging: Paging | None = None  # None lists every match
    order: ShipOrder = ShipOrder.ID


@dataclass(frozen=True, slots=True)
class SearchShipsResponse:
    ships: list[Ship]
    total_count: int | None = None  # Total matching ships before paging (None if not calculated)


class SearchShips:
    """
    Ship listing with filters, ordering and pagination.

    This use case validates paging, turns the filters into predicate
    descriptors and delegates the query to the repository adapter.
    """

    def __init__(self, ship_repository: ShipRepository) -> None:
        self._repository = ship_repository

    def execute(self, request: SearchShipsRequest) -> SearchShipsResponse:
        """
        Execute ship search.

        Args:
            request: Search parameters (filters, optional paging and order)

        Returns:
            Response containing the page of ships and the total count

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if request.paging is not None:
            request.paging.validate()

        result = self._repository.search(
            predicates=build_predicates(request.filters),
            paging=request.paging,
            order=request.order,
        )

        return SearchShipsResponse(
            ships=result.ships,
            total_count=result.total_count,
        )
