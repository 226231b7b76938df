"""Get ship by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from space_fleet.domain.errors import NotFoundError
from space_fleet.domain.ship import Ship
from space_fleet.domain.validation import validate_ship_id
from space_fleet.ports.ship_repository import ShipRepository


@dataclass(frozen=True, slots=True)
class GetShipByIdRequest:
    """Request to get a ship by ID."""

    ship_id: int


@dataclass(frozen=True, slots=True)
class GetShipByIdResponse:
    """Response containing the requested ship."""

    ship: Ship


class GetShipById:
    """
    Use case for retrieving a single ship by ID.

    Responsibilities:
    - Validate ship_id (must be a positive integer)
    - Delegate to repository for data access
    - Raise NotFoundError if ship doesn't exist
    """

    def __init__(self, ship_repository: ShipRepository) -> None:
        """
        Initialize use case with dependencies.

        Args:
            ship_repository: Repository for ship data access
        """
        self._repository = ship_repository

    def execute(self, request: GetShipByIdRequest) -> GetShipByIdResponse:
        """
        Execute the get ship by ID use case.

        Args:
            request: Request containing ship_id

        Returns:
            GetShipByIdResponse with the ship

        Raises:
            InvalidIdentifierError: If ship_id is not a positive integer
            NotFoundError: If ship with given ID doesn't exist
        """
        validate_ship_id(request.ship_id)

        ship = self._repository.find_by_id(request.ship_id)

        if ship is None:
            raise NotFoundError(resource="Ship", identifier=str(request.ship_id))

        return GetShipByIdResponse(ship=ship)
