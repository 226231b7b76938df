"""Delete ship use case."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from space_fleet.domain.errors import NotFoundError
from space_fleet.domain.validation import validate_ship_id
from space_fleet.ports.ship_repository import ShipRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DeleteShipRequest:
    ship_id: int


class DeleteShip:
    def __init__(self, ship_repository: ShipRepository) -> None:
        self._repository = ship_repository

    def execute(self, request: DeleteShipRequest) -> None:
        """
        Remove a ship.

        Raises:
            InvalidIdentifierError: If ship_id is not a positive integer
            NotFoundError: If no ship has the given id
        """
        validate_ship_id(request.ship_id)

        if not self._repository.exists_by_id(request.ship_id):
            raise NotFoundError(resource="Ship", identifier=str(request.ship_id))

        self._repository.delete_by_id(request.ship_id)
        logger.info("Ship deleted", extra={"ship_id": request.ship_id})
