"""Create ship use case."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from space_fleet.domain.rating import calculate_rating
from space_fleet.domain.ship import Ship, ShipDraft, as_utc
from space_fleet.domain.validation import validate_new_ship
from space_fleet.ports.ship_repository import ShipRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CreateShipRequest:
    """Request to register a new ship."""

    draft: ShipDraft


class CreateShip:
    """
    Use case for registering a new ship.

    Responsibilities:
    - Reject drafts missing a required field
    - Validate field constraints
    - Default is_used to False and compute the rating
    - Persist via the repository, which assigns the id
    """

    def __init__(self, ship_repository: ShipRepository) -> None:
        self._repository = ship_repository

    def execute(self, request: CreateShipRequest) -> Ship:
        """
        Execute the create ship use case.

        Args:
            request: Request containing the candidate ship values

        Returns:
            The stored ship, with its id and rating

        Raises:
            MissingRequiredFieldError: If name, planet, ship_type, prod_date,
                speed or crew_size is absent
            InvalidFieldValueError: If a field breaks its constraint
        """
        draft = request.draft
        validate_new_ship(draft)

        is_used = bool(draft.is_used)
        prod_date = as_utc(draft.prod_date)

        ship = Ship(
            id=None,
            name=draft.name,
            planet=draft.planet,
            ship_type=draft.ship_type,
            prod_date=prod_date,
            is_used=is_used,
            speed=draft.speed,
            crew_size=draft.crew_size,
            rating=calculate_rating(draft.speed, is_used, prod_date),
        )

        saved = self._repository.save(ship)
        logger.info("Ship created", extra={"ship_id": saved.id, "rating": saved.rating})

        return saved
