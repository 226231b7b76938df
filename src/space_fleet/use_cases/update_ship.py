"""Update ship use case."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from space_fleet.domain.errors import NotFoundError
from space_fleet.domain.rating import calculate_rating
from space_fleet.domain.ship import Ship, ShipDraft, as_utc
from space_fleet.domain.validation import validate_draft, validate_ship_id
from space_fleet.ports.ship_repository import ShipRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UpdateShipRequest:
    """Partial update: None fields in the draft keep their stored value."""

    ship_id: int
    draft: ShipDraft


class UpdateShip:
    """
    Use case for editing an existing ship.

    Checks run in this order: supplied field values, id format, existence.
    The rating is recomputed from the merged ship even when none of its
    inputs changed.
    """

    def __init__(self, ship_repository: ShipRepository) -> None:
        self._repository = ship_repository

    def execute(self, request: UpdateShipRequest) -> Ship:
        """
        Execute the update ship use case.

        Raises:
            InvalidFieldValueError: If a supplied field breaks its constraint
            InvalidIdentifierError: If ship_id is not a positive integer
            NotFoundError: If no ship has the given id
        """
        validate_draft(request.draft)
        validate_ship_id(request.ship_id)

        current = self._repository.find_by_id(request.ship_id)
        if current is None:
            raise NotFoundError(resource="Ship", identifier=str(request.ship_id))

        changes = request.draft.supplied()
        if "prod_date" in changes:
            changes["prod_date"] = as_utc(changes["prod_date"])

        merged = replace(current, **changes)
        merged = replace(
            merged,
            rating=calculate_rating(merged.speed, merged.is_used, merged.prod_date),
        )

        saved = self._repository.save(merged)
        logger.info(
            "Ship updated",
            extra={"ship_id": saved.id, "fields": sorted(changes), "rating": saved.rating},
        )

        return saved
