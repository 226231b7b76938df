"""Field-level rules for ship values.

Rules run in a fixed order and the first violation wins, so callers always
see the same error for the same input.
"""

from __future__ import annotations

from dataclasses import dataclass

from space_fleet.domain.errors import (
    InvalidFieldValueError,
    InvalidIdentifierError,
    MissingRequiredFieldError,
)
from space_fleet.domain.ship import ShipDraft, production_year


NAME_MAX_LENGTH = 50
PLANET_MAX_LENGTH = 50
CREW_SIZE_MIN = 1
CREW_SIZE_MAX = 9999
SPEED_MIN = 0.01
SPEED_MAX = 0.99
PROD_YEAR_MIN = 2800
PROD_YEAR_MAX = 3019

REQUIRED_ON_CREATE = ("name", "planet", "ship_type", "prod_date", "speed", "crew_size")


@dataclass(frozen=True, slots=True)
class FieldViolation:
    field: str
    message: str

    def to_error(self) -> InvalidFieldValueError:
        return InvalidFieldValueError(field=self.field, message=self.message)


def find_violation(draft: ShipDraft) -> FieldViolation | None:
    """
    Check the supplied fields of a draft against the ship constraints.

    Absent fields are not checked, which lets the same rules serve partial
    updates.

    Args:
        draft: Candidate ship values

    Returns:
        The first violated rule, or None when every supplied field is valid
    """
    if draft.name is not None and not 1 <= len(draft.name) <= NAME_MAX_LENGTH:
        return FieldViolation("name", "Incorrect Ship.name")
    if draft.planet is not None and not 1 <= len(draft.planet) <= PLANET_MAX_LENGTH:
        return FieldViolation("planet", "Incorrect Ship.planet")
    if draft.crew_size is not None and not CREW_SIZE_MIN <= draft.crew_size <= CREW_SIZE_MAX:
        return FieldViolation("crew_size", "Incorrect Ship.crewSize")
    if draft.speed is not None and not SPEED_MIN <= draft.speed <= SPEED_MAX:
        return FieldViolation("speed", "Incorrect Ship.speed")
    if draft.prod_date is not None and not is_valid_production_year(
        production_year(draft.prod_date)
    ):
        return FieldViolation("prod_date", "Incorrect Ship.date")
    return None


def is_valid_production_year(year: int) -> bool:
    return PROD_YEAR_MIN <= year <= PROD_YEAR_MAX


def validate_draft(draft: ShipDraft) -> None:
    """
    Raises:
        InvalidFieldValueError: If a supplied field breaks its constraint
    """
    violation = find_violation(draft)
    if violation is not None:
        raise violation.to_error()


def validate_new_ship(draft: ShipDraft) -> None:
    """
    Validate a draft that is about to become a new ship.

    Presence is checked before any field rule runs.

    Raises:
        MissingRequiredFieldError: If a required field is None
        InvalidFieldValueError: If a supplied field breaks its constraint
    """
    missing = draft.missing_fields(REQUIRED_ON_CREATE)
    if missing:
        raise MissingRequiredFieldError(fields=missing)

    validate_draft(draft)


def validate_ship_id(ship_id: int) -> None:
    """
    Raises:
        InvalidIdentifierError: If ship_id is not a positive integer
    """
    if isinstance(ship_id, bool) or not isinstance(ship_id, int) or ship_id <= 0:
        raise InvalidIdentifierError(identifier=ship_id)
