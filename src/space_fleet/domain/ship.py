from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime, timedelta, timezone
from enum import Enum

from space_fleet.domain.errors import PagingValidationError


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

MAX_PAGE_SIZE = 200

# Largest offset a signed 64-bit OFFSET clause accepts
MAX_OFFSET = 2**63 - 1


class ShipType(str, Enum):
    TRANSPORT = "TRANSPORT"
    MILITARY = "MILITARY"
    MERCHANT = "MERCHANT"


class ShipOrder(str, Enum):
    """Sort key for ship listings; the value is the ship attribute sorted on."""

    ID = "id"
    SPEED = "speed"
    DATE = "prod_date"
    RATING = "rating"


def as_utc(moment: datetime) -> datetime:
    """Normalize to an aware UTC datetime. Naive datetimes are read as UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def production_year(prod_date: datetime) -> int:
    return as_utc(prod_date).year


def from_epoch_millis(millis: int) -> datetime:
    return EPOCH + timedelta(milliseconds=millis)


def to_epoch_millis(moment: datetime) -> int:
    return (as_utc(moment) - EPOCH) // timedelta(milliseconds=1)


@dataclass(frozen=True)
class Ship:
    id: int | None
    name: str
    planet: str
    ship_type: ShipType
    prod_date: datetime
    is_used: bool
    speed: float
    crew_size: int
    rating: float


@dataclass(frozen=True, slots=True)
class ShipDraft:
    """
    Candidate ship values as supplied by a caller.

    Every field is optional: ``None`` means "not supplied". Creation requires
    all fields except ``is_used``; updates keep the stored value for every
    ``None`` field.
    """

    name: str | None = None
    planet: str | None = None
    ship_type: ShipType | None = None
    prod_date: datetime | None = None
    is_used: bool | None = None
    speed: float | None = None
    crew_size: int | None = None

    def missing_fields(self, required: tuple[str, ...]) -> list[str]:
        return [name for name in required if getattr(self, name) is None]

    def supplied(self) -> dict[str, object]:
        """Fields that carry a value, keyed by attribute name."""
        return {
            field.name: getattr(self, field.name)
            for field in fields(self)
            if getattr(self, field.name) is not None
        }


@dataclass(frozen=True, slots=True)
class Paging:
    offset: int = 0
    limit: int = 20

    @classmethod
    def from_page(cls, page_number: int, page_size: int) -> Paging:
        return cls(offset=page_number * page_size, limit=page_size)

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if self.offset < 0:
            raise PagingValidationError("offset must be >= 0")
        if self.offset > MAX_OFFSET:
            raise PagingValidationError(f"offset must be <= {MAX_OFFSET}")
        if self.limit <= 0:
            raise PagingValidationError("limit must be > 0")
        if self.limit > MAX_PAGE_SIZE:
            raise PagingValidationError(f"limit must be <= {MAX_PAGE_SIZE}")
