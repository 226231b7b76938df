"""
Tests for ShipMapper.

Verifies conversion between REST DTOs and domain models:
- Path ids parsed from plain ASCII digits, anything else rejected
- Epoch milliseconds <-> aware UTC datetimes
- page_number/page_size translated to offset/limit
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from space_fleet.domain.errors import InvalidIdentifierError
from space_fleet.domain.predicates import ShipFilters
from space_fleet.domain.ship import Paging, Ship, ShipDraft, ShipOrder, ShipType
from space_fleet.entrypoints.http.dtos.ship import ShipPayloadDTO, ShipsSearchQueryDTO
from space_fleet.entrypoints.http.mappers.ship_mapper import ShipMapper
from space_fleet.use_cases.search_ships import SearchShipsResponse


PROD_MILLIS = 29_000_000_000_000
PROD_DATE = datetime.fromtimestamp(PROD_MILLIS / 1000, tz=timezone.utc)


@pytest.fixture()
def ship() -> Ship:
    return Ship(
        id=3,
        name="Orion",
        planet="Mars",
        ship_type=ShipType.MILITARY,
        prod_date=PROD_DATE,
        is_used=True,
        speed=0.5,
        crew_size=100,
        rating=0.17,
    )


# ==============================================================================
# to_ship_id
# ==============================================================================


@pytest.mark.parametrize("raw, expected", [("1", 1), ("42", 42), ("007", 7), ("0", 0)])
def test_to_ship_id_parses_digits(raw: str, expected: int) -> None:
    """Zero is left to the use case."""
    assert ShipMapper.to_ship_id(raw) == expected


@pytest.mark.parametrize(
    "raw", ["abc", "1.5", "", "1e3", "-5", "+7", " 7", "7 ", "1_0", "\u0667", "\uff17", "9" * 5000]
)
def test_to_ship_id_rejects_anything_but_ascii_digits(raw: str) -> None:
    with pytest.raises(InvalidIdentifierError) as exc_info:
        ShipMapper.to_ship_id(raw)

    assert exc_info.value.identifier == raw


# ==============================================================================
# to_draft
# ==============================================================================


def test_to_draft_converts_epoch_millis() -> None:
    dto = ShipPayloadDTO(
        name="Orion",
        planet="Mars",
        ship_type=ShipType.MILITARY,
        prod_date=PROD_MILLIS,
        is_used=False,
        speed=0.5,
        crew_size=100,
    )

    draft = ShipMapper.to_draft(dto)

    assert draft == ShipDraft(
        name="Orion",
        planet="Mars",
        ship_type=ShipType.MILITARY,
        prod_date=PROD_DATE,
        is_used=False,
        speed=0.5,
        crew_size=100,
    )
    assert draft.prod_date.tzinfo == timezone.utc


def test_to_draft_keeps_absent_fields_absent() -> None:
    draft = ShipMapper.to_draft(ShipPayloadDTO(speed=0.3))

    assert draft == ShipDraft(speed=0.3)


# ==============================================================================
# to_domain_request
# ==============================================================================


def test_to_domain_request_defaults() -> None:
    request = ShipMapper.to_domain_request(ShipsSearchQueryDTO())

    assert request.filters == ShipFilters()
    assert request.paging == Paging(offset=0, limit=3)
    assert request.order is ShipOrder.ID


def test_to_domain_request_maps_every_filter() -> None:
    dto = ShipsSearchQueryDTO(
        name="Or",
        planet="Ma",
        ship_type=ShipType.TRANSPORT,
        after=1,
        before=2,
        is_used=False,
        speed_min=0.1,
        speed_max=0.2,
        crew_size_min=3,
        crew_size_max=4,
        rating_min=0.5,
        rating_max=0.6,
        order=ShipOrder.RATING,
        page_number=4,
        page_size=25,
    )

    request = ShipMapper.to_domain_request(dto)

    assert request.filters == ShipFilters(
        name="Or",
        planet="Ma",
        ship_type=ShipType.TRANSPORT,
        after=1,
        before=2,
        is_used=False,
        speed_min=0.1,
        speed_max=0.2,
        crew_size_min=3,
        crew_size_max=4,
        rating_min=0.5,
        rating_max=0.6,
    )
    assert request.paging == Paging(offset=100, limit=25)
    assert request.order is ShipOrder.RATING


# ==============================================================================
# Responses
# ==============================================================================


def test_to_ship_response_converts_date_to_millis(ship: Ship) -> None:
    dto = ShipMapper.to_ship_response(ship)

    assert dto.prod_date == PROD_MILLIS
    assert dto.id == 3
    assert dto.ship_type is ShipType.MILITARY
    assert dto.rating == 0.17


def test_to_list_response_echoes_paging(ship: Ship) -> None:
    result = SearchShipsResponse(ships=[ship], total_count=7)

    dto = ShipMapper.to_list_response(result, page_number=2, page_size=3)

    assert [item.id for item in dto.ships] == [3]
    assert dto.total == 7
    assert (dto.page_number, dto.page_size) == (2, 3)


def test_to_list_response_treats_missing_total_as_zero() -> None:
    dto = ShipMapper.to_list_response(SearchShipsResponse(ships=[]), page_number=0, page_size=3)

    assert dto.total == 0
