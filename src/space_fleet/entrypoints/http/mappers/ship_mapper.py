from __future__ import annotations

from space_fleet.domain.errors import InvalidIdentifierError
from space_fleet.domain.predicates import ShipFilters
from space_fleet.domain.ship import Paging, Ship, ShipDraft, from_epoch_millis, to_epoch_millis
from space_fleet.entrypoints.http.dtos.ship import (
    ShipFiltersQueryDTO,
    ShipListResponseDTO,
    ShipPayloadDTO,
    ShipResponseDTO,
    ShipsSearchQueryDTO,
)
from space_fleet.use_cases.search_ships import SearchShipsRequest, SearchShipsResponse


class ShipMapper:
    """Maps between REST DTOs and domain models for ships."""

    @staticmethod
    def to_ship_id(raw: str) -> int:
        """
        Parses a path identifier.

        Only plain ASCII digits are accepted, so signs, whitespace,
        underscores and non-ASCII digits are rejected here. The use case
        still rejects zero.

        Raises:
            InvalidIdentifierError: If raw is not a string of ASCII digits
        """
        if not (raw.isascii() and raw.isdigit()):
            raise InvalidIdentifierError(identifier=raw)
        try:
            return int(raw)
        except ValueError:
            # beyond the interpreter's integer string conversion limit
            raise InvalidIdentifierError(identifier=raw)

    @staticmethod
    def to_draft(dto: ShipPayloadDTO) -> ShipDraft:
        """
        Converts request body to a domain draft.

        Handles epoch milliseconds → datetime conversion at the boundary.
        """
        return ShipDraft(
            name=dto.name,
            planet=dto.planet,
            ship_type=dto.ship_type,
            prod_date=from_epoch_millis(dto.prod_date) if dto.prod_date is not None else None,
            is_used=dto.is_used,
            speed=dto.speed,
            crew_size=dto.crew_size,
        )

    @staticmethod
    def to_domain_filters(dto: ShipFiltersQueryDTO) -> ShipFilters:
        return ShipFilters(
            name=dto.name,
            planet=dto.planet,
            ship_type=dto.ship_type,
            after=dto.after,
            before=dto.before,
            is_used=dto.is_used,
            speed_min=dto.speed_min,
            speed_max=dto.speed_max,
            crew_size_min=dto.crew_size_min,
            crew_size_max=dto.crew_size_max,
            rating_min=dto.rating_min,
            rating_max=dto.rating_max,
        )

    @staticmethod
    def to_domain_request(dto: ShipsSearchQueryDTO) -> SearchShipsRequest:
        """
        Builds complete domain request from DTO.

        page_number/page_size are translated to offset/limit paging.
        """
        return SearchShipsRequest(
            filters=ShipMapper.to_domain_filters(dto),
            paging=Paging.from_page(dto.page_number, dto.page_size),
            order=dto.order,
        )

    @staticmethod
    def to_ship_response(ship: Ship) -> ShipResponseDTO:
        """Converts domain Ship entity to REST response DTO (datetime → epoch ms)."""
        return ShipResponseDTO(
            id=ship.id,
            name=ship.name,
            planet=ship.planet,
            ship_type=ship.ship_type,
            prod_date=to_epoch_millis(ship.prod_date),
            is_used=ship.is_used,
            speed=ship.speed,
            crew_size=ship.crew_size,
            rating=ship.rating,
        )

    @staticmethod
    def to_list_response(
        result: SearchShipsResponse,
        page_number: int,
        page_size: int,
    ) -> ShipListResponseDTO:
        """
        Converts domain search result to REST response with pagination metadata.

        Args:
            result: Domain search result containing ships and total count
            page_number: Current page (echoed from request)
            page_size: Current page size (echoed from request)
        """
        return ShipListResponseDTO(
            ships=[ShipMapper.to_ship_response(ship) for ship in result.ships],
            total=result.total_count or 0,  # Handle None from repository
            page_number=page_number,
            page_size=page_size,
        )
