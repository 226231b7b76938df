from fastapi import APIRouter, Depends, Response

from space_fleet.entrypoints.http.dependencies import (
    get_count_ships_use_case,
    get_create_ship_use_case,
    get_delete_ship_use_case,
    get_get_ship_by_id_use_case,
    get_search_ships_use_case,
    get_update_ship_use_case,
)
from space_fleet.entrypoints.http.dtos.ship import (
    ShipFiltersQueryDTO,
    ShipListResponseDTO,
    ShipPayloadDTO,
    ShipResponseDTO,
    ShipsSearchQueryDTO,
)
from space_fleet.entrypoints.http.error_responses import ErrorResponse
from space_fleet.entrypoints.http.mappers.ship_mapper import ShipMapper
from space_fleet.use_cases.count_ships import CountShips, CountShipsRequest
from space_fleet.use_cases.create_ship import CreateShip, CreateShipRequest
from space_fleet.use_cases.delete_ship import DeleteShip, DeleteShipRequest
from space_fleet.use_cases.get_ship_by_id import GetShipById, GetShipByIdRequest
from space_fleet.use_cases.search_ships import SearchShips
from space_fleet.use_cases.update_ship import UpdateShip, UpdateShipRequest


router = APIRouter(tags=["Ships"])

BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Invalid ship values or id"}}
NOT_FOUND = {404: {"model": ErrorResponse, "description": "Ship not found"}}


@router.get(
    "/ships",
    response_model=ShipListResponseDTO,
    summary="List ships",
    description="""
    List ships with optional filters, ordering and pagination.

    ## Filters
    - All filters use AND semantics
    - name/planet: case-sensitive substring match
    - after/before: production date bounds in epoch milliseconds
    - speed/crew_size/rating: inclusive ranges, either side optional

    ## Ordering and pagination
    - order: id (default), speed, prod_date or rating, ascending
    - page_number starts at 0, page_size defaults to 3

    ## Example
    ```
    GET /v1/ships?planet=Mars&speed_min=0.3&speed_max=0.7&order=rating
    ```
    """,
)
def list_ships(
    query: ShipsSearchQueryDTO = Depends(),
    use_case: SearchShips = Depends(get_search_ships_use_case),
) -> ShipListResponseDTO:
    """List ships endpoint following parse → execute → map → return pattern."""
    request = ShipMapper.to_domain_request(query)

    result = use_case.execute(request)

    return ShipMapper.to_list_response(
        result=result,
        page_number=query.page_number,
        page_size=query.page_size,
    )


@router.get(
    "/ships/count",
    response_model=int,
    summary="Count ships",
    description="Number of ships matching the same filters as `GET /ships`, ignoring paging.",
)
def count_ships(
    query: ShipFiltersQueryDTO = Depends(),
    use_case: CountShips = Depends(get_count_ships_use_case),
) -> int:
    return use_case.execute(CountShipsRequest(filters=ShipMapper.to_domain_filters(query)))


@router.post(
    "/ships",
    response_model=ShipResponseDTO,
    summary="Create ship",
    description="""
    Register a new ship.

    name, planet, ship_type, prod_date, speed and crew_size are required;
    is_used defaults to false. The rating is computed by the server.
    """,
    responses=BAD_REQUEST,
)
def create_ship(
    payload: ShipPayloadDTO,
    use_case: CreateShip = Depends(get_create_ship_use_case),
) -> ShipResponseDTO:
    ship = use_case.execute(CreateShipRequest(draft=ShipMapper.to_draft(payload)))
    return ShipMapper.to_ship_response(ship)


@router.get(
    "/ships/{ship_id}",
    response_model=ShipResponseDTO,
    summary="Get ship",
    responses={**BAD_REQUEST, **NOT_FOUND},
)
def get_ship(
    ship_id: str,
    use_case: GetShipById = Depends(get_get_ship_by_id_use_case),
) -> ShipResponseDTO:
    request = GetShipByIdRequest(ship_id=ShipMapper.to_ship_id(ship_id))
    return ShipMapper.to_ship_response(use_case.execute(request).ship)


@router.post(
    "/ships/{ship_id}",
    response_model=ShipResponseDTO,
    summary="Update ship",
    description="""
    Partially update a ship.

    Omitted or null fields keep their stored value. The rating is
    recomputed from the resulting ship.
    """,
    responses={**BAD_REQUEST, **NOT_FOUND},
)
def update_ship(
    ship_id: str,
    payload: ShipPayloadDTO,
    use_case: UpdateShip = Depends(get_update_ship_use_case),
) -> ShipResponseDTO:
    request = UpdateShipRequest(
        ship_id=ShipMapper.to_ship_id(ship_id),
        draft=ShipMapper.to_draft(payload),
    )
    return ShipMapper.to_ship_response(use_case.execute(request))


@router.delete(
    "/ships/{ship_id}",
    summary="Delete ship",
    responses={**BAD_REQUEST, **NOT_FOUND},
)
def delete_ship(
    ship_id: str,
    use_case: DeleteShip = Depends(get_delete_ship_use_case),
) -> Response:
    use_case.execute(DeleteShipRequest(ship_id=ShipMapper.to_ship_id(ship_id)))
    return Response(status_code=200)
