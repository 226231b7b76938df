"""
Dependency injection for FastAPI routes.

Key principle: Database sessions should be per-request, not cached.
Every use case factory builds a fresh repository on the request's session.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from space_fleet.adapters.postgres_ship_repository import PostgresShipRepository
from space_fleet.infra.db.session import get_session
from space_fleet.ports.ship_repository import ShipRepository
from space_fleet.use_cases.count_ships import CountShips
from space_fleet.use_cases.create_ship import CreateShip
from space_fleet.use_cases.delete_ship import DeleteShip
from space_fleet.use_cases.get_ship_by_id import GetShipById
from space_fleet.use_cases.search_ships import SearchShips
from space_fleet.use_cases.update_ship import UpdateShip


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    FastAPI will:
    1. Call this function when a request starts
    2. Inject the session into the route
    3. Commit/rollback and close the session when the request ends

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


def get_ship_repository(db: Session = Depends(get_db)) -> ShipRepository:
    return PostgresShipRepository(session=db)


def get_search_ships_use_case(
    repository: ShipRepository = Depends(get_ship_repository),
) -> SearchShips:
    return SearchShips(ship_repository=repository)


def get_count_ships_use_case(
    repository: ShipRepository = Depends(get_ship_repository),
) -> CountShips:
    return CountShips(ship_repository=repository)


def get_get_ship_by_id_use_case(
    repository: ShipRepository = Depends(get_ship_repository),
) -> GetShipById:
    return GetShipById(ship_repository=repository)


def get_create_ship_use_case(
    repository: ShipRepository = Depends(get_ship_repository),
) -> CreateShip:
    return CreateShip(ship_repository=repository)


def get_update_ship_use_case(
    repository: ShipRepository = Depends(get_ship_repository),
) -> UpdateShip:
    return UpdateShip(ship_repository=repository)


def get_delete_ship_use_case(
    repository: ShipRepository = Depends(get_ship_repository),
) -> DeleteShip:
    return DeleteShip(ship_repository=repository)
