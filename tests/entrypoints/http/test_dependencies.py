"""
Unit tests for FastAPI dependency injection functions.

This test suite verifies the per-request wiring:
- get_db() yields a database session per request
- get_ship_repository() binds a PostgresShipRepository to that session
- each use case factory builds a fresh use case around the repository

Tests use mocks to verify wiring without requiring a real database.
"""

from __future__ import annotations

from types import GeneratorType
from unittest.mock import MagicMock, Mock, patch

import pytest

from space_fleet.adapters.postgres_ship_repository import PostgresShipRepository
from space_fleet.entrypoints.http.dependencies import (
    get_count_ships_use_case,
    get_create_ship_use_case,
    get_db,
    get_delete_ship_use_case,
    get_get_ship_by_id_use_case,
    get_search_ships_use_case,
    get_ship_repository,
    get_update_ship_use_case,
)
from space_fleet.use_cases.count_ships import CountShips
from space_fleet.use_cases.create_ship import CreateShip
from space_fleet.use_cases.delete_ship import DeleteShip
from space_fleet.use_cases.get_ship_by_id import GetShipById
from space_fleet.use_cases.search_ships import SearchShips
from space_fleet.use_cases.update_ship import UpdateShip


def session_context(session: Mock) -> MagicMock:
    context = MagicMock()
    context.__enter__.return_value = session
    context.__exit__.return_value = None
    return context


# ==============================================================================
# get_db() - Database Session Provider
# ==============================================================================


def test_get_db_yields_session_from_get_session() -> None:
    mock_session = Mock()
    context = session_context(mock_session)

    with patch("space_fleet.entrypoints.http.dependencies.get_session") as mock_get_session:
        mock_get_session.return_value = context

        generator = get_db()
        assert next(generator) is mock_session

        # Completing the generator simulates FastAPI cleanup
        with pytest.raises(StopIteration):
            next(generator)

    mock_get_session.assert_called_once()
    context.__exit__.assert_called_once()


def test_get_db_is_generator() -> None:
    with patch("space_fleet.entrypoints.http.dependencies.get_session"):
        assert isinstance(get_db(), GeneratorType)


def test_get_db_exits_context_on_exception() -> None:
    context = MagicMock()
    context.__enter__.return_value = Mock()
    context.__exit__.return_value = None

    with patch("space_fleet.entrypoints.http.dependencies.get_session") as mock_get_session:
        mock_get_session.return_value = context

        generator = get_db()
        next(generator)

        with pytest.raises(RuntimeError):
            generator.throw(RuntimeError("Simulated error during request"))

    context.__exit__.assert_called_once()


def test_get_db_creates_new_session_each_call() -> None:
    with patch("space_fleet.entrypoints.http.dependencies.get_session") as mock_get_session:
        mock_get_session.side_effect = [session_context(Mock()), session_context(Mock())]

        session_1 = next(get_db())
        session_2 = next(get_db())

    assert mock_get_session.call_count == 2
    assert session_1 is not session_2


# ==============================================================================
# Repository and use case factories
# ==============================================================================


def test_get_ship_repository_binds_session() -> None:
    mock_session = Mock()

    repository = get_ship_repository(db=mock_session)

    assert isinstance(repository, PostgresShipRepository)
    assert repository._session is mock_session


@pytest.mark.parametrize(
    "factory, use_case_type",
    [
        (get_search_ships_use_case, SearchShips),
        (get_count_ships_use_case, CountShips),
        (get_get_ship_by_id_use_case, GetShipById),
        (get_create_ship_use_case, CreateShip),
        (get_update_ship_use_case, UpdateShip),
        (get_delete_ship_use_case, DeleteShip),
    ],
)
def test_use_case_factories_wire_repository(factory, use_case_type) -> None:  # type: ignore[no-untyped-def]
    repository = get_ship_repository(db=Mock())

    use_case = factory(repository=repository)

    assert isinstance(use_case, use_case_type)
    assert use_case._repository is repository


def test_requests_get_isolated_dependencies() -> None:
    session_1, session_2 = Mock(), Mock()

    use_case_1 = get_search_ships_use_case(repository=get_ship_repository(db=session_1))
    use_case_2 = get_search_ships_use_case(repository=get_ship_repository(db=session_2))

    assert use_case_1 is not use_case_2
    assert use_case_1._repository._session is session_1
    assert use_case_2._repository._session is session_2


def test_dependencies_are_not_cached() -> None:
    """lru_cache would add __wrapped__; sessions must stay per request."""
    assert not hasattr(get_db, "__wrapped__")
    assert not hasattr(get_ship_repository, "__wrapped__")
    assert not hasattr(get_search_ships_use_case, "__wrapped__")
