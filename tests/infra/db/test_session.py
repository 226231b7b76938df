"""Tests for database configuration and session management."""

from __future__ import annotations

from typing import Iterator
from unittest.mock import MagicMock, patch

import pytest

from space_fleet.infra.db import session as session_module
from space_fleet.infra.db.config import database_url, sql_echo
from space_fleet.infra.db.session import engine_options, get_session


# ==============================================================================
# Configuration
# ==============================================================================


def test_database_url_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg://fleet@localhost/fleet")

    assert database_url() == "postgresql+psycopg://fleet@localhost/fleet"


def test_database_url_is_required(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(RuntimeError, match="DATABASE_URL"):
        database_url()


@pytest.mark.parametrize("value, expected", [("1", True), ("TRUE", True), (" on ", True), ("0", False), ("", False)])
def test_sql_echo(monkeypatch: pytest.MonkeyPatch, value: str, expected: bool) -> None:
    monkeypatch.setenv("SQL_ECHO", value)

    assert sql_echo() is expected


# ==============================================================================
# Engine options
# ==============================================================================


def test_server_databases_get_pool_options(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SQL_ECHO", raising=False)

    options = engine_options("postgresql+psycopg://fleet@localhost/fleet")

    assert options == {
        "echo": False,
        "pool_size": 10,
        "max_overflow": 20,
        "pool_pre_ping": True,
        "pool_recycle": 3600,
    }


def test_sqlite_skips_pool_options(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SQL_ECHO", "yes")

    assert engine_options("sqlite://") == {"echo": True}


# ==============================================================================
# get_session()
# ==============================================================================


@pytest.fixture()
def mock_session() -> Iterator[MagicMock]:
    session = MagicMock()
    with patch.object(session_module, "get_session_local", return_value=lambda: session):
        yield session


def test_get_session_commits_and_closes(mock_session: MagicMock) -> None:
    with get_session() as session:
        assert session is mock_session

    mock_session.commit.assert_called_once()
    mock_session.rollback.assert_not_called()
    mock_session.close.assert_called_once()


def test_get_session_rolls_back_on_error(mock_session: MagicMock) -> None:
    with pytest.raises(ValueError):
        with get_session():
            raise ValueError("boom")

    mock_session.commit.assert_not_called()
    mock_session.rollback.assert_called_once()
    mock_session.close.assert_called_once()
