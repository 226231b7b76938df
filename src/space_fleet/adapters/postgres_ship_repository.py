"""PostgreSQL implementation of ShipRepository."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from space_fleet.domain.errors import NotFoundError
from space_fleet.domain.predicates import Between, Contains, Equals, Predicate
from space_fleet.domain.ship import Paging, Ship, ShipOrder, as_utc
from space_fleet.infra.db.models.ship import MAX_ID, ShipRow
from space_fleet.ports.ship_repository import SearchResult, ShipRepository

if TYPE_CHECKING:
    from sqlalchemy.sql import ColumnElement, Select


WRITABLE_FIELDS = (
    "name",
    "planet",
    "ship_type",
    "prod_date",
    "is_used",
    "speed",
    "crew_size",
    "rating",
)


def to_clause(predicate: Predicate) -> ColumnElement[bool]:
    """
    Translate a predicate descriptor into a SQL boolean expression on ShipRow.

    Substring matches use LIKE with escaped wildcards, which is case
    sensitive on PostgreSQL.
    """
    column = getattr(ShipRow, predicate.field)

    if isinstance(predicate, Contains):
        return column.contains(predicate.value, autoescape=True)
    if isinstance(predicate, Equals):
        return column == predicate.value
    if isinstance(predicate, Between):
        if predicate.lower is None:
            return column <= predicate.upper
        if predicate.upper is None:
            return column >= predicate.lower
        return column.between(predicate.lower, predicate.upper)

    raise TypeError(f"Unsupported predicate: {predicate!r}")


class PostgresShipRepository(ShipRepository):
    """
    PostgreSQL implementation of ShipRepository.

    - Uses SQLAlchemy ORM for database access
    - Applies predicates as SQL WHERE clauses
    - Returns total_count via COUNT(*) query
    - Converts ShipRow (infrastructure) to Ship (domain)
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def find_by_id(self, ship_id: int) -> Ship | None:
        if not self._storable(ship_id):
            return None
        row = self._session.get(ShipRow, ship_id)
        return self._to_domain(row) if row else None

    def exists_by_id(self, ship_id: int) -> bool:
        if not self._storable(ship_id):
            return False
        query = select(ShipRow.id).where(ShipRow.id == ship_id)
        return self._session.execute(query).scalar_one_or_none() is not None

    def find_all(self) -> list[Ship]:
        rows = self._session.execute(select(ShipRow).order_by(ShipRow.id)).scalars().all()
        return [self._to_domain(row) for row in rows]

    def search(
        self,
        predicates: list[Predicate],
        paging: Paging | None,
        order: ShipOrder = ShipOrder.ID,
    ) -> SearchResult:
        """
        Search ships with predicates, ordering and paging.

        Executes two queries:
        1. COUNT(*) to get total matching ships (before paging)
        2. SELECT with ORDER BY, plus OFFSET/LIMIT when paging is given

        Note:
            Assumes paging is validated by UseCase (contract programming).
        """
        total_count = self.count(predicates)

        query = self._build_query(predicates).order_by(getattr(ShipRow, order.value), ShipRow.id)
        if paging is not None:
            query = query.offset(paging.offset).limit(paging.limit)

        rows = self._session.execute(query).scalars().all()
        ships = [self._to_domain(row) for row in rows]

        return SearchResult(ships=ships, total_count=total_count)

    def count(self, predicates: list[Predicate]) -> int:
        query = self._build_query(predicates)
        count_query = select(func.count()).select_from(query.subquery())
        return self._session.execute(count_query).scalar() or 0

    def save(self, ship: Ship) -> Ship:
        """
        Insert a new ship or overwrite the stored one.

        Raises:
            NotFoundError: If ship.id is set but no such row exists
        """
        if ship.id is None:
            row = ShipRow()
            self._session.add(row)
        else:
            row = self._session.get(ShipRow, ship.id) if self._storable(ship.id) else None
            if row is None:
                raise NotFoundError(resource="Ship", identifier=str(ship.id))

        for field in WRITABLE_FIELDS:
            setattr(row, field, getattr(ship, field))

        # Flush so the generated id is available before commit
        self._session.flush()

        return self._to_domain(row)

    def delete_by_id(self, ship_id: int) -> None:
        if not self._storable(ship_id):
            return
        self._session.execute(delete(ShipRow).where(ShipRow.id == ship_id))

    def _storable(self, ship_id: int) -> bool:
        """Ids beyond the column range cannot name a row and never reach the driver."""
        return ship_id <= MAX_ID

    def _build_query(self, predicates: list[Predicate]) -> Select[tuple[ShipRow]]:
        query = select(ShipRow)
        for predicate in predicates:
            query = query.where(to_clause(predicate))
        return query

    def _to_domain(self, row: ShipRow) -> Ship:
        """
        Convert database model (ShipRow) to domain entity (Ship).

        Drivers without time zone support hand back naive datetimes, which
        are stored in UTC.
        """
        return Ship(
            id=row.id,
            name=row.name,
            planet=row.planet,
            ship_type=row.ship_type,
            prod_date=as_utc(row.prod_date),
            is_used=row.is_used,
            speed=row.speed,
            crew_size=row.crew_size,
            rating=row.rating,
        )
