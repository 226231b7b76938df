from __future__ import annotations

from datetime import datetime

from sqlalchemy import BigInteger, Boolean, DateTime, Enum, Float, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from space_fleet.domain.ship import ShipType
from space_fleet.infra.db.models.base import Base


# SQLite only autoincrements a column declared exactly as INTEGER
IdType = BigInteger().with_variant(Integer(), "sqlite")

# Largest value the signed 64-bit id column holds
MAX_ID = 2**63 - 1


class ShipRow(Base):
    __tablename__ = "ships"

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    planet: Mapped[str] = mapped_column(String(50), nullable=False)
    ship_type: Mapped[ShipType] = mapped_column(
        Enum(ShipType, name="ship_type", native_enum=False, length=16),
        nullable=False,
    )

    prod_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    is_used: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    speed: Mapped[float] = mapped_column(Float, nullable=False, index=True)
    crew_size: Mapped[int] = mapped_column(Integer, nullable=False)
    rating: Mapped[float] = mapped_column(Float, nullable=False, index=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
