from pydantic import BaseModel, ConfigDict, Field

from space_fleet.domain.ship import ShipOrder, ShipType


# datetime range (years 1..9999) in epoch milliseconds
EPOCH_MILLIS_MIN = -62135596800000
EPOCH_MILLIS_MAX = 253402300799999

# signed 64-bit range of integer columns
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class ShipResponseDTO(BaseModel):
    id: int
    name: str
    planet: str
    ship_type: ShipType
    prod_date: int = Field(description="Production date as epoch milliseconds (UTC)")
    is_used: bool
    speed: float
    crew_size: int
    rating: float


class ShipPayloadDTO(BaseModel):
    """
    Request body for creating or updating a ship.

    Every field is optional at the HTTP layer. Creation rejects missing
    fields in the domain; updates keep the stored value of omitted fields.
    """

    name: str | None = Field(default=None, description="1 to 50 characters", examples=["Orion III"])
    planet: str | None = Field(default=None, description="1 to 50 characters", examples=["Mars"])
    ship_type: ShipType | None = Field(default=None, examples=[ShipType.MERCHANT])
    prod_date: int | None = Field(
        default=None,
        description="Production date as epoch milliseconds; year must be 2800..3019 (UTC)",
        examples=[29000000000000],
        ge=EPOCH_MILLIS_MIN,
        le=EPOCH_MILLIS_MAX,
    )
    is_used: bool | None = Field(
        default=None,
        description="Whether the ship is second-hand (defaults to false on creation)",
        examples=[False],
    )
    speed: float | None = Field(default=None, description="0.01 to 0.99", examples=[0.75])
    crew_size: int | None = Field(default=None, description="1 to 9999", examples=[120])

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Orion III",
                "planet": "Mars",
                "ship_type": "MERCHANT",
                "prod_date": 29000000000000,
                "is_used": False,
                "speed": 0.75,
                "crew_size": 120,
            }
        }
    )


class ShipFiltersQueryDTO(BaseModel):
    """Query parameters filtering ships. Omitted parameters put no constraint."""

    name: str | None = Field(
        default=None,
        description="Substring of the ship name (case-sensitive)",
        examples=["Orion"],
    )
    planet: str | None = Field(
        default=None,
        description="Substring of the planet (case-sensitive)",
        examples=["Mars"],
    )
    ship_type: ShipType | None = Field(default=None, description="Exact ship type")
    after: int | None = Field(
        default=None,
        description="Earliest production date, epoch milliseconds (inclusive)",
        ge=EPOCH_MILLIS_MIN,
        le=EPOCH_MILLIS_MAX,
    )
    before: int | None = Field(
        default=None,
        description="Latest production date, epoch milliseconds (inclusive)",
        ge=EPOCH_MILLIS_MIN,
        le=EPOCH_MILLIS_MAX,
    )
    is_used: bool | None = Field(default=None, description="Filter by usage flag")
    speed_min: float | None = Field(
        default=None, description="Minimum speed (inclusive)", allow_inf_nan=False
    )
    speed_max: float | None = Field(
        default=None, description="Maximum speed (inclusive)", allow_inf_nan=False
    )
    crew_size_min: int | None = Field(
        default=None, description="Minimum crew size (inclusive)", ge=INT64_MIN, le=INT64_MAX
    )
    crew_size_max: int | None = Field(
        default=None, description="Maximum crew size (inclusive)", ge=INT64_MIN, le=INT64_MAX
    )
    rating_min: float | None = Field(
        default=None, description="Minimum rating (inclusive)", allow_inf_nan=False
    )
    rating_max: float | None = Field(
        default=None, description="Maximum rating (inclusive)", allow_inf_nan=False
    )


class ShipsSearchQueryDTO(ShipFiltersQueryDTO):
    """Query parameters for listing ships."""

    order: ShipOrder = Field(
        default=ShipOrder.ID,
        description="Attribute to sort ascending on",
    )
    page_number: int = Field(
        default=0,
        description="Zero-based page index",
        examples=[0],
        ge=0,
    )
    page_size: int = Field(
        default=3,
        description="Maximum number of ships per page",
        examples=[3],
        ge=1,
        le=200,
    )


class ShipListResponseDTO(BaseModel):
    ships: list[ShipResponseDTO]
    total: int
    page_number: int
    page_size: int
