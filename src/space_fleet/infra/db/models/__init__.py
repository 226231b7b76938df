from space_fleet.infra.db.models.ship import ShipRow

__all__ = ["ShipRow"]
