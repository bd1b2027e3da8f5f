from vehicle_listings.infra.db.models.base import Base
from vehicle_listings.infra.db.models.vehicle import VehicleRow

__all__ = ["Base", "VehicleRow"]
