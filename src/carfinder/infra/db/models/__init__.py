from carfinder.infra.db.models.base import Base
from carfinder.infra.db.models.car import CarRow
from carfinder.infra.db.models.user import UserRow

__all__ = ["Base", "CarRow", "UserRow"]
