from .entity import Hotel, Room
from .repository import CatalogRepository
from .value_object import Address

__all__ = ["Address", "CatalogRepository", "Hotel", "Room"]
