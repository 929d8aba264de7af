from catalog.db.repositories.base import InMemoryRepository
from catalog.db.repositories.item_repository import ItemRepository
from catalog.db.repositories.movie_repository import MovieRepository

__all__ = [
    "InMemoryRepository",
    "ItemRepository",
    "MovieRepository"
]
