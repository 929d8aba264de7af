from catalog.db.repositories import ItemRepository, MovieRepository
from catalog.domains.items.services import ItemService
from catalog.domains.movies.services import MovieService

# Хранилища процесса, данные живут только в памяти
item_repository = ItemRepository()
movie_repository = MovieRepository()


# Функции для dependency injection в FastAPI
def get_item_service() -> ItemService:
    return ItemService(item_repository)


def get_movie_service() -> MovieService:
    return MovieService(movie_repository)
