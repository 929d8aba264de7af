import logging
from typing import Any, Dict, Iterable, List, Optional, Set, TYPE_CHECKING

from catalog.domains.movies.entities import Movie, MovieStatus
from catalog.domains.movies.schemas import MovieCreate, MovieUpdate
from catalog.domains.shared import processing
from catalog.domains.shared.services import EntityService
from catalog.domains.shared.validation import TitledEntityValidator, Validator

if TYPE_CHECKING:
    from catalog.db.repositories.movie_repository import MovieRepository

logger = logging.getLogger(__name__)

MOVIE_SEARCH_FIELDS = ("title", "description", "genre")


def movie_validator() -> TitledEntityValidator:
    """Правила проверки фильмов"""
    return TitledEntityValidator("Movie", category_field="genre", category_label="Genre")


class MovieService(EntityService[Movie]):
    """Сервис для работы со списком фильмов"""

    entity_name = "Movie"

    def __init__(self, repository: "MovieRepository", validator: Optional[Validator] = None):
        super().__init__(repository, validator or movie_validator())

    def create_movie(self, movie_data: MovieCreate) -> Movie:
        """Добавление нового фильма"""
        return self.save(Movie(**movie_data.model_dump()))

    def replace_movie(self, movie_id: int, movie_data: MovieCreate) -> Movie:
        """Полная замена фильма"""
        return self.replace(movie_id, Movie(**movie_data.model_dump()))

    def update_movie(self, movie_id: int, update_data: MovieUpdate) -> Movie:
        """Частичное обновление фильма (только явно переданные поля)"""
        return self.update_fields(movie_id, update_data.model_dump(exclude_unset=True))

    # Жанры

    def find_by_genre(self, genre: Optional[str]) -> List[Movie]:
        return self.repository.find_by_genre(genre)

    def search_by_title(self, title: Optional[str]) -> List[Movie]:
        """Поиск фильмов по части названия без учета регистра"""
        return self.repository.find_by_title_containing(title)

    def get_all_unique_genres(self) -> Set[str]:
        return processing.unique_values(self.find_all(), "genre")

    def group_by_genre(self) -> Dict[str, List[Movie]]:
        return processing.group_by_category(self.find_all(), "genre")

    def group_by_category(self) -> Dict[str, List[Movie]]:
        return processing.group_by_category(self.find_all(), "category")

    # Статусы

    def find_by_status(self, status: Optional[MovieStatus]) -> List[Movie]:
        return self.repository.find_by_status(status)

    def count_by_status(self) -> Dict[MovieStatus, int]:
        return processing.count_by_status(self.find_all())

    def archive_inactive_movies(self) -> int:
        """Перевод неактивных фильмов в архив"""
        archived = processing.archive_inactive(
            self.find_all(), MovieStatus.INACTIVE, MovieStatus.ARCHIVED, self._resave
        )
        logger.info(f"Archived {archived} inactive movies")
        return archived

    # Теги

    def get_all_unique_tags(self) -> Set[str]:
        return processing.unique_tags(self.find_all())

    def find_by_all_tags(self, tags: Optional[Iterable[str]]) -> List[Movie]:
        return processing.find_by_all_tags(self.find_all(), tags)

    def find_by_any_tag(self, tags: Optional[Iterable[str]]) -> List[Movie]:
        return processing.find_by_any_tag(self.find_all(), tags)

    def get_most_popular_tags(self, limit: int) -> List[str]:
        return processing.most_popular_tags(self.find_all(), limit)

    def search(self, query: Optional[str]) -> List[Movie]:
        """Поиск по названию, описанию, жанру и тегам"""
        return processing.search(self.find_all(), query, MOVIE_SEARCH_FIELDS)

    def get_movie_statistics(self) -> Dict[str, Any]:
        """Сводная статистика по списку фильмов"""
        movies = self.find_all()
        genre_groups = processing.group_by_category(movies, "genre")
        return {
            "total_movies": len(movies),
            "status_counts": processing.count_by_status(movies),
            "genre_counts": {genre: len(group) for genre, group in genre_groups.items()},
            "total_unique_tags": len(processing.unique_tags(movies)),
            "average_tags_per_movie": (
                sum(len(movie.tags) for movie in movies) / len(movies) if movies else 0.0
            )
        }
