from typing import List, Optional

from catalog.db.repositories.base import InMemoryRepository
from catalog.domains.movies.entities import Movie, MovieStatus
from catalog.domains.shared.entities import normalize_tag


class MovieRepository(InMemoryRepository[Movie]):
    """Репозиторий для работы с фильмами"""

    def find_by_status(self, status: Optional[MovieStatus]) -> List[Movie]:
        if status is None:
            return []
        return [movie for movie in self.find_all() if movie.status == status]

    def find_by_genre(self, genre: Optional[str]) -> List[Movie]:
        """Получение фильмов по жанру (без учета регистра)"""
        if genre is None or not genre.strip():
            return []
        target = genre.strip().lower()
        return [
            movie for movie in self.find_all()
            if movie.genre is not None and movie.genre.strip().lower() == target
        ]

    def find_by_tag(self, tag: Optional[str]) -> List[Movie]:
        normalized = normalize_tag(tag)
        if normalized is None:
            return []
        return [movie for movie in self.find_all() if movie.has_tag(normalized)]

    def find_by_title_containing(self, title: Optional[str]) -> List[Movie]:
        """Поиск фильмов по части названия"""
        if title is None or not title.strip():
            return []
        needle = title.lower()
        return [
            movie for movie in self.find_all()
            if movie.title is not None and needle in movie.title.lower()
        ]
