from datetime import date, datetime
from enum import Enum
from typing import Iterable, List, Optional

from catalog.domains.shared.entities import normalize_tag, normalize_tags, utc_now


class MovieStatus(str, Enum):
    RELEASED = "RELEASED"
    UPCOMING = "UPCOMING"
    CANCELLED = "CANCELLED"
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    ARCHIVED = "ARCHIVED"


class Movie:
    """Сущность фильма из списка просмотра.

    ``category`` является синонимом ``genre``, чтобы фильмы обрабатывались
    теми же операциями над коллекциями, что и элементы каталога.
    """

    def __init__(
        self,
        title: Optional[str] = None,
        genre: Optional[str] = None,
        description: Optional[str] = None,
        director: Optional[str] = None,
        release_date: Optional[date] = None,
        rating: float = 0.0,
        favorite: bool = False,
        status: MovieStatus = MovieStatus.ACTIVE,
        tags: Optional[Iterable[str]] = None,
        id: Optional[int] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.id = id
        self._title = title
        self._genre = genre
        self._description = description
        self._director = director
        self._release_date = release_date
        self._rating = rating
        self._favorite = favorite
        self._status = status
        self._tags: List[str] = normalize_tags(tags)
        self.created_at = created_at or utc_now()
        self.updated_at = max(updated_at or self.created_at, self.created_at)

    def _touch(self) -> None:
        self.updated_at = max(utc_now(), self.created_at)

    @property
    def title(self) -> Optional[str]:
        return self._title

    @title.setter
    def title(self, value: Optional[str]) -> None:
        self._title = value
        self._touch()

    @property
    def genre(self) -> Optional[str]:
        return self._genre

    @genre.setter
    def genre(self, value: Optional[str]) -> None:
        self._genre = value
        self._touch()

    @property
    def category(self) -> Optional[str]:
        return self.genre

    @category.setter
    def category(self, value: Optional[str]) -> None:
        self.genre = value

    @property
    def description(self) -> Optional[str]:
        return self._description

    @description.setter
    def description(self, value: Optional[str]) -> None:
        self._description = value
        self._touch()

    @property
    def director(self) -> Optional[str]:
        return self._director

    @director.setter
    def director(self, value: Optional[str]) -> None:
        self._director = value
        self._touch()

    @property
    def release_date(self) -> Optional[date]:
        return self._release_date

    @release_date.setter
    def release_date(self, value: Optional[date]) -> None:
        self._release_date = value
        self._touch()

    @property
    def rating(self) -> float:
        return self._rating

    @rating.setter
    def rating(self, value: float) -> None:
        self._rating = value
        self._touch()

    @property
    def favorite(self) -> bool:
        return self._favorite

    @favorite.setter
    def favorite(self, value: bool) -> None:
        self._favorite = value
        self._touch()

    @property
    def status(self) -> MovieStatus:
        return self._status

    @status.setter
    def status(self, value: MovieStatus) -> None:
        self._status = value
        self._touch()

    @property
    def tags(self) -> List[str]:
        """Копия списка тегов"""
        return list(self._tags)

    @tags.setter
    def tags(self, value: Optional[Iterable[str]]) -> None:
        self._tags = normalize_tags(value)
        self._touch()

    def add_tag(self, tag: Optional[str]) -> None:
        normalized = normalize_tag(tag)
        if normalized and normalized not in self._tags:
            self._tags.append(normalized)
            self._touch()

    def remove_tag(self, tag: Optional[str]) -> None:
        normalized = normalize_tag(tag)
        if normalized in self._tags:
            self._tags.remove(normalized)
            self._touch()

    def has_tag(self, tag: Optional[str]) -> bool:
        normalized = normalize_tag(tag)
        return normalized is not None and normalized in self._tags

    @classmethod
    def create_movie(
        cls,
        title: str,
        genre: Optional[str] = None,
        director: Optional[str] = None,
        release_date: Optional[date] = None,
        rating: float = 0.0,
        **kwargs
    ) -> "Movie":
        """Создание нового фильма (ID назначается при сохранении)"""
        return cls(
            title=title,
            genre=genre,
            director=director,
            release_date=release_date,
            rating=rating,
            **kwargs
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Movie):
            return False
        if self is other:
            return True
        return self.id is not None and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else id(self)

    def __repr__(self) -> str:
        return (
            f"Movie(id={self.id}, title={self.title}, genre={self.genre}, "
            f"director={self.director}, rating={self.rating:.1f}, status={self.status})"
        )
