from pydantic import BaseModel, Field, field_validator, ConfigDict
from typing import Optional, List, Dict
from datetime import date, datetime

from catalog.domains.movies.entities import MovieStatus


class MovieBase(BaseModel):
    """Базовая схема фильма"""
    title: str
    genre: Optional[str] = None
    description: Optional[str] = None
    director: Optional[str] = None
    release_date: Optional[date] = None
    rating: float = 0.0
    favorite: bool = False
    status: MovieStatus = MovieStatus.ACTIVE
    tags: List[str] = Field(default_factory=list)


class MovieCreate(MovieBase):
    """Схема для создания или полной замены фильма"""
    pass


class MovieUpdate(BaseModel):
    """Схема для частичного обновления фильма.

    Применяются только явно переданные поля, поэтому ``rating=0`` и
    ``favorite=false`` можно установить явно.
    """
    title: Optional[str] = None
    genre: Optional[str] = None
    description: Optional[str] = None
    director: Optional[str] = None
    release_date: Optional[date] = None
    rating: Optional[float] = None
    favorite: Optional[bool] = None
    status: Optional[MovieStatus] = None
    tags: Optional[List[str]] = None

    @field_validator('rating', 'favorite', 'status')
    @classmethod
    def validate_not_null(cls, v, info):
        if v is None:
            raise ValueError(f'{info.field_name} cannot be null')
        return v


class MovieResponse(BaseModel):
    """Схема для ответа с данными фильма"""
    id: int
    title: str
    genre: Optional[str] = None
    description: Optional[str] = None
    director: Optional[str] = None
    release_date: Optional[date] = None
    rating: float
    favorite: bool
    status: MovieStatus
    tags: List[str]
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class MovieStatsResponse(BaseModel):
    """Схема для статистики по фильмам"""
    total_movies: int
    status_counts: Dict[MovieStatus, int]
    genre_counts: Dict[str, int]
    total_unique_tags: int
    average_tags_per_movie: float
