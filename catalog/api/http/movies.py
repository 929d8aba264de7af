from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import Optional, List, Dict

from catalog.core.config import settings
from catalog.core.db import get_movie_service
from catalog.core.errors import EntityNotFoundError, InvalidArgumentError
from catalog.domains.movies.entities import Movie, MovieStatus
from catalog.domains.movies.schemas import (
    MovieCreate, MovieUpdate, MovieResponse, MovieStatsResponse
)
from catalog.domains.movies.services import MovieService

router = APIRouter(prefix="/api/movies", tags=["movies"])


def _to_responses(movies: List[Movie]) -> List[MovieResponse]:
    return [MovieResponse.model_validate(movie) for movie in movies]


@router.get("/", response_model=List[MovieResponse])
async def get_all_movies(service: MovieService = Depends(get_movie_service)):
    """Получение всех фильмов"""
    return _to_responses(service.find_all())


@router.post("/", response_model=MovieResponse, status_code=status.HTTP_201_CREATED)
async def add_movie(
    movie_data: MovieCreate,
    service: MovieService = Depends(get_movie_service)
):
    """Добавление нового фильма"""
    try:
        movie = service.create_movie(movie_data)
    except InvalidArgumentError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    return MovieResponse.model_validate(movie)


@router.get("/genre/{genre}", response_model=List[MovieResponse])
async def get_movies_by_genre(
    genre: str,
    service: MovieService = Depends(get_movie_service)
):
    """Фильмы указанного жанра"""
    return _to_responses(service.find_by_genre(genre))


@router.get("/genres", response_model=List[str])
async def get_all_genres(service: MovieService = Depends(get_movie_service)):
    return sorted(service.get_all_unique_genres())


@router.get("/grouped", response_model=Dict[str, List[MovieResponse]])
async def get_movies_grouped_by_genre(service: MovieService = Depends(get_movie_service)):
    """Фильмы, сгруппированные по жанру"""
    return {
        genre: _to_responses(movies)
        for genre, movies in service.group_by_genre().items()
    }


@router.get("/status/{movie_status}", response_model=List[MovieResponse])
async def get_movies_by_status(
    movie_status: MovieStatus,
    service: MovieService = Depends(get_movie_service)
):
    return _to_responses(service.find_by_status(movie_status))


@router.get("/tags", response_model=List[str])
async def get_all_tags(service: MovieService = Depends(get_movie_service)):
    return sorted(service.get_all_unique_tags())


@router.get("/tags/popular", response_model=List[str])
async def get_popular_tags(
    limit: int = Query(settings.popular_tags_limit),
    service: MovieService = Depends(get_movie_service)
):
    return service.get_most_popular_tags(limit)


@router.get("/tags/all", response_model=List[MovieResponse])
async def get_movies_with_all_tags(
    tags: List[str] = Query([], alias="tag"),
    service: MovieService = Depends(get_movie_service)
):
    return _to_responses(service.find_by_all_tags(tags))


@router.get("/tags/any", response_model=List[MovieResponse])
async def get_movies_with_any_tag(
    tags: List[str] = Query([], alias="tag"),
    service: MovieService = Depends(get_movie_service)
):
    return _to_responses(service.find_by_any_tag(tags))


@router.get("/stats/status", response_model=Dict[MovieStatus, int])
async def get_status_statistics(service: MovieService = Depends(get_movie_service)):
    return service.count_by_status()


@router.get("/stats", response_model=MovieStatsResponse)
async def get_movie_statistics(service: MovieService = Depends(get_movie_service)):
    """Сводная статистика по фильмам"""
    return MovieStatsResponse(**service.get_movie_statistics())


@router.get("/search", response_model=List[MovieResponse])
async def search_movies(
    title: Optional[str] = Query(None),
    query: Optional[str] = Query(None),
    service: MovieService = Depends(get_movie_service)
):
    """Поиск фильмов по названию (``title``) или по всем полям (``query``)"""
    if title is not None:
        return _to_responses(service.search_by_title(title))
    return _to_responses(service.search(query))


@router.post("/archive-inactive")
async def archive_inactive_movies(service: MovieService = Depends(get_movie_service)):
    """Перевод неактивных фильмов в архив"""
    return {"archived": service.archive_inactive_movies()}


@router.get("/{movie_id}", response_model=MovieResponse)
async def get_movie(
    movie_id: int,
    service: MovieService = Depends(get_movie_service)
):
    """Получение фильма по ID"""
    movie = service.find_by_id(movie_id)

    if not movie:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Movie not found"
        )

    return MovieResponse.model_validate(movie)


@router.put("/{movie_id}", response_model=MovieResponse)
async def replace_movie(
    movie_id: int,
    movie_data: MovieCreate,
    service: MovieService = Depends(get_movie_service)
):
    """Полная замена фильма"""
    try:
        movie = service.replace_movie(movie_id, movie_data)
    except EntityNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except InvalidArgumentError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    return MovieResponse.model_validate(movie)


@router.patch("/{movie_id}", response_model=MovieResponse)
async def update_movie(
    movie_id: int,
    update_data: MovieUpdate,
    service: MovieService = Depends(get_movie_service)
):
    """Частичное обновление фильма"""
    try:
        movie = service.update_movie(movie_id, update_data)
    except EntityNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except InvalidArgumentError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    return MovieResponse.model_validate(movie)


@router.delete("/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_movie(
    movie_id: int,
    service: MovieService = Depends(get_movie_service)
):
    """Удаление фильма"""
    try:
        service.delete_by_id(movie_id)
    except EntityNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
