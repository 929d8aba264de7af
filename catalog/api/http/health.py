from fastapi import APIRouter, Depends

from catalog.core.config import settings
from catalog.core.db import get_item_service, get_movie_service
from catalog.domains.items.services import ItemService
from catalog.domains.movies.services import MovieService

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(
    item_service: ItemService = Depends(get_item_service),
    movie_service: MovieService = Depends(get_movie_service)
):
    """Проверка состояния сервиса"""
    return {
        "status": "ok",
        "version": settings.app_version,
        "items": item_service.count(),
        "movies": movie_service.count()
    }
