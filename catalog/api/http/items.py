from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import Optional, List, Dict

from catalog.core.config import settings
from catalog.core.db import get_item_service
from catalog.core.errors import EntityNotFoundError, InvalidArgumentError
from catalog.domains.items.entities import Item, ItemStatus
from catalog.domains.items.schemas import (
    ItemCreate, ItemUpdate, ItemResponse, ItemStatsResponse
)
from catalog.domains.items.services import ItemService

router = APIRouter(prefix="/api/items", tags=["items"])


def _to_response(item: Item) -> ItemResponse:
    return ItemResponse.model_validate(item)


def _to_responses(items: List[Item]) -> List[ItemResponse]:
    return [_to_response(item) for item in items]


@router.get("/", response_model=List[ItemResponse])
async def get_all_items(service: ItemService = Depends(get_item_service)):
    """Получение списка всех элементов"""
    return _to_responses(service.find_all())


@router.post("/", response_model=ItemResponse, status_code=status.HTTP_201_CREATED)
async def create_item(
    item_data: ItemCreate,
    service: ItemService = Depends(get_item_service)
):
    """Создание нового элемента"""
    try:
        item = service.create_item(item_data)
    except InvalidArgumentError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    return _to_response(item)


@router.get("/status/{item_status}", response_model=List[ItemResponse])
async def get_items_by_status(
    item_status: ItemStatus,
    service: ItemService = Depends(get_item_service)
):
    """Получение элементов по статусу"""
    return _to_responses(service.find_by_status(item_status))


@router.get("/category/{category}", response_model=List[ItemResponse])
async def get_items_by_category(
    category: str,
    service: ItemService = Depends(get_item_service)
):
    """Получение элементов по категории"""
    return _to_responses(service.find_by_category(category))


@router.get("/grouped", response_model=Dict[str, List[ItemResponse]])
async def get_items_grouped_by_category(service: ItemService = Depends(get_item_service)):
    """Элементы, сгруппированные по категории"""
    return {
        category: _to_responses(items)
        for category, items in service.group_by_category().items()
    }


@router.get("/categories", response_model=List[str])
async def get_all_categories(service: ItemService = Depends(get_item_service)):
    return sorted(service.get_all_unique_categories())


@router.get("/tags", response_model=List[str])
async def get_all_tags(service: ItemService = Depends(get_item_service)):
    return sorted(service.get_all_unique_tags())


@router.get("/tags/popular", response_model=List[str])
async def get_popular_tags(
    limit: int = Query(settings.popular_tags_limit),
    service: ItemService = Depends(get_item_service)
):
    """Самые популярные теги"""
    return service.get_most_popular_tags(limit)


@router.get("/tags/all", response_model=List[ItemResponse])
async def get_items_with_all_tags(
    tags: List[str] = Query([], alias="tag"),
    service: ItemService = Depends(get_item_service)
):
    """Элементы, у которых есть все указанные теги"""
    return _to_responses(service.find_by_all_tags(tags))


@router.get("/tags/any", response_model=List[ItemResponse])
async def get_items_with_any_tag(
    tags: List[str] = Query([], alias="tag"),
    service: ItemService = Depends(get_item_service)
):
    """Элементы, у которых есть хотя бы один из указанных тегов"""
    return _to_responses(service.find_by_any_tag(tags))


@router.get("/stats/status", response_model=Dict[ItemStatus, int])
async def get_status_statistics(service: ItemService = Depends(get_item_service)):
    return service.count_by_status()


@router.get("/stats", response_model=ItemStatsResponse)
async def get_item_statistics(service: ItemService = Depends(get_item_service)):
    """Сводная статистика по элементам"""
    return ItemStatsResponse(**service.get_item_statistics())


@router.get("/search", response_model=List[ItemResponse])
async def search_items(
    query: Optional[str] = Query(None),
    service: ItemService = Depends(get_item_service)
):
    """Поиск элементов"""
    return _to_responses(service.search(query))


@router.post("/archive-inactive")
async def archive_inactive_items(service: ItemService = Depends(get_item_service)):
    """Перевод неактивных элементов в архив"""
    return {"archived": service.archive_inactive_items()}


@router.get("/{item_id}", response_model=ItemResponse)
async def get_item(
    item_id: int,
    service: ItemService = Depends(get_item_service)
):
    """Получение элемента по ID"""
    item = service.find_by_id(item_id)

    if not item:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Item not found"
        )

    return _to_response(item)


@router.put("/{item_id}", response_model=ItemResponse)
async def replace_item(
    item_id: int,
    item_data: ItemCreate,
    service: ItemService = Depends(get_item_service)
):
    """Полная замена элемента"""
    try:
        item = service.replace_item(item_id, item_data)
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
    return _to_response(item)


@router.patch("/{item_id}", response_model=ItemResponse)
async def update_item(
    item_id: int,
    update_data: ItemUpdate,
    service: ItemService = Depends(get_item_service)
):
    """Частичное обновление элемента"""
    try:
        item = service.update_item(item_id, update_data)
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
    return _to_response(item)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item(
    item_id: int,
    service: ItemService = Depends(get_item_service)
):
    """Удаление элемента"""
    try:
        service.delete_by_id(item_id)
    except EntityNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
