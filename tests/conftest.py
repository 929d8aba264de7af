"""Общие фикстуры тестов: свежие хранилища и сервисы на каждый тест."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from catalog.core.db import get_item_service, get_movie_service
from catalog.db.repositories import ItemRepository, MovieRepository
from catalog.domains.items.entities import Item, ItemStatus
from catalog.domains.items.services import ItemService
from catalog.domains.movies.services import MovieService
from catalog.main import app


def make_item(
    title: str,
    description: str | None = None,
    category: str | None = None,
    status: ItemStatus = ItemStatus.ACTIVE,
    tags: tuple[str, ...] = (),
) -> Item:
    return Item.create_item(
        title=title,
        description=description,
        category=category,
        status=status,
        tags=tags,
    )


@pytest.fixture
def item_repository() -> ItemRepository:
    return ItemRepository()


@pytest.fixture
def movie_repository() -> MovieRepository:
    return MovieRepository()


@pytest.fixture
def item_service(item_repository: ItemRepository) -> ItemService:
    return ItemService(item_repository)


@pytest.fixture
def movie_service(movie_repository: MovieRepository) -> MovieService:
    return MovieService(movie_repository)


@pytest.fixture
def sample_items() -> list[Item]:
    """Четыре элемента из базового сценария: 3 в Work, 1 в Personal."""
    return [
        make_item("Work Task 1", "Important work", "Work", ItemStatus.ACTIVE, ("urgent", "project-a")),
        make_item("Personal Task", "Personal stuff", "Personal", ItemStatus.ACTIVE, ("home",)),
        make_item("Work Task 2", "More work", "Work", ItemStatus.INACTIVE, ("project-b",)),
        make_item("Archived Task", "Old task", "Work", ItemStatus.ARCHIVED, ("urgent",)),
    ]


@pytest.fixture
def seeded_item_service(item_service: ItemService, sample_items: list[Item]) -> ItemService:
    for item in sample_items:
        item_service.save(item)
    return item_service


@pytest.fixture
def client(item_repository: ItemRepository, movie_repository: MovieRepository):
    app.dependency_overrides[get_item_service] = lambda: ItemService(item_repository)
    app.dependency_overrides[get_movie_service] = lambda: MovieService(movie_repository)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
