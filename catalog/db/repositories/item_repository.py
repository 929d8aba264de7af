from typing import List, Optional

from catalog.db.repositories.base import InMemoryRepository
from catalog.domains.items.entities import Item, ItemStatus
from catalog.domains.shared.entities import normalize_tag


class ItemRepository(InMemoryRepository[Item]):
    """Репозиторий для работы с элементами каталога"""

    def find_by_status(self, status: Optional[ItemStatus]) -> List[Item]:
        """Получение элементов по статусу"""
        if status is None:
            return []
        return [item for item in self.find_all() if item.status == status]

    def find_by_category(self, category: Optional[str]) -> List[Item]:
        """Получение элементов по категории (без учета регистра)"""
        if category is None or not category.strip():
            return []
        target = category.strip().lower()
        return [
            item for item in self.find_all()
            if item.category is not None and item.category.strip().lower() == target
        ]

    def find_by_tag(self, tag: Optional[str]) -> List[Item]:
        """Получение элементов с указанным тегом"""
        normalized = normalize_tag(tag)
        if normalized is None:
            return []
        return [item for item in self.find_all() if item.has_tag(normalized)]

    def find_by_title_containing(self, search_term: Optional[str]) -> List[Item]:
        """Поиск элементов по части заголовка"""
        if search_term is None or not search_term.strip():
            return []
        needle = search_term.lower()
        return [
            item for item in self.find_all()
            if item.title is not None and needle in item.title.lower()
        ]
