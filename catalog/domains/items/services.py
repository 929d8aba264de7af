import logging
from typing import Dict, List, Optional, Set, Iterable, TYPE_CHECKING

from catalog.domains.items.entities import Item, ItemStatus
from catalog.domains.items.schemas import ItemCreate, ItemUpdate
from catalog.domains.shared import processing
from catalog.domains.shared.services import EntityService
from catalog.domains.shared.validation import TitledEntityValidator, Validator

if TYPE_CHECKING:
    from catalog.db.repositories.item_repository import ItemRepository

logger = logging.getLogger(__name__)

ITEM_SEARCH_FIELDS = ("title", "description", "category")


def item_validator() -> TitledEntityValidator:
    """Правила проверки элементов каталога"""
    return TitledEntityValidator("Item", category_field="category", category_label="Category")


class ItemService(EntityService[Item]):
    """Сервис для работы с элементами каталога"""

    entity_name = "Item"

    def __init__(self, repository: "ItemRepository", validator: Optional[Validator] = None):
        super().__init__(repository, validator or item_validator())

    def create_item(self, item_data: ItemCreate) -> Item:
        """Создание нового элемента"""
        item = Item.create_item(**item_data.model_dump())
        return self.save(item)

    def replace_item(self, item_id: int, item_data: ItemCreate) -> Item:
        """Полная замена элемента"""
        return self.replace(item_id, Item.create_item(**item_data.model_dump()))

    def update_item(self, item_id: int, update_data: ItemUpdate) -> Item:
        """Частичное обновление элемента"""
        return self.update_fields(item_id, update_data.model_dump(exclude_unset=True))

    def find_by_status(self, status: Optional[ItemStatus]) -> List[Item]:
        return self.repository.find_by_status(status)

    def find_by_category(self, category: Optional[str]) -> List[Item]:
        return self.repository.find_by_category(category)

    def group_by_category(self) -> Dict[str, List[Item]]:
        """Группировка элементов по категории"""
        return processing.group_by_category(self.find_all(), "category")

    def get_all_unique_categories(self) -> Set[str]:
        return processing.unique_values(self.find_all(), "category")

    def get_all_unique_tags(self) -> Set[str]:
        return processing.unique_tags(self.find_all())

    def count_by_status(self) -> Dict[ItemStatus, int]:
        return processing.count_by_status(self.find_all())

    def find_by_all_tags(self, tags: Optional[Iterable[str]]) -> List[Item]:
        """Элементы, содержащие все указанные теги"""
        return processing.find_by_all_tags(self.find_all(), tags)

    def find_by_any_tag(self, tags: Optional[Iterable[str]]) -> List[Item]:
        """Элементы, содержащие хотя бы один из указанных тегов"""
        return processing.find_by_any_tag(self.find_all(), tags)

    def get_most_popular_tags(self, limit: int) -> List[str]:
        return processing.most_popular_tags(self.find_all(), limit)

    def search(self, query: Optional[str]) -> List[Item]:
        """Поиск по заголовку, описанию, категории и тегам"""
        return processing.search(self.find_all(), query, ITEM_SEARCH_FIELDS)

    def archive_inactive_items(self) -> int:
        """Перевод неактивных элементов в архив"""
        archived = processing.archive_inactive(
            self.find_all(), ItemStatus.INACTIVE, ItemStatus.ARCHIVED, self._resave
        )
        logger.info(f"Archived {archived} inactive items")
        return archived

    def get_item_statistics(self) -> dict:
        """Сводная статистика по элементам"""
        items = self.find_all()
        category_groups = processing.group_by_category(items, "category")
        return {
            "total_items": len(items),
            "status_counts": processing.count_by_status(items),
            "category_counts": {
                category: len(group) for category, group in category_groups.items()
            },
            "total_unique_tags": len(processing.unique_tags(items)),
            "average_tags_per_item": (
                sum(len(item.tags) for item in items) / len(items) if items else 0.0
            )
        }
