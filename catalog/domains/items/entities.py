from datetime import datetime
from enum import Enum
from typing import Iterable, Optional, Set

from catalog.domains.shared.entities import normalize_tag, normalize_tags, utc_now


class ItemStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    ARCHIVED = "ARCHIVED"


class Item:
    """Сущность элемента каталога"""

    def __init__(
        self,
        title: Optional[str] = None,
        description: Optional[str] = None,
        category: Optional[str] = None,
        status: ItemStatus = ItemStatus.ACTIVE,
        tags: Optional[Iterable[str]] = None,
        id: Optional[int] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.id = id
        self._title = title
        self._description = description
        self._category = category
        self._status = status
        self._tags: Set[str] = self._normalize_tags(tags)
        self.created_at = created_at or utc_now()
        self.updated_at = max(updated_at or self.created_at, self.created_at)

    @staticmethod
    def _normalize_tags(tags: Optional[Iterable[str]]) -> Set[str]:
        return set(normalize_tags(tags))

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
    def description(self) -> Optional[str]:
        return self._description

    @description.setter
    def description(self, value: Optional[str]) -> None:
        self._description = value
        self._touch()

    @property
    def category(self) -> Optional[str]:
        return self._category

    @category.setter
    def category(self, value: Optional[str]) -> None:
        self._category = value
        self._touch()

    @property
    def status(self) -> ItemStatus:
        return self._status

    @status.setter
    def status(self, value: ItemStatus) -> None:
        self._status = value
        self._touch()

    @property
    def tags(self) -> Set[str]:
        """Копия набора тегов"""
        return set(self._tags)

    @tags.setter
    def tags(self, value: Optional[Iterable[str]]) -> None:
        self._tags = self._normalize_tags(value)
        self._touch()

    def add_tag(self, tag: Optional[str]) -> None:
        """Добавление тега, пустые значения игнорируются"""
        normalized = normalize_tag(tag)
        if normalized:
            self._tags.add(normalized)
            self._touch()

    def remove_tag(self, tag: Optional[str]) -> None:
        """Удаление тега"""
        normalized = normalize_tag(tag)
        if normalized in self._tags:
            self._tags.discard(normalized)
            self._touch()

    def has_tag(self, tag: Optional[str]) -> bool:
        normalized = normalize_tag(tag)
        return normalized is not None and normalized in self._tags

    @classmethod
    def create_item(
        cls,
        title: str,
        description: Optional[str] = None,
        category: Optional[str] = None,
        status: ItemStatus = ItemStatus.ACTIVE,
        tags: Optional[Iterable[str]] = None
    ) -> "Item":
        """Создание нового элемента (ID назначается при сохранении)"""
        return cls(
            title=title,
            description=description,
            category=category,
            status=status,
            tags=tags
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Item):
            return False
        if self is other:
            return True
        return self.id is not None and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else id(self)

    def __repr__(self) -> str:
        return f"Item(id={self.id}, title={self.title}, category={self.category}, status={self.status.value if self.status else None})"
