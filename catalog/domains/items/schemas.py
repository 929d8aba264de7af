from pydantic import BaseModel, Field, field_validator, ConfigDict
from typing import Optional, List, Dict
from datetime import datetime

from catalog.domains.items.entities import ItemStatus


class ItemBase(BaseModel):
    """Базовая схема элемента каталога"""
    title: str
    description: Optional[str] = None
    category: Optional[str] = None
    status: ItemStatus = ItemStatus.ACTIVE
    tags: List[str] = Field(default_factory=list)


class ItemCreate(ItemBase):
    """Схема для создания или полной замены элемента"""
    pass


class ItemUpdate(BaseModel):
    """Схема для частичного обновления элемента.

    Применяются только явно переданные поля.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    status: Optional[ItemStatus] = None
    tags: Optional[List[str]] = None

    @field_validator('status')
    @classmethod
    def validate_status(cls, v):
        if v is None:
            raise ValueError('Status cannot be null')
        return v


class ItemResponse(BaseModel):
    """Схема для ответа с данными элемента"""
    id: int
    title: str
    description: Optional[str] = None
    category: Optional[str] = None
    status: ItemStatus
    tags: List[str]
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator('tags', mode='before')
    @classmethod
    def sort_tags(cls, v):
        return sorted(v)


class ItemStatsResponse(BaseModel):
    """Схема для статистики по элементам"""
    total_items: int
    status_counts: Dict[ItemStatus, int]
    category_counts: Dict[str, int]
    total_unique_tags: int
    average_tags_per_item: float
