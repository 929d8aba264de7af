from typing import Any, Optional, Protocol

from catalog.core.config import settings
from catalog.core.errors import InvalidArgumentError


class Validator(Protocol):
    """Набор правил, проверяемый перед каждой записью сущности"""

    def validate(self, entity: Any) -> None:
        ...


class TitledEntityValidator:
    """Проверка сущности с заголовком, описанием и категорией.

    Имя поля категории задается при создании: у элементов это ``category``,
    у фильмов ``genre``.
    """

    def __init__(
        self,
        entity_name: str,
        category_field: str = "category",
        category_label: str = "Category",
        title_max_length: Optional[int] = None,
        description_max_length: Optional[int] = None
    ):
        self.entity_name = entity_name
        self.category_field = category_field
        self.category_label = category_label
        self.title_max_length = title_max_length or settings.title_max_length
        self.description_max_length = description_max_length or settings.description_max_length

    def validate(self, entity: Any) -> None:
        if entity is None:
            raise InvalidArgumentError(f"{self.entity_name} cannot be null")

        title = entity.title
        if title is None or not title.strip():
            raise InvalidArgumentError("Title is required")
        if len(title.strip()) > self.title_max_length:
            raise InvalidArgumentError(
                f"Title cannot exceed {self.title_max_length} characters"
            )

        description = entity.description
        if description is not None and len(description) > self.description_max_length:
            raise InvalidArgumentError(
                f"Description cannot exceed {self.description_max_length} characters"
            )

        category = getattr(entity, self.category_field, None)
        if category is not None and not category.strip():
            raise InvalidArgumentError(f"{self.category_label} cannot be empty if provided")
