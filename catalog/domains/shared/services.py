import copy
import logging
from typing import Any, Dict, Generic, Iterable, List, Optional, TypeVar, TYPE_CHECKING

from catalog.core.errors import EntityNotFoundError, InvalidArgumentError
from catalog.domains.shared.validation import Validator

if TYPE_CHECKING:
    from catalog.db.repositories.base import InMemoryRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EntityService(Generic[T]):
    """Базовый сервис CRUD-операций с проверкой перед записью.

    Правила проверки не зашиты в сервис, а передаются в конструктор.
    """

    entity_name = "Entity"

    def __init__(self, repository: "InMemoryRepository[T]", validator: Validator):
        self.repository = repository
        self.validator = validator

    def save(self, entity: T) -> T:
        """Сохранение сущности после проверки"""
        self.validator.validate(entity)
        is_new = entity.id is None
        saved = self.repository.save(entity)
        if is_new:
            logger.info(f"Created {self.entity_name.lower()} {saved.id}")
        return saved

    def find_by_id(self, entity_id: Optional[int]) -> Optional[T]:
        """Получение сущности по ID"""
        if entity_id is None:
            raise InvalidArgumentError("ID cannot be null")
        return self.repository.find_by_id(entity_id)

    def get_by_id(self, entity_id: Optional[int]) -> T:
        """Получение существующей сущности по ID или ошибка NOT_FOUND"""
        entity = self.find_by_id(entity_id)
        if entity is None:
            raise EntityNotFoundError(f"{self.entity_name} not found: {entity_id}")
        return entity

    def find_all(self) -> List[T]:
        return self.repository.find_all()

    def delete_by_id(self, entity_id: Optional[int]) -> None:
        """Удаление сущности по ID"""
        if entity_id is None or not self.repository.exists_by_id(entity_id):
            raise EntityNotFoundError(f"{self.entity_name} with ID {entity_id} not found")
        self.repository.delete_by_id(entity_id)
        logger.info(f"Deleted {self.entity_name.lower()} {entity_id}")

    def exists_by_id(self, entity_id: Optional[int]) -> bool:
        return entity_id is not None and self.repository.exists_by_id(entity_id)

    def count(self) -> int:
        return self.repository.count()

    def delete_all(self) -> None:
        self.repository.delete_all()
        logger.info(f"Deleted all {self.entity_name.lower()} records")

    def save_all(self, entities: Iterable[T]) -> List[T]:
        """Сохранение нескольких сущностей: сначала проверяются все"""
        entities = list(entities)
        for entity in entities:
            self.validator.validate(entity)
        return self.repository.save_all(entities)

    def replace(self, entity_id: Optional[int], entity: T) -> T:
        """Полная замена существующей сущности с сохранением ID и даты создания"""
        existing = self.get_by_id(entity_id)
        self.validator.validate(entity)
        entity.id = existing.id
        entity.created_at = existing.created_at
        return self._resave(entity)

    def update_fields(self, entity_id: Optional[int], changes: Dict[str, Any]) -> T:
        """Частичное обновление: меняются только переданные поля.

        Изменения применяются к копии, и в хранилище целиком заменяется
        уже проверенная копия. Сохраненный объект не изменяется, поэтому
        при ошибке он остается прежним.
        """
        entity = self.get_by_id(entity_id)
        candidate = copy.deepcopy(entity)
        for field, value in changes.items():
            setattr(candidate, field, value)
        return self._resave(candidate)

    def _resave(self, entity: T) -> T:
        """Повторное сохранение уже существующей сущности"""
        self.validator.validate(entity)
        saved = self.repository.update(entity)
        if saved is None:
            raise EntityNotFoundError(f"{self.entity_name} not found: {entity.id}")
        return saved
