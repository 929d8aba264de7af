import threading
from typing import Dict, Generic, Iterable, List, Optional, TypeVar

T = TypeVar("T")


class InMemoryRepository(Generic[T]):
    """Потокобезопасное хранилище сущностей в памяти с ключом по целочисленному ID.

    Сущность должна иметь атрибут ``id``: ``None`` до первого сохранения,
    после чего ID назначается хранилищем и больше не меняется.
    """

    def __init__(self):
        self._storage: Dict[int, T] = {}
        self._next_id = 1
        self._lock = threading.RLock()

    def save(self, entity: T) -> T:
        """Создание или обновление сущности (возвращается тот же объект)"""
        with self._lock:
            if entity.id is None:
                entity.id = self._next_id
                self._next_id += 1
            elif entity.id >= self._next_id:
                self._next_id = entity.id + 1
            self._storage[entity.id] = entity
        return entity

    def update(self, entity: T) -> Optional[T]:
        """Замена сущности, только если она еще есть в хранилище"""
        with self._lock:
            if entity.id is None or entity.id not in self._storage:
                return None
            self._storage[entity.id] = entity
        return entity

    def find_by_id(self, entity_id: int) -> Optional[T]:
        """Получение сущности по ID"""
        with self._lock:
            return self._storage.get(entity_id)

    def find_all(self) -> List[T]:
        """Снимок всех сущностей (новый список, порядок первого сохранения)"""
        with self._lock:
            return list(self._storage.values())

    def delete_by_id(self, entity_id: int) -> None:
        """Удаление сущности по ID, отсутствие ID не является ошибкой"""
        with self._lock:
            self._storage.pop(entity_id, None)

    def exists_by_id(self, entity_id: int) -> bool:
        with self._lock:
            return entity_id in self._storage

    def count(self) -> int:
        with self._lock:
            return len(self._storage)

    def delete_all(self) -> None:
        """Очистка хранилища и сброс генератора ID"""
        with self._lock:
            self._storage.clear()
            self._next_id = 1

    def save_all(self, entities: Iterable[T]) -> List[T]:
        """Сохранение нескольких сущностей в порядке передачи"""
        return [self.save(entity) for entity in entities]
