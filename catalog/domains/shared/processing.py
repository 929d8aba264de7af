"""
Операции над коллекцией сущностей: группировка, агрегаты, поиск,
операции над множествами тегов и массовый перевод статуса.

Все функции работают со снимком, полученным из ``find_all()`` хранилища,
и не хранят собственного состояния. Сущность должна иметь атрибуты
``status`` и ``tags``, остальные поля задаются именами.
"""

import logging
from collections import Counter
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Set, TypeVar

from catalog.core.errors import ServiceError
from catalog.domains.shared.entities import normalize_tags

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def group_by_category(entities: Iterable[T], field: str = "category") -> Dict[str, List[T]]:
    """Группировка по значению поля, сущности без значения не попадают в результат"""
    groups: Dict[str, List[T]] = {}
    for entity in entities:
        key = getattr(entity, field)
        if _is_blank(key):
            continue
        groups.setdefault(key, []).append(entity)
    return groups


def unique_values(entities: Iterable[Any], field: str = "category") -> Set[str]:
    """Множество непустых значений поля"""
    return {
        value for value in (getattr(entity, field) for entity in entities)
        if not _is_blank(value)
    }


def unique_tags(entities: Iterable[Any]) -> Set[str]:
    return {tag for entity in entities for tag in entity.tags if not _is_blank(tag)}


def count_by_status(entities: Iterable[Any]) -> Dict[Any, int]:
    """Количество сущностей по статусам (без сущностей с пустым статусом)"""
    return dict(Counter(entity.status for entity in entities if entity.status is not None))


def find_by_status(entities: Iterable[T], status: Any) -> List[T]:
    if status is None:
        return []
    return [entity for entity in entities if entity.status == status]


def find_by_all_tags(entities: Iterable[T], tags: Optional[Iterable[str]]) -> List[T]:
    """Сущности, у которых есть все запрошенные теги"""
    wanted = set(normalize_tags(tags))
    if not wanted:
        return []
    return [entity for entity in entities if wanted.issubset(entity.tags)]


def find_by_any_tag(entities: Iterable[T], tags: Optional[Iterable[str]]) -> List[T]:
    """Сущности, у которых есть хотя бы один из запрошенных тегов"""
    wanted = set(normalize_tags(tags))
    if not wanted:
        return []
    return [entity for entity in entities if not wanted.isdisjoint(entity.tags)]


def most_popular_tags(entities: Iterable[Any], limit: int) -> List[str]:
    """Самые частые теги по убыванию частоты.

    При равной частоте раньше идет тег, встретившийся в снимке первым;
    теги одной сущности просматриваются в алфавитном порядке.
    """
    if limit is None or limit <= 0:
        return []
    counts = Counter(
        tag for entity in entities for tag in sorted(entity.tags) if not _is_blank(tag)
    )
    return [tag for tag, _ in counts.most_common(limit)]


def search(
    entities: Iterable[T],
    query: Optional[str],
    fields: Sequence[str] = ("title", "description", "category"),
    include_tags: bool = True
) -> List[T]:
    """Поиск подстроки без учета регистра по текстовым полям и тегам.

    Пустой запрос ничего не находит.
    """
    if _is_blank(query):
        return []
    needle = query.lower()

    def matches(entity: T) -> bool:
        for field in fields:
            value = getattr(entity, field, None)
            if value and needle in value.lower():
                return True
        if include_tags:
            return any(needle in tag for tag in entity.tags)
        return False

    return [entity for entity in entities if matches(entity)]


def archive_inactive(
    entities: Iterable[T],
    inactive: Any,
    archived: Any,
    save: Callable[[T], Any]
) -> int:
    """Перевод всех неактивных сущностей в архив.

    Ошибка сохранения отдельной сущности не прерывает операцию: сущность
    пропускается и не учитывается в результате. Отката нет.
    """
    archived_count = 0
    for entity in find_by_status(entities, inactive):
        previous_status, previous_updated_at = entity.status, entity.updated_at
        entity.status = archived
        try:
            save(entity)
        except ServiceError as e:
            entity.status = previous_status
            entity.updated_at = previous_updated_at
            logger.warning(f"Failed to archive entity with ID {entity.id}: {e}")
            continue
        archived_count += 1
    return archived_count
