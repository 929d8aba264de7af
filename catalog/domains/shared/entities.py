from datetime import datetime, timezone
from typing import Iterable, List, Optional


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def normalize_tag(tag: Optional[str]) -> Optional[str]:
    """Приведение тега к каноническому виду, пустые теги дают None"""
    if tag is None or not tag.strip():
        return None
    return tag.strip().lower()


def normalize_tags(tags: Optional[Iterable[str]]) -> List[str]:
    """Нормализация набора тегов с сохранением порядка и без повторов"""
    result: List[str] = []
    for tag in tags or ():
        normalized = normalize_tag(tag)
        if normalized and normalized not in result:
            result.append(normalized)
    return result
