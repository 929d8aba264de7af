from catalog.domains.items.entities import Item, ItemStatus
from catalog.domains.items.schemas import (
    ItemBase, ItemCreate, ItemUpdate, ItemResponse, ItemStatsResponse
)
from catalog.domains.items.services import ItemService, item_validator

__all__ = [
    "Item", "ItemStatus",
    "ItemBase", "ItemCreate", "ItemUpdate", "ItemResponse", "ItemStatsResponse",
    "ItemService", "item_validator"
]
