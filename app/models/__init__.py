from app.models.enums import ItemType
from app.models.item import Item, validate_item

__all__ = ["Item", "ItemType", "validate_item"]
