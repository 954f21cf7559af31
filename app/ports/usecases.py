from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from app.models.item import Item
from app.schemas.analytics import Analytics


class ItemUseCases(ABC):
    """Lógica de negocio que consumen los routers."""

    @abstractmethod
    def create_item(self, item: Item) -> Item: ...

    @abstractmethod
    def get_item(self, item_id: int) -> Item: ...

    @abstractmethod
    def get_items(
        self,
        from_: Optional[datetime] = None,
        to: Optional[datetime] = None,
    ) -> List[Item]: ...

    @abstractmethod
    def update_item(self, item: Item) -> Item: ...

    @abstractmethod
    def delete_item(self, item_id: int) -> None: ...

    @abstractmethod
    def get_analytics(self, from_: datetime, to: datetime) -> Analytics: ...
