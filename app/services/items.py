from datetime import datetime
from typing import Callable, List, Optional

from app.models.item import Item, validate_item
from app.ports.repository import ItemRepository
from app.ports.usecases import ItemUseCases
from app.schemas.analytics import Analytics
from app.utils.dates import utcnow


class ItemService(ItemUseCases):
    """
    Valida y sella las fechas de auditoría antes de delegar al repositorio.
    Los errores del repositorio (NotFoundError, StorageError) se propagan tal cual.
    """

    def __init__(self, repo: ItemRepository, clock: Callable[[], datetime] = utcnow):
        self.repo = repo
        self.clock = clock

    def create_item(self, item: Item) -> Item:
        validate_item(item)
        now = self.clock()
        item.created_at = now
        item.updated_at = now
        self.repo.create(item)
        return item

    def get_item(self, item_id: int) -> Item:
        return self.repo.get_by_id(item_id)

    def get_items(
        self,
        from_: Optional[datetime] = None,
        to: Optional[datetime] = None,
    ) -> List[Item]:
        return self.repo.get_all(from_, to)

    def update_item(self, item: Item) -> Item:
        validate_item(item)
        item.updated_at = self.clock()
        self.repo.update(item)
        # created_at no viaja en el body: se devuelve la fila guardada
        return self.repo.get_by_id(item.id)

    def delete_item(self, item_id: int) -> None:
        self.repo.delete(item_id)

    def get_analytics(self, from_: datetime, to: datetime) -> Analytics:
        return self.repo.get_analytics(from_, to)
