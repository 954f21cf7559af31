"""
Contrato de persistencia para items.

Cualquier backend (PostgreSQL, SQLite, memoria para tests) implementa
estas operaciones. Los errores de la base se reportan como StorageError
y los ids inexistentes como NotFoundError.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from app.models.item import Item
from app.schemas.analytics import Analytics


class ItemRepository(ABC):

    @abstractmethod
    def create(self, item: Item) -> int:
        """Inserta el item, le asigna el id generado y lo devuelve."""

    @abstractmethod
    def get_by_id(self, item_id: int) -> Item:
        """
        Raises:
            NotFoundError: si no existe un item con ese id
        """

    @abstractmethod
    def get_all(
        self,
        from_: Optional[datetime] = None,
        to: Optional[datetime] = None,
    ) -> List[Item]:
        """
        Lista items ordenados por fecha descendente. Cada límite es
        opcional e inclusivo.
        """

    @abstractmethod
    def update(self, item: Item) -> None:
        """
        Reemplaza type, amount, category, date y updated_at del item con
        el mismo id.

        Raises:
            NotFoundError: si ninguna fila fue afectada
        """

    @abstractmethod
    def delete(self, item_id: int) -> None:
        """
        Raises:
            NotFoundError: si ninguna fila fue afectada
        """

    @abstractmethod
    def get_analytics(self, from_: datetime, to: datetime) -> Analytics:
        """Suma, promedio, conteo, mediana y percentil 90 en [from_, to]."""
