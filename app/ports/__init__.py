from app.ports.repository import ItemRepository
from app.ports.usecases import ItemUseCases

__all__ = ["ItemRepository", "ItemUseCases"]
