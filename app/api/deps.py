from fastapi import Depends

from app.database import engine
from app.ports.repository import ItemRepository
from app.ports.usecases import ItemUseCases
from app.repositories.items import SQLItemRepository
from app.services.items import ItemService


def get_item_repository() -> ItemRepository:
    return SQLItemRepository(engine)


def get_item_service(repo: ItemRepository = Depends(get_item_repository)) -> ItemUseCases:
    return ItemService(repo)
