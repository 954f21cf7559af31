"""Pytest configuration and fixtures."""

import os

# Antes de importar la app: SQLite en memoria, sin Postgres ni Docker
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from datetime import datetime, timedelta  # noqa: E402
from typing import List, Optional  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import create_engine  # noqa: E402

from app.api.deps import get_item_repository, get_item_service  # noqa: E402
from app.core.errors import NotFoundError  # noqa: E402
from app.database import create_db_and_tables  # noqa: E402
from app.main import app  # noqa: E402
from app.models.item import Item  # noqa: E402
from app.ports.repository import ItemRepository  # noqa: E402
from app.repositories.items import SQLItemRepository  # noqa: E402
from app.schemas.analytics import Analytics  # noqa: E402
from app.utils.stats import percentile_cont  # noqa: E402


def clone_item(item: Item) -> Item:
    return Item(
        id=item.id,
        type=item.type,
        amount=item.amount,
        category=item.category,
        date=item.date,
        created_at=item.created_at,
        updated_at=item.updated_at,
    )


class InMemoryItemRepository(ItemRepository):
    """Repositorio en memoria para probar el servicio sin base de datos."""

    def __init__(self):
        self.items = {}
        self.next_id = 1

    def create(self, item: Item) -> int:
        item.id = self.next_id
        self.next_id += 1
        self.items[item.id] = clone_item(item)
        return item.id

    def get_by_id(self, item_id: int) -> Item:
        if item_id not in self.items:
            raise NotFoundError()
        return clone_item(self.items[item_id])

    def get_all(self, from_: Optional[datetime] = None, to: Optional[datetime] = None) -> List[Item]:
        items = [
            item for item in self.items.values()
            if (from_ is None or item.date >= from_) and (to is None or item.date <= to)
        ]
        return sorted(items, key=lambda item: item.date, reverse=True)

    def update(self, item: Item) -> None:
        stored = self.items.get(item.id)
        if stored is None:
            raise NotFoundError()
        stored.type = item.type
        stored.amount = item.amount
        stored.category = item.category
        stored.date = item.date
        stored.updated_at = item.updated_at

    def delete(self, item_id: int) -> None:
        if self.items.pop(item_id, None) is None:
            raise NotFoundError()

    def get_analytics(self, from_: datetime, to: datetime) -> Analytics:
        amounts = sorted(item.amount for item in self.get_all(from_, to))
        if not amounts:
            return Analytics()
        return Analytics(
            sum=sum(amounts),
            avg=sum(amounts) / len(amounts),
            count=len(amounts),
            median=percentile_cont(amounts, 0.5),
            percentile_90=percentile_cont(amounts, 0.9),
        )


class TickingClock:
    """Reloj que avanza un segundo en cada llamada."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, 12, 0, 0)):
        self.current = start

    def __call__(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_db_and_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def repo(engine):
    return SQLItemRepository(engine)


@pytest.fixture
def memory_repo():
    return InMemoryItemRepository()


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def client(repo):
    """Cliente HTTP sobre la app real con el repositorio SQLite de prueba."""
    app.dependency_overrides[get_item_repository] = lambda: repo
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def client_with_service():
    """Devuelve una función que monta la app sobre un servicio falso."""

    def _build(service):
        app.dependency_overrides[get_item_service] = lambda: service
        return TestClient(app)

    yield _build
    app.dependency_overrides.clear()


@pytest.fixture
def make_item():
    def _make(**overrides) -> Item:
        data = {
            "type": "income",
            "amount": 1000.50,
            "category": "Salary",
            "date": datetime(2024, 1, 15, 10, 30, 0),
        }
        data.update(overrides)
        return Item(**data)

    return _make
