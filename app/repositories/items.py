import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import delete, func, select as sa_select, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, col, select

from app.core.errors import NotFoundError, StorageError
from app.models.item import Item
from app.ports.repository import ItemRepository
from app.schemas.analytics import Analytics
from app.utils.dates import to_naive_utc
from app.utils.stats import percentile_cont

logger = logging.getLogger(__name__)


class SQLItemRepository(ItemRepository):
    """
    Repositorio de items sobre SQLModel. El engine es compartido por todo
    el proceso; cada operación abre su propia sesión corta.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def create(self, item: Item) -> int:
        item.date = to_naive_utc(item.date)
        try:
            with Session(self.engine) as session:
                session.add(item)
                session.commit()
                session.refresh(item)
        except SQLAlchemyError as exc:
            logger.exception("No se pudo crear el item")
            raise StorageError() from exc

        logger.info("Item %s creado (%s, %s)", item.id, item.type, item.category)
        return item.id

    def get_by_id(self, item_id: int) -> Item:
        try:
            with Session(self.engine) as session:
                item = session.get(Item, item_id)
        except SQLAlchemyError as exc:
            logger.exception("No se pudo leer el item %s", item_id)
            raise StorageError() from exc

        if not item:
            raise NotFoundError()
        return item

    def get_all(
        self,
        from_: Optional[datetime] = None,
        to: Optional[datetime] = None,
    ) -> List[Item]:
        query = select(Item)
        if from_ is not None:
            query = query.where(col(Item.date) >= to_naive_utc(from_))
        if to is not None:
            query = query.where(col(Item.date) <= to_naive_utc(to))
        query = query.order_by(col(Item.date).desc(), col(Item.id).desc())

        try:
            with Session(self.engine) as session:
                return list(session.exec(query).all())
        except SQLAlchemyError as exc:
            logger.exception("No se pudo listar los items")
            raise StorageError() from exc

    def update(self, item: Item) -> None:
        stmt = (
            update(Item)
            .where(col(Item.id) == item.id)
            .values(
                type=item.type,
                amount=item.amount,
                category=item.category,
                date=to_naive_utc(item.date),
                updated_at=item.updated_at,
            )
        )
        try:
            with Session(self.engine) as session:
                result = session.execute(stmt)
                session.commit()
        except SQLAlchemyError as exc:
            logger.exception("No se pudo actualizar el item %s", item.id)
            raise StorageError() from exc

        if result.rowcount == 0:
            raise NotFoundError()
        logger.info("Item %s actualizado", item.id)

    def delete(self, item_id: int) -> None:
        try:
            with Session(self.engine) as session:
                result = session.execute(delete(Item).where(col(Item.id) == item_id))
                session.commit()
        except SQLAlchemyError as exc:
            logger.exception("No se pudo eliminar el item %s", item_id)
            raise StorageError() from exc

        if result.rowcount == 0:
            raise NotFoundError()
        logger.info("Item %s eliminado", item_id)

    def get_analytics(self, from_: datetime, to: datetime) -> Analytics:
        amount = col(Item.amount)
        window = (
            col(Item.date) >= to_naive_utc(from_),
            col(Item.date) <= to_naive_utc(to),
        )
        aggregates = [
            func.coalesce(func.sum(amount), 0),
            func.coalesce(func.avg(amount), 0),
            func.count(col(Item.id)),
        ]
        native_percentiles = self.engine.dialect.name == "postgresql"
        if native_percentiles:
            aggregates += [
                func.coalesce(func.percentile_cont(0.5).within_group(amount), 0),
                func.coalesce(func.percentile_cont(0.9).within_group(amount), 0),
            ]

        try:
            with Session(self.engine) as session:
                row = session.execute(sa_select(*aggregates).where(*window)).one()
                if native_percentiles:
                    median, percentile_90 = row[3], row[4]
                else:
                    # Sin PERCENTILE_CONT: se interpola sobre los montos ordenados
                    amounts = session.execute(
                        sa_select(amount).where(*window).order_by(amount)
                    ).scalars().all()
                    median = percentile_cont(amounts, 0.5)
                    percentile_90 = percentile_cont(amounts, 0.9)
        except SQLAlchemyError as exc:
            logger.exception("No se pudo calcular la analítica")
            raise StorageError() from exc

        return Analytics(
            sum=float(row[0]),
            avg=float(row[1]),
            count=int(row[2]),
            median=float(median),
            percentile_90=float(percentile_90),
        )
