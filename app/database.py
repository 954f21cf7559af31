import logging

from sqlmodel import SQLModel, create_engine

from app.core.config import settings

logger = logging.getLogger(__name__)

# Conexión única del proceso; se inyecta en el repositorio
engine = create_engine(settings.database_url, echo=settings.sql_echo, pool_pre_ping=True)


def create_db_and_tables(bind=None):
    from app.models.item import Item  # noqa: F401  registra la tabla en el metadata
    SQLModel.metadata.create_all(bind or engine)
    logger.info("Esquema de base de datos listo")
