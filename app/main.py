import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.api import analytics, items
from app.api.errors import register_exception_handlers
from app.core.config import settings
from app.core.logging_config import configure_logging
from app.database import create_db_and_tables, engine

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_db_and_tables()
    logger.info("Servidor listo en el puerto %s", settings.server_port)
    yield
    engine.dispose()


def create_app(static_dir: str = settings.static_dir) -> FastAPI:
    app = FastAPI(title="SalesTracker", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(items.router)
    app.include_router(analytics.router)

    # Todo lo que no sea /api se sirve como archivo estático
    if static_dir and os.path.isdir(static_dir):
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.warning("Directorio estático %s no encontrado, no se servirá", static_dir)

    return app


app = create_app()


def run():
    import uvicorn
    uvicorn.run(app, host=settings.server_host, port=settings.server_port)


if __name__ == "__main__":
    run()
