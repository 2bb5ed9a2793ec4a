# users_api/main.py
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from users_api.api import api_router
from users_api.api.error_handlers import register_error_handlers
from users_api.api.middleware import request_deadline
from users_api.data.database import create_engine, create_session_factory, create_tables
from users_api.utils import settings
from users_api.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Start: silnik + tabela users. Blad tutaj konczy proces."""
    setup_logging()
    engine = create_engine(settings.DATABASE_URL)
    logger.info("Initializing database...")
    try:
        await create_tables(engine)
    except Exception as e:
        logger.error(f"Failed to create tables: {e}")
        await engine.dispose()
        raise
    logger.info("Table 'users' exists or was created successfully")

    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    try:
        yield
    finally:
        await engine.dispose()
        logger.info("Database connections closed")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Users Service",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.middleware("http")(request_deadline)
    register_error_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()


def run() -> None:
    setup_logging()
    logger.info(f"Server running on port {settings.PORT}")
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        timeout_keep_alive=int(settings.TRANSPORT_TIMEOUT_SECONDS),
    )


if __name__ == "__main__":
    run()
