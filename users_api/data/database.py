# users_api/data/database.py
from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

from users_api.utils.settings import DATABASE_URL

Base = declarative_base()


def create_engine(database_url: str = DATABASE_URL) -> AsyncEngine:
    return create_async_engine(database_url, pool_pre_ping=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def create_tables(engine: AsyncEngine) -> None:
    # modele musza byc zaimportowane zanim create_all zobaczy metadata
    from users_api.data.models import UserModel  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def ping(session_factory: async_sessionmaker[AsyncSession]) -> None:
    async with session_factory() as db:
        await db.execute(text("SELECT 1"))


def get_session_factory(request: Request) -> async_sessionmaker[AsyncSession]:
    """Dependency FastAPI - wspolny uchwyt do bazy ustawiany w lifespan."""
    return request.app.state.session_factory
