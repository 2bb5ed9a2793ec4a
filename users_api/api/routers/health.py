# users_api/api/routers/health.py
import asyncio

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from users_api.data.database import get_session_factory, ping
from users_api.utils import settings
from users_api.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health():
    """Liveness - proces dziala."""
    return {"status": "ok"}


@router.get("/ready")
async def ready(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
):
    """Readiness - baza odpowiada w czasie deadline'u requestu."""
    try:
        await asyncio.wait_for(
            ping(session_factory), timeout=settings.REQUEST_TIMEOUT_SECONDS
        )
    except (asyncio.TimeoutError, SQLAlchemyError, OSError) as e:
        logger.error(f"Readiness check failed: {e!r}")
        return JSONResponse(status_code=503, content={"status": "not_ready"})
    return {"status": "ready"}
