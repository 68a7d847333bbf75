"""Health check endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.adapters.persistence.database import get_session
from backoffice.application.ports.record_store import RecordStore
from backoffice.config import settings
from backoffice.infrastructure.api.dependencies import get_record_store

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(
    session: AsyncSession = Depends(get_session),
    store: RecordStore = Depends(get_record_store),
):
    """Report the storage mode and local database connectivity."""
    try:
        await session.execute(text("SELECT 1"))
        db_status = "connected"
    except Exception as e:
        db_status = f"error: {e}"

    return {
        "status": "ok" if db_status == "connected" else "degraded",
        "storage": store.mode,
        "database": db_status,
        "service": settings.app_name,
        "version": settings.app_version,
    }
