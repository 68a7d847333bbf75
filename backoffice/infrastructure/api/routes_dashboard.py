"""Dashboard endpoint."""

from fastapi import APIRouter, Depends

from backoffice.application.use_cases.dashboard import LoadDashboardUseCase
from backoffice.infrastructure.api.dependencies import get_dashboard_uc

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard")
async def dashboard(uc: LoadDashboardUseCase = Depends(get_dashboard_uc)):
    stats, notice = await uc.execute()
    return {
        "success": notice is None,
        "data": stats,
        "message": notice.message if notice else None,
    }
