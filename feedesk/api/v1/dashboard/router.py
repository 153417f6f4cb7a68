from fastapi import APIRouter, Depends

from feedesk.auth.dependencies import get_current_user
from feedesk.core.store import FeeStore
from feedesk.db.session import get_store

from .schemas import DashboardStats
from . import service

router = APIRouter(
    prefix="/api/v1/dashboard",
    tags=["dashboard"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=DashboardStats)
async def get_dashboard(store: FeeStore = Depends(get_store)) -> DashboardStats:
    return await service.get_dashboard_stats(store)
