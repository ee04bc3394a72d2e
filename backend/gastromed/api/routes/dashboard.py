"""Dashboard Routes: headline counters for the front page."""

from fastapi import APIRouter, Depends

from gastromed.api.dependencies import get_stats_repository, require
from gastromed.core.permissions import Capability
from gastromed.core.repository_protocols import StatsRepository
from gastromed.schemas.dashboard import DashboardStats

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get(
    "/stats", response_model=DashboardStats,
    dependencies=[Depends(require(Capability.READ))],
)
async def dashboard_stats(stats: StatsRepository = Depends(get_stats_repository)):
    return DashboardStats(**await stats.get_dashboard_stats())
