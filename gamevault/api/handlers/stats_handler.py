"""
Stats Handler

    GET /api/stats/me       caller's summary (cached 10 s)
    GET /api/stats/global   site-wide summary (cached 10 min)
"""

from fastapi import APIRouter, Depends

from gamevault.api.dependencies.auth import CurrentUser
from gamevault.api.dependencies.services import get_stats_service
from gamevault.shared.schemas.stats import GlobalStatsResponse, UserStatsResponse
from gamevault.shared.services.stats_service import StatsService


router = APIRouter()


@router.get("/me", response_model=UserStatsResponse)
async def my_stats(
    current_user: CurrentUser,
    service: StatsService = Depends(get_stats_service),
):
    return await service.user_stats(current_user.user_id)


@router.get("/global", response_model=GlobalStatsResponse)
async def global_stats(
    service: StatsService = Depends(get_stats_service),
):
    return await service.global_stats()
