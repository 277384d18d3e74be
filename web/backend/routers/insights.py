"""
Insight endpoints - raw industry insight and the dashboard view.
"""

import logging
from fastapi import APIRouter, Depends

from core.config_loader import AppConfig
from core.generation import TolerantGenerator
from database.database import Database
from database.models import User
from ..dependencies import get_app_config, get_current_user, get_database, get_generator
from ..models.responses import DashboardResponse, IndustryInsightResponse
from ..services.dashboard_service import build_dashboard_view
from ..services.insight_service import InsightService
from .serializers import to_insight_detail

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["insights"])


def get_insight_service(
    database: Database = Depends(get_database),
    generator: TolerantGenerator = Depends(get_generator),
    config: AppConfig = Depends(get_app_config)
) -> InsightService:
    return InsightService(database, generator, config)


@router.get("/insights", response_model=IndustryInsightResponse)
def get_industry_insights(
    user: User = Depends(get_current_user),
    service: InsightService = Depends(get_insight_service)
):
    """
    Get the insight for the current user's industry.

    Generated and stored on first request for an industry.
    """
    insight = service.get_industry_insights(user)
    return IndustryInsightResponse(success=True, insight=to_insight_detail(insight))


@router.get("/dashboard", response_model=DashboardResponse)
def get_dashboard(
    user: User = Depends(get_current_user),
    service: InsightService = Depends(get_insight_service)
):
    """Get display-ready dashboard cards for the current user's industry."""
    insight = service.get_industry_insights(user)
    return DashboardResponse(success=True, dashboard=build_dashboard_view(insight))
