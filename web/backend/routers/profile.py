"""
Profile endpoints - onboarding and the current user's profile.
"""

import logging
from fastapi import APIRouter, Depends

from core.config_loader import AppConfig
from database.database import Database
from database.models import User
from ..dependencies import get_app_config, get_clerk_user_id, get_current_user, get_database
from ..models.requests import ProfileUpdateRequest
from ..models.responses import ProfileResponse
from ..services.profile_service import ProfileService
from .serializers import to_user_profile

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/profile", tags=["profile"])


@router.get("", response_model=ProfileResponse)
def get_profile(user: User = Depends(get_current_user)):
    """Get the current user's career profile."""
    return ProfileResponse(success=True, profile=to_user_profile(user))


@router.put("", response_model=ProfileResponse)
def update_profile(
    update: ProfileUpdateRequest,
    clerk_user_id: str = Depends(get_clerk_user_id),
    database: Database = Depends(get_database),
    config: AppConfig = Depends(get_app_config)
):
    """
    Create or update the current user's career profile.

    Changing industry unlinks the user's insight; the next dashboard load
    links the insight of the new industry.
    """
    user = ProfileService(database, config).update_profile(clerk_user_id, update)
    return ProfileResponse(success=True, profile=to_user_profile(user))
