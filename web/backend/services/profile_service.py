"""
Profile service - onboarding and profile updates.
"""

import logging

from core.config_loader import AppConfig
from database.database import Database
from database.models import User
from database.repository import CareerRepository
from database.retry import run_with_reconnect
from ..models.requests import ProfileUpdateRequest

logger = logging.getLogger(__name__)


class ProfileService:
    def __init__(self, database: Database, config: AppConfig):
        self.database = database
        self.config = config

    def update_profile(self, clerk_user_id: str, update: ProfileUpdateRequest) -> User:
        """Create the user's profile row if needed, then apply the update."""
        return run_with_reconnect(
            self.database,
            lambda session: CareerRepository(session).users.upsert_profile(
                clerk_user_id,
                industry=update.industry,
                experience=update.experience,
                bio=update.bio,
                skills=update.skills,
                email=update.email,
                name=update.name,
            ),
            self.config.persistence,
            description="Update profile"
        )
