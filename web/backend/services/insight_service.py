"""
Insight service - resolves and lazily creates a user's industry insight.
"""

import logging
from datetime import timedelta

from core.config_loader import AppConfig
from core.generation import TolerantGenerator
from core.generation.insights import generate_ai_insights, to_insight_columns
from database.database import Database
from database.models import IndustryInsight, User
from database.repository import CareerRepository
from database.retry import run_with_reconnect
from database.uow import career_uow
from ..exceptions import UserNotFoundException

logger = logging.getLogger(__name__)


class InsightService:
    """Service for industry insights shown on the dashboard."""

    def __init__(self, database: Database, generator: TolerantGenerator, config: AppConfig):
        self.database = database
        self.generator = generator
        self.config = config

    def _link(self, clerk_user_id: str, industry: str, insight_id=None, columns=None) -> IndustryInsight:
        refresh_interval = timedelta(days=self.config.insights.refresh_interval_days)

        def _operation(session) -> IndustryInsight:
            repo = CareerRepository(session)
            insight = repo.insights.get_by_id(insight_id) if insight_id else None
            if insight is None:
                insight = repo.insights.get_by_industry(industry)
            if insight is None:
                insight = repo.insights.create(industry, columns or {}, refresh_interval)

            user = repo.users.get_by_clerk_id(clerk_user_id)
            if user is None:
                raise UserNotFoundException("User not found")
            repo.users.link_industry_insight(user, insight.id)
            return insight

        return run_with_reconnect(
            self.database, _operation, self.config.persistence,
            description=f"Link {industry} insights"
        )

    def get_industry_insights(self, user: User) -> IndustryInsight:
        """
        Return the user's insight, creating and linking one on first use.

        The slow model call happens outside any transaction. A model or
        parse failure still yields an insight (built from defaults).
        """
        if user.industry_insight_id:
            with career_uow(self.database) as repo:
                insight = repo.insights.get_by_id(user.industry_insight_id)
            if insight is not None:
                return insight

        industry = user.industry or self.config.insights.default_industry

        with career_uow(self.database) as repo:
            existing = repo.insights.get_by_industry(industry)

        if existing is not None:
            logger.info(f"Linking user {user.clerk_user_id} to existing '{industry}' insight")
            return self._link(user.clerk_user_id, industry, insight_id=existing.id)

        outcome = generate_ai_insights(self.generator, industry)
        return self._link(user.clerk_user_id, industry, columns=to_insight_columns(outcome.result))
