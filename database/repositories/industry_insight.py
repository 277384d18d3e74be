import logging
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from sqlalchemy import select

from database.models import IndustryInsight
from database.models.base import utcnow
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class IndustryInsightRepository(BaseRepository):
    def get_by_id(self, insight_id) -> Optional[IndustryInsight]:
        return self.db.get(IndustryInsight, insight_id)

    def get_by_industry(self, industry: str) -> Optional[IndustryInsight]:
        stmt = select(IndustryInsight).where(IndustryInsight.industry == industry)
        return self.db.execute(stmt).scalar_one_or_none()

    def list_industries(self) -> List[str]:
        stmt = select(IndustryInsight.industry).order_by(IndustryInsight.industry)
        return list(self.db.execute(stmt).scalars().all())

    def create(
        self,
        industry: str,
        columns: Dict[str, Any],
        refresh_interval: timedelta,
        now: Optional[datetime] = None
    ) -> IndustryInsight:
        now = now or utcnow()
        record = IndustryInsight(
            industry=industry,
            last_updated=now,
            next_update=now + refresh_interval,
            **columns
        )
        self.db.add(record)
        self.db.flush()
        return record

    def upsert(
        self,
        industry: str,
        columns: Dict[str, Any],
        refresh_interval: timedelta,
        now: Optional[datetime] = None
    ) -> IndustryInsight:
        """Insert or update the insight row for industry.

        Keyed on industry, so repeating the call leaves one row.
        """
        now = now or utcnow()
        existing = self.get_by_industry(industry)

        if existing is None:
            return self.create(industry, columns, refresh_interval, now=now)

        for column, value in columns.items():
            setattr(existing, column, value)
        existing.last_updated = now
        existing.next_update = now + refresh_interval

        self.db.flush()
        return existing
