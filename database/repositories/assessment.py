from typing import Any, Dict, List, Optional

from sqlalchemy import select

from database.models import Assessment
from database.repositories.base import BaseRepository


class AssessmentRepository(BaseRepository):
    def create(
        self,
        user_id,
        quiz_score: float,
        questions: List[Dict[str, Any]],
        category: str = "Technical",
        improvement_tip: Optional[str] = None
    ) -> Assessment:
        record = Assessment(
            user_id=user_id,
            quiz_score=quiz_score,
            questions=questions,
            category=category,
            improvement_tip=improvement_tip
        )
        self.db.add(record)
        self.db.flush()
        return record

    def list_for_user(self, user_id) -> List[Assessment]:
        stmt = select(Assessment).where(
            Assessment.user_id == user_id
        ).order_by(Assessment.created_at.desc())
        return list(self.db.execute(stmt).scalars().all())
