import logging
from typing import List, Optional

from sqlalchemy import select, delete

from database.models import CoverLetter
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class CoverLetterRepository(BaseRepository):
    def create(
        self,
        user_id,
        content: str,
        job_title: str,
        company_name: str,
        job_description: Optional[str],
        status: str
    ) -> CoverLetter:
        record = CoverLetter(
            user_id=user_id,
            content=content,
            job_title=job_title,
            company_name=company_name,
            job_description=job_description,
            status=status
        )
        self.db.add(record)
        self.db.flush()
        return record

    def list_for_user(self, user_id) -> List[CoverLetter]:
        stmt = select(CoverLetter).where(
            CoverLetter.user_id == user_id
        ).order_by(CoverLetter.created_at.desc())
        return list(self.db.execute(stmt).scalars().all())

    def get_for_user(self, letter_id, user_id) -> Optional[CoverLetter]:
        stmt = select(CoverLetter).where(
            CoverLetter.id == letter_id,
            CoverLetter.user_id == user_id
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def delete_for_user(self, letter_id, user_id) -> int:
        """Delete a letter owned by user_id; returns the number of rows removed."""
        result = self.db.execute(
            delete(CoverLetter).where(
                CoverLetter.id == letter_id,
                CoverLetter.user_id == user_id
            )
        )
        return result.rowcount or 0
