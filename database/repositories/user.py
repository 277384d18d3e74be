import logging
from typing import List, Optional

from sqlalchemy import select

from database.models import User
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository):
    def get_by_clerk_id(self, clerk_user_id: str) -> Optional[User]:
        stmt = select(User).where(User.clerk_user_id == clerk_user_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def upsert_profile(
        self,
        clerk_user_id: str,
        industry: Optional[str] = None,
        experience: Optional[int] = None,
        bio: Optional[str] = None,
        skills: Optional[List[str]] = None,
        email: Optional[str] = None,
        name: Optional[str] = None
    ) -> User:
        user = self.get_by_clerk_id(clerk_user_id)

        if user is None:
            user = User(clerk_user_id=clerk_user_id, skills=[])
            self.db.add(user)
            logger.info(f"Creating profile for user {clerk_user_id}")

        if industry is not None and industry != user.industry:
            # Insight belongs to the old industry; relinked on next dashboard load
            user.industry_insight_id = None
            user.industry = industry
        if experience is not None:
            user.experience = experience
        if bio is not None:
            user.bio = bio
        if skills is not None:
            user.skills = list(skills)
        if email is not None:
            user.email = email
        if name is not None:
            user.name = name

        self.db.flush()
        return user

    def link_industry_insight(self, user: User, insight_id) -> User:
        user.industry_insight_id = insight_id
        self.db.flush()
        return user
