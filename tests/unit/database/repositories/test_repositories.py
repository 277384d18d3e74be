"""
Unit tests for the career repositories against in-memory SQLite.
"""

import uuid
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import func, select

from database.models import Assessment, CoverLetter, IndustryInsight, User
from database.uow import career_uow

pytestmark = pytest.mark.db

WEEK = timedelta(days=7)

COLUMNS = {
    "salary_ranges": [{"role": "Engineer", "min": 1, "max": 3, "median": 2, "location": "US"}],
    "growth_rate": 5.0,
    "demand_level": "High",
    "top_skills": ["Python"],
    "market_outlook": "Positive",
    "key_trends": ["AI"],
    "recommended_skills": ["Go"],
}


def _count(database, model):
    with career_uow(database) as repo:
        return repo.db.execute(select(func.count()).select_from(model)).scalar_one()


class TestIndustryInsightRepository:

    def test_upsert_twice_leaves_one_row(self, database):
        with career_uow(database) as repo:
            repo.insights.upsert("tech", COLUMNS, WEEK)
        with career_uow(database) as repo:
            repo.insights.upsert("tech", dict(COLUMNS, growth_rate=9.0, demand_level="Low"), WEEK)

        assert _count(database, IndustryInsight) == 1
        with career_uow(database) as repo:
            insight = repo.insights.get_by_industry("tech")
            assert insight.growth_rate == 9.0
            assert insight.demand_level == "Low"

    def test_upsert_sets_next_update_from_interval(self, database):
        now = datetime(2026, 1, 1, tzinfo=timezone.utc)
        with career_uow(database) as repo:
            insight = repo.insights.upsert("tech", COLUMNS, WEEK, now=now)

            assert insight.last_updated == now
            assert insight.next_update == now + WEEK

    def test_create_with_no_columns_uses_model_defaults(self, database):
        with career_uow(database) as repo:
            insight = repo.insights.create("law", {}, WEEK)

        assert insight.demand_level == "Medium"
        assert insight.market_outlook == "Neutral"
        assert insight.top_skills == []

    def test_list_industries_sorted(self, database):
        with career_uow(database) as repo:
            repo.insights.create("tech", COLUMNS, WEEK)
            repo.insights.create("finance", COLUMNS, WEEK)

        with career_uow(database) as repo:
            assert repo.insights.list_industries() == ["finance", "tech"]


class TestUserRepository:

    def test_upsert_profile_creates_then_updates(self, database):
        with career_uow(database) as repo:
            repo.users.upsert_profile("clerk_1", industry="tech", experience=3, skills=["Python"])
        with career_uow(database) as repo:
            repo.users.upsert_profile("clerk_1", bio="Backend dev")

        assert _count(database, User) == 1
        with career_uow(database) as repo:
            user = repo.users.get_by_clerk_id("clerk_1")
            assert user.industry == "tech"
            assert user.experience == 3
            assert user.skills == ["Python"]
            assert user.bio == "Backend dev"

    def test_industry_change_unlinks_insight(self, database):
        with career_uow(database) as repo:
            insight = repo.insights.create("tech", COLUMNS, WEEK)
            user = repo.users.upsert_profile("clerk_1", industry="tech")
            repo.users.link_industry_insight(user, insight.id)

        with career_uow(database) as repo:
            user = repo.users.upsert_profile("clerk_1", industry="tech")
            assert user.industry_insight_id is not None

        with career_uow(database) as repo:
            user = repo.users.upsert_profile("clerk_1", industry="finance")
            assert user.industry_insight_id is None

    def test_unknown_user(self, database):
        with career_uow(database) as repo:
            assert repo.users.get_by_clerk_id("nobody") is None


class TestCoverLetterRepository:

    def _user(self, database, clerk_user_id):
        with career_uow(database) as repo:
            return repo.users.upsert_profile(clerk_user_id)

    def test_get_and_delete_scoped_to_owner(self, database):
        owner = self._user(database, "owner")
        other = self._user(database, "other")

        with career_uow(database) as repo:
            letter = repo.cover_letters.create(owner.id, "Dear...", "Engineer", "Acme", "Build", "completed")

        with career_uow(database) as repo:
            assert repo.cover_letters.get_for_user(letter.id, other.id) is None
            assert repo.cover_letters.get_for_user(letter.id, owner.id).company_name == "Acme"
            assert repo.cover_letters.delete_for_user(letter.id, other.id) == 0

        with career_uow(database) as repo:
            assert repo.cover_letters.delete_for_user(letter.id, owner.id) == 1

        assert _count(database, CoverLetter) == 0

    def test_list_newest_first(self, database):
        owner = self._user(database, "owner")
        base = datetime(2026, 1, 1, tzinfo=timezone.utc)

        with career_uow(database) as repo:
            older = repo.cover_letters.create(owner.id, "a", "Engineer", "Old Co", None, "completed")
            newer = repo.cover_letters.create(owner.id, "b", "Engineer", "New Co", None, "fallback")
            older.created_at = base
            newer.created_at = base + timedelta(hours=1)

        with career_uow(database) as repo:
            letters = repo.cover_letters.list_for_user(owner.id)
            assert [l.company_name for l in letters] == ["New Co", "Old Co"]

    def test_delete_missing_letter(self, database):
        owner = self._user(database, "owner")
        with career_uow(database) as repo:
            assert repo.cover_letters.delete_for_user(uuid.uuid4(), owner.id) == 0


class TestAssessmentRepository:

    def test_create_and_list(self, database):
        with career_uow(database) as repo:
            user = repo.users.upsert_profile("clerk_1")
            repo.assessments.create(
                user.id,
                quiz_score=50.0,
                questions=[{"question": "Q", "isCorrect": False}],
                improvement_tip="Study more."
            )

        with career_uow(database) as repo:
            assessments = repo.assessments.list_for_user(user.id)
            assert len(assessments) == 1
            assert assessments[0].category == "Technical"
            assert assessments[0].questions == [{"question": "Q", "isCorrect": False}]

        assert _count(database, Assessment) == 1
