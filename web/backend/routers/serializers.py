"""
ORM -> response model conversion shared by the routers.
"""

from database.models import Assessment, CoverLetter, IndustryInsight, User
from ..models.responses import (
    AssessmentDetail,
    CoverLetterDetail,
    CoverLetterSummary,
    IndustryInsightDetail,
    SalaryRange,
    UserProfile,
)
from ..utils import safe_datetime_iso, safe_float, safe_str


def to_user_profile(user: User) -> UserProfile:
    return UserProfile(
        user_id=str(user.id),
        clerk_user_id=user.clerk_user_id,
        email=user.email,
        name=user.name,
        industry=user.industry,
        experience=user.experience,
        bio=user.bio,
        skills=list(user.skills or []),
    )


def to_cover_letter_summary(letter: CoverLetter) -> CoverLetterSummary:
    return CoverLetterSummary(
        id=str(letter.id),
        job_title=letter.job_title,
        company_name=letter.company_name,
        status=letter.status,
        created_at=safe_datetime_iso(letter.created_at),
    )


def to_cover_letter_detail(letter: CoverLetter) -> CoverLetterDetail:
    return CoverLetterDetail(
        id=str(letter.id),
        job_title=letter.job_title,
        company_name=letter.company_name,
        status=letter.status,
        content=letter.content,
        job_description=letter.job_description,
        created_at=safe_datetime_iso(letter.created_at),
        updated_at=safe_datetime_iso(letter.updated_at),
    )


def to_salary_range(row: dict) -> SalaryRange:
    return SalaryRange(
        role=row.get("role"),
        min=safe_float(row.get("min"), None),
        max=safe_float(row.get("max"), None),
        median=safe_float(row.get("median"), None),
        location=row.get("location"),
    )


def to_insight_detail(insight: IndustryInsight) -> IndustryInsightDetail:
    return IndustryInsightDetail(
        industry=insight.industry,
        salary_ranges=[to_salary_range(r) for r in (insight.salary_ranges or []) if isinstance(r, dict)],
        growth_rate=safe_float(insight.growth_rate),
        demand_level=safe_str(insight.demand_level, "Medium"),
        top_skills=list(insight.top_skills or []),
        market_outlook=safe_str(insight.market_outlook, "Neutral"),
        key_trends=list(insight.key_trends or []),
        recommended_skills=list(insight.recommended_skills or []),
        last_updated=safe_datetime_iso(insight.last_updated),
        next_update=safe_datetime_iso(insight.next_update),
    )


def to_assessment_detail(assessment: Assessment) -> AssessmentDetail:
    return AssessmentDetail(
        id=str(assessment.id),
        quiz_score=safe_float(assessment.quiz_score),
        category=assessment.category,
        questions=list(assessment.questions or []),
        improvement_tip=assessment.improvement_tip,
        created_at=safe_datetime_iso(assessment.created_at),
    )
