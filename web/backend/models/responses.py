"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict, Any


class UserProfile(BaseModel):
    user_id: str
    clerk_user_id: str
    email: Optional[str] = None
    name: Optional[str] = None
    industry: Optional[str] = None
    experience: Optional[int] = None
    bio: Optional[str] = None
    skills: List[str] = Field(default_factory=list)


class ProfileResponse(BaseModel):
    success: bool
    profile: UserProfile


class CoverLetterSummary(BaseModel):
    id: str
    job_title: str
    company_name: str
    status: str
    created_at: Optional[str]


class CoverLetterDetail(CoverLetterSummary):
    content: str
    job_description: Optional[str]
    updated_at: Optional[str]


class CoverLetterResponse(BaseModel):
    success: bool
    cover_letter: CoverLetterDetail


class CoverLetterListResponse(BaseModel):
    success: bool
    count: int
    cover_letters: List[CoverLetterSummary]


class DeleteResponse(BaseModel):
    success: bool
    deleted: int


class SalaryRange(BaseModel):
    """One salary row as generated; figures are in thousands."""
    role: Optional[Any] = None
    min: Optional[float] = None
    max: Optional[float] = None
    median: Optional[float] = None
    location: Optional[Any] = None


class IndustryInsightDetail(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "industry": "tech-software-development",
                "salary_ranges": [
                    {"role": "Software Engineer", "min": 80, "max": 150, "median": 120, "location": "US"}
                ],
                "growth_rate": 7.5,
                "demand_level": "High",
                "top_skills": ["Python", "Cloud"],
                "market_outlook": "Positive",
                "key_trends": ["AI adoption"],
                "recommended_skills": ["MLOps"],
                "last_updated": "2026-10-11T00:00:00+00:00",
                "next_update": "2026-10-18T00:00:00+00:00"
            }
        }
    )

    industry: str
    salary_ranges: List[SalaryRange] = Field(default_factory=list)
    growth_rate: float
    demand_level: str
    top_skills: List[str] = Field(default_factory=list)
    market_outlook: str
    key_trends: List[str] = Field(default_factory=list)
    recommended_skills: List[str] = Field(default_factory=list)
    last_updated: Optional[str]
    next_update: Optional[str]


class IndustryInsightResponse(BaseModel):
    success: bool
    insight: IndustryInsightDetail


class SalaryBar(BaseModel):
    role: str
    min: float
    median: float
    max: float


class DashboardView(BaseModel):
    """Display-ready dashboard cards; every field has a value."""
    industry: Optional[str]
    market_outlook: str
    next_update_days: int
    growth_rate: float = Field(ge=0, le=100)
    growth_label: str
    demand_level: str
    demand_bar_percent: int = Field(ge=0, le=100)
    demand_color: str
    top_skills: List[str]
    salary_data: List[SalaryBar]
    key_trends: List[str]
    recommended_skills: List[str]
    last_updated: Optional[str]


class DashboardResponse(BaseModel):
    success: bool
    dashboard: DashboardView


class QuizQuestion(BaseModel):
    question: str
    options: List[str]
    correctAnswer: str
    explanation: Optional[str] = None


class QuizResponse(BaseModel):
    success: bool
    status: str = Field(description="'completed' or 'fallback'")
    count: int
    questions: List[QuizQuestion]


class AssessmentDetail(BaseModel):
    id: str
    quiz_score: float
    category: str
    questions: List[Dict[str, Any]]
    improvement_tip: Optional[str]
    created_at: Optional[str]


class AssessmentResponse(BaseModel):
    success: bool
    assessment: AssessmentDetail


class AssessmentListResponse(BaseModel):
    success: bool
    count: int
    assessments: List[AssessmentDetail]
