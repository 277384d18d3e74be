"""
Request models for API endpoints.
"""

from pydantic import BaseModel, Field
from typing import List, Optional


class ProfileUpdateRequest(BaseModel):
    """Create or update the current user's career profile."""
    industry: Optional[str] = Field(None, min_length=1, description="Industry, e.g. 'tech-software-development'")
    experience: Optional[int] = Field(None, ge=0, le=60, description="Years of experience")
    bio: Optional[str] = Field(None, max_length=2000)
    skills: Optional[List[str]] = Field(None, description="Skill names")
    email: Optional[str] = None
    name: Optional[str] = None


class CoverLetterRequest(BaseModel):
    """Request to generate a cover letter."""
    job_title: str = Field(..., min_length=1)
    company_name: str = Field(..., min_length=1)
    job_description: str = Field(..., min_length=1)


class QuizQuestionIn(BaseModel):
    question: str
    options: List[str] = Field(default_factory=list)
    correctAnswer: str
    explanation: Optional[str] = None


class QuizResultRequest(BaseModel):
    """Answers submitted for a generated quiz."""
    questions: List[QuizQuestionIn] = Field(..., min_length=1)
    answers: List[Optional[str]] = Field(default_factory=list)
    score: float = Field(..., ge=0, le=100, description="Percentage of correct answers")
