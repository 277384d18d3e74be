from database.repositories.base import BaseRepository
from database.repositories.user import UserRepository
from database.repositories.industry_insight import IndustryInsightRepository
from database.repositories.cover_letter import CoverLetterRepository
from database.repositories.assessment import AssessmentRepository

__all__ = [
    'BaseRepository',
    'UserRepository',
    'IndustryInsightRepository',
    'CoverLetterRepository',
    'AssessmentRepository',
]
