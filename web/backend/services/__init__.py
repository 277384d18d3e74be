"""Business logic services."""

from .profile_service import ProfileService
from .cover_letter_service import CoverLetterService
from .insight_service import InsightService
from .interview_service import InterviewService
from .dashboard_service import build_dashboard_view
