"""
Interview endpoints - practice quizzes and assessment history.
"""

import logging
from fastapi import APIRouter, Depends

from core.config_loader import AppConfig
from core.generation import TolerantGenerator
from database.database import Database
from database.models import User
from ..dependencies import get_app_config, get_current_user, get_database, get_generator
from ..models.requests import QuizResultRequest
from ..models.responses import AssessmentListResponse, AssessmentResponse, QuizResponse
from ..services.interview_service import InterviewService
from .serializers import to_assessment_detail

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/interview", tags=["interview"])


def get_interview_service(
    database: Database = Depends(get_database),
    generator: TolerantGenerator = Depends(get_generator),
    config: AppConfig = Depends(get_app_config)
) -> InterviewService:
    return InterviewService(database, generator, config)


@router.post("/quiz", response_model=QuizResponse)
def generate_quiz(
    user: User = Depends(get_current_user),
    service: InterviewService = Depends(get_interview_service)
):
    """Generate a 10-question quiz for the current user's industry and skills."""
    outcome = service.generate_quiz(user)
    return QuizResponse(
        success=True,
        status=outcome.status,
        count=len(outcome.result),
        questions=outcome.result
    )


@router.post("/assessments", response_model=AssessmentResponse)
def save_quiz_result(
    request: QuizResultRequest,
    user: User = Depends(get_current_user),
    service: InterviewService = Depends(get_interview_service)
):
    """Grade submitted answers and store the assessment."""
    assessment = service.save_quiz_result(
        user,
        [q.model_dump() for q in request.questions],
        request.answers,
        request.score
    )
    return AssessmentResponse(success=True, assessment=to_assessment_detail(assessment))


@router.get("/assessments", response_model=AssessmentListResponse)
def get_assessments(
    user: User = Depends(get_current_user),
    service: InterviewService = Depends(get_interview_service)
):
    """List the current user's assessments, newest first."""
    assessments = service.get_assessments(user)
    return AssessmentListResponse(
        success=True,
        count=len(assessments),
        assessments=[to_assessment_detail(a) for a in assessments]
    )
