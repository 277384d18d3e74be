"""
Interview service - quiz generation, grading and assessment history.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from core.config_loader import AppConfig
from core.generation import GenerationOutcome, TolerantGenerator
from core.generation.quiz import generate_improvement_tip, generate_quiz_questions, grade_answers
from database.database import Database
from database.models import Assessment, User
from database.repository import CareerRepository
from database.retry import run_with_reconnect
from database.uow import career_uow
from ..exceptions import PersistenceException

logger = logging.getLogger(__name__)

ASSESSMENT_CATEGORY = "Technical"


class InterviewService:
    """Service for interview practice quizzes."""

    def __init__(self, database: Database, generator: TolerantGenerator, config: AppConfig):
        self.database = database
        self.generator = generator
        self.config = config

    def generate_quiz(self, user: User) -> GenerationOutcome:
        return generate_quiz_questions(self.generator, user.industry, user.skills or [])

    def save_quiz_result(
        self,
        user: User,
        questions: Sequence[Dict[str, Any]],
        answers: Sequence[Optional[str]],
        score: float
    ) -> Assessment:
        """
        Grade the answers, ask for a study tip on mistakes, store the result.

        Raises:
            PersistenceException: If the assessment cannot be stored.
        """
        question_results = grade_answers(questions, answers)
        improvement_tip = generate_improvement_tip(self.generator, user.industry, question_results)

        try:
            assessment = run_with_reconnect(
                self.database,
                lambda session: CareerRepository(session).assessments.create(
                    user_id=user.id,
                    quiz_score=score,
                    questions=question_results,
                    category=ASSESSMENT_CATEGORY,
                    improvement_tip=improvement_tip,
                ),
                self.config.persistence,
                description="Save assessment"
            )
        except Exception as e:
            logger.error(f"Error saving assessment: {e}", exc_info=True)
            raise PersistenceException("Failed to save quiz result") from e

        logger.info("Assessment saved successfully")
        return assessment

    def get_assessments(self, user: User) -> List[Assessment]:
        try:
            with career_uow(self.database) as repo:
                return repo.assessments.list_for_user(user.id)
        except Exception as e:
            logger.error(f"Error fetching assessments: {e}", exc_info=True)
            raise PersistenceException("Failed to fetch assessments") from e
