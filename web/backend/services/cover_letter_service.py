"""
Cover letter service - generation and per-user CRUD.
"""

import logging
from typing import List

from core.config_loader import AppConfig
from core.generation import TolerantGenerator
from core.generation.cover_letter import CandidateProfile, JobPosting, generate_cover_letter_content
from database.database import Database
from database.models import CoverLetter, User
from database.repository import CareerRepository
from database.retry import run_with_reconnect
from database.uow import career_uow
from ..exceptions import CoverLetterNotFoundException

logger = logging.getLogger(__name__)


def profile_from_user(user: User) -> CandidateProfile:
    return CandidateProfile(
        industry=user.industry,
        experience=user.experience,
        skills=list(user.skills or []),
        bio=user.bio,
    )


class CoverLetterService:
    """Service for managing a user's cover letters."""

    def __init__(self, database: Database, generator: TolerantGenerator, config: AppConfig):
        self.database = database
        self.generator = generator
        self.config = config

    def generate_cover_letter(self, user: User, posting: JobPosting) -> CoverLetter:
        """
        Generate and store a letter. The stored status records whether the
        model wrote it ('completed') or the template was used ('fallback').
        """
        outcome = generate_cover_letter_content(self.generator, posting, profile_from_user(user))

        return run_with_reconnect(
            self.database,
            lambda session: CareerRepository(session).cover_letters.create(
                user_id=user.id,
                content=outcome.result,
                job_title=posting.job_title,
                company_name=posting.company_name,
                job_description=posting.job_description,
                status=outcome.status,
            ),
            self.config.persistence,
            description="Save cover letter"
        )

    def list_cover_letters(self, user: User) -> List[CoverLetter]:
        with career_uow(self.database) as repo:
            return repo.cover_letters.list_for_user(user.id)

    def get_cover_letter(self, user: User, letter_id) -> CoverLetter:
        """
        Raises:
            CoverLetterNotFoundException: If the letter does not exist or
                belongs to another user.
        """
        with career_uow(self.database) as repo:
            letter = repo.cover_letters.get_for_user(letter_id, user.id)
        if letter is None:
            raise CoverLetterNotFoundException(f"Cover letter {letter_id} not found")
        return letter

    def delete_cover_letter(self, user: User, letter_id) -> int:
        deleted = run_with_reconnect(
            self.database,
            lambda session: CareerRepository(session).cover_letters.delete_for_user(letter_id, user.id),
            self.config.persistence,
            description="Delete cover letter"
        )
        logger.info(f"Deleted {deleted} cover letter(s) with id {letter_id}")
        return deleted
