"""
Cover letter endpoints - generate, list, view and delete.
"""

import uuid
import logging
from fastapi import APIRouter, Depends, HTTPException

from core.config_loader import AppConfig
from core.generation import TolerantGenerator
from core.generation.cover_letter import JobPosting
from database.database import Database
from database.models import User
from ..dependencies import get_app_config, get_current_user, get_database, get_generator
from ..models.requests import CoverLetterRequest
from ..models.responses import CoverLetterListResponse, CoverLetterResponse, DeleteResponse
from ..services.cover_letter_service import CoverLetterService
from .serializers import to_cover_letter_detail, to_cover_letter_summary

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/cover-letters", tags=["cover-letters"])


def validate_uuid(letter_id: str) -> uuid.UUID:
    """Validate that letter_id is a valid UUID format."""
    try:
        return uuid.UUID(letter_id)
    except ValueError:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid cover letter id format: {letter_id}. Must be a valid UUID."
        )


def get_cover_letter_service(
    database: Database = Depends(get_database),
    generator: TolerantGenerator = Depends(get_generator),
    config: AppConfig = Depends(get_app_config)
) -> CoverLetterService:
    return CoverLetterService(database, generator, config)


@router.post("", response_model=CoverLetterResponse)
def generate_cover_letter(
    request: CoverLetterRequest,
    user: User = Depends(get_current_user),
    service: CoverLetterService = Depends(get_cover_letter_service)
):
    """
    Generate a cover letter for a job posting.

    Always returns a letter; status is 'fallback' when the template was
    used because generation failed.
    """
    posting = JobPosting(
        job_title=request.job_title,
        company_name=request.company_name,
        job_description=request.job_description,
    )
    letter = service.generate_cover_letter(user, posting)
    return CoverLetterResponse(success=True, cover_letter=to_cover_letter_detail(letter))


@router.get("", response_model=CoverLetterListResponse)
def list_cover_letters(
    user: User = Depends(get_current_user),
    service: CoverLetterService = Depends(get_cover_letter_service)
):
    """List the current user's cover letters, newest first."""
    letters = service.list_cover_letters(user)
    return CoverLetterListResponse(
        success=True,
        count=len(letters),
        cover_letters=[to_cover_letter_summary(letter) for letter in letters]
    )


@router.get("/{letter_id}", response_model=CoverLetterResponse)
def get_cover_letter(
    letter_id: str,
    user: User = Depends(get_current_user),
    service: CoverLetterService = Depends(get_cover_letter_service)
):
    """Get one of the current user's cover letters."""
    letter = service.get_cover_letter(user, validate_uuid(letter_id))
    return CoverLetterResponse(success=True, cover_letter=to_cover_letter_detail(letter))


@router.delete("/{letter_id}", response_model=DeleteResponse)
def delete_cover_letter(
    letter_id: str,
    user: User = Depends(get_current_user),
    service: CoverLetterService = Depends(get_cover_letter_service)
):
    """Delete one of the current user's cover letters."""
    deleted = service.delete_cover_letter(user, validate_uuid(letter_id))
    return DeleteResponse(success=True, deleted=deleted)
