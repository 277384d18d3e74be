"""Cover letter generation."""
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from core.generation.generator import GenerationOutcome, GenerationRequest, TolerantGenerator
from core.llm.system_prompts import (
    COVER_LETTER_FALLBACK_TEMPLATE,
    COVER_LETTER_PROMPT_TEMPLATE,
    COVER_LETTER_SYSTEM_PROMPT,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CandidateProfile:
    industry: Optional[str] = None
    experience: Optional[int] = None
    skills: List[str] = field(default_factory=list)
    bio: Optional[str] = None


@dataclass(frozen=True)
class JobPosting:
    job_title: str
    company_name: str
    job_description: str


def _or(value, default: str) -> str:
    # Zero years of experience still prints as the default, like an unset field
    return str(value) if value else default


def build_cover_letter_request(posting: JobPosting, profile: CandidateProfile) -> GenerationRequest:
    return GenerationRequest(
        template=COVER_LETTER_PROMPT_TEMPLATE,
        parameters={
            "job_title": posting.job_title,
            "company_name": posting.company_name,
            "job_description": posting.job_description,
            "industry": _or(profile.industry, "N/A"),
            "experience": _or(profile.experience, "N/A"),
            "skills": ", ".join(profile.skills) if profile.skills else "N/A",
            "bio": _or(profile.bio, "N/A"),
        },
        system_prompt=COVER_LETTER_SYSTEM_PROMPT,
    )


def render_fallback_letter(posting: JobPosting, profile: CandidateProfile) -> str:
    return COVER_LETTER_FALLBACK_TEMPLATE.format(
        job_title=posting.job_title,
        company_name=posting.company_name,
        experience=_or(profile.experience, "X"),
        industry=_or(profile.industry, "your industry"),
        skills=", ".join(profile.skills) if profile.skills else "key technologies",
        signature=_or(profile.bio, "Your Name"),
    )


def generate_cover_letter_content(
    generator: TolerantGenerator,
    posting: JobPosting,
    profile: CandidateProfile
) -> GenerationOutcome:
    """Generate the Markdown letter; outcome.result is always a string."""
    outcome = generator.generate_text(
        build_cover_letter_request(posting, profile),
        fallback=lambda: render_fallback_letter(posting, profile),
    )
    if outcome.is_fallback:
        logger.error(f"Error generating cover letter for {posting.company_name}: {outcome.error}")
    else:
        logger.info(f"Cover letter generated for {posting.job_title} at {posting.company_name}")
    return outcome
