"""API route handlers."""

from .profile import router as profile_router
from .cover_letters import router as cover_letters_router
from .insights import router as insights_router
from .interview import router as interview_router
