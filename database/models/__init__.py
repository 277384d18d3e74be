from .base import Base
from .user import User
from .industry_insight import IndustryInsight
from .cover_letter import CoverLetter
from .assessment import Assessment

__all__ = [
    'Base',
    'User',
    'IndustryInsight',
    'CoverLetter',
    'Assessment',
]
