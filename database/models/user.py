import uuid

from sqlalchemy import Column, Text, Integer, DateTime, ForeignKey, Uuid, Index
from sqlalchemy.orm import relationship

from .base import Base, JSONType, utcnow


class User(Base):
    """
    Career profile of an authenticated user.

    clerk_user_id is the identifier issued by the external identity
    provider; the backend never sees credentials.
    """
    __tablename__ = 'users'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    clerk_user_id = Column(Text, nullable=False, unique=True)
    email = Column(Text)
    name = Column(Text)

    # Profile used to personalise prompts
    industry = Column(Text)
    experience = Column(Integer)
    bio = Column(Text)
    skills = Column(JSONType, nullable=False, default=list)

    industry_insight_id = Column(Uuid(as_uuid=True), ForeignKey('industry_insights.id', ondelete='SET NULL'))

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    industry_insight = relationship("IndustryInsight", back_populates="users")
    cover_letters = relationship("CoverLetter", back_populates="user", cascade="all, delete-orphan")
    assessments = relationship("Assessment", back_populates="user", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_users_clerk_user_id', 'clerk_user_id'),
    )
