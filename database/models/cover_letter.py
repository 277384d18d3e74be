import uuid

from sqlalchemy import Column, Text, DateTime, ForeignKey, Uuid, Index
from sqlalchemy.orm import relationship

from .base import Base, utcnow


class CoverLetter(Base):
    __tablename__ = 'cover_letters'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), ForeignKey('users.id', ondelete='CASCADE'), nullable=False)

    content = Column(Text, nullable=False)
    job_description = Column(Text)
    company_name = Column(Text, nullable=False)
    job_title = Column(Text, nullable=False)

    # 'completed' when the model wrote it, 'fallback' when the template was used
    status = Column(Text, nullable=False, default='completed')

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    user = relationship("User", back_populates="cover_letters")

    __table_args__ = (
        Index('idx_cover_letters_user_id', 'user_id'),
    )
