import uuid

from sqlalchemy import Column, Text, Float, DateTime, ForeignKey, Uuid, Index
from sqlalchemy.orm import relationship

from .base import Base, JSONType, utcnow


class Assessment(Base):
    __tablename__ = 'assessments'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), ForeignKey('users.id', ondelete='CASCADE'), nullable=False)

    quiz_score = Column(Float, nullable=False)
    # [{question, correctAnswer, userAnswer, isCorrect, explanation}]
    questions = Column(JSONType, nullable=False, default=list)
    category = Column(Text, nullable=False, default='Technical')
    improvement_tip = Column(Text)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    user = relationship("User", back_populates="assessments")

    __table_args__ = (
        Index('idx_assessments_user_id', 'user_id'),
    )
