import uuid

from sqlalchemy import Column, Text, Float, DateTime, Uuid
from sqlalchemy.orm import relationship

from .base import Base, JSONType, utcnow


class IndustryInsight(Base):
    """
    Generated market snapshot for one industry, shared by every user in it.

    industry is the upsert key: refreshes update the row in place.
    """
    __tablename__ = 'industry_insights'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    industry = Column(Text, nullable=False, unique=True)

    # [{role, min, max, median, location}]
    salary_ranges = Column(JSONType, nullable=False, default=list)
    growth_rate = Column(Float, nullable=False, default=0.0)
    demand_level = Column(Text, nullable=False, default='Medium')
    top_skills = Column(JSONType, nullable=False, default=list)
    market_outlook = Column(Text, nullable=False, default='Neutral')
    key_trends = Column(JSONType, nullable=False, default=list)
    recommended_skills = Column(JSONType, nullable=False, default=list)

    last_updated = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    next_update = Column(DateTime(timezone=True), nullable=False)

    users = relationship("User", back_populates="industry_insight")
