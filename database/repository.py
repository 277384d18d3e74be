from sqlalchemy.orm import Session

from database.repositories import (
    UserRepository,
    IndustryInsightRepository,
    CoverLetterRepository,
    AssessmentRepository,
)


class CareerRepository:
    """Groups the per-entity repositories over one Session."""

    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)
        self.insights = IndustryInsightRepository(db)
        self.cover_letters = CoverLetterRepository(db)
        self.assessments = AssessmentRepository(db)
