from sqlalchemy.orm import Session


class BaseRepository:
    """Repositories flush but never commit; the unit of work owns the transaction."""

    def __init__(self, db: Session):
        self.db = db
