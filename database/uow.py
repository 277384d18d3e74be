import contextlib
import logging
from typing import Generator

from database.database import Database
from database.repository import CareerRepository

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def career_uow(database: Database) -> Generator[CareerRepository, None, None]:
    """Per-unit-of-work transaction scope.

    Yields a CareerRepository bound to a fresh Session. Commits on success,
    rolls back on exception, always closes.

    Usage:
        with career_uow(database) as repo:
            user = repo.users.get_by_clerk_id(clerk_user_id)
            # perform operations...
        # commit happens automatically on successful exit
    """
    with database.session_scope() as session:
        yield CareerRepository(session)
