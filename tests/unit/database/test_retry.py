"""
Unit tests for run_with_reconnect.

Tests verify:
- A connection-level failure is retried after the pool is disposed
- Attempts stop at the configured maximum and the last error is raised
- Non-connection errors are not retried
- A successful attempt commits
"""

import unittest
from unittest.mock import MagicMock

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, OperationalError

from core.config_loader import PersistenceConfig
from database.database import Database
from database.models import User
from database.retry import run_with_reconnect

NO_WAIT = PersistenceConfig(max_attempts=2, backoff_multiplier=0, backoff_max_seconds=0)


def _connection_lost():
    return OperationalError("INSERT", {}, Exception("server closed the connection unexpectedly"))


def _mock_database():
    database = MagicMock(spec=Database)
    scope = database.session_scope.return_value
    scope.__enter__.return_value = MagicMock(name="session")
    scope.__exit__.return_value = False
    return database


class TestRunWithReconnect(unittest.TestCase):

    def test_success_first_attempt(self):
        database = _mock_database()
        operation = MagicMock(return_value="ok")

        result = run_with_reconnect(database, operation, NO_WAIT)

        self.assertEqual(result, "ok")
        operation.assert_called_once()
        database.reconnect.assert_not_called()

    def test_connection_error_retried_after_reconnect(self):
        database = _mock_database()
        operation = MagicMock(side_effect=[_connection_lost(), "ok"])

        result = run_with_reconnect(database, operation, NO_WAIT, description="Upsert tech insights")

        self.assertEqual(result, "ok")
        self.assertEqual(operation.call_count, 2)
        database.reconnect.assert_called_once()
        self.assertEqual(database.session_scope.call_count, 2)

    def test_gives_up_after_max_attempts(self):
        database = _mock_database()
        operation = MagicMock(side_effect=_connection_lost())

        with self.assertRaises(OperationalError):
            run_with_reconnect(database, operation, NO_WAIT)

        self.assertEqual(operation.call_count, 2)
        database.reconnect.assert_called_once()

    def test_single_attempt_policy(self):
        database = _mock_database()
        operation = MagicMock(side_effect=_connection_lost())
        policy = PersistenceConfig(max_attempts=1, backoff_multiplier=0, backoff_max_seconds=0)

        with self.assertRaises(OperationalError):
            run_with_reconnect(database, operation, policy)

        operation.assert_called_once()
        database.reconnect.assert_not_called()

    def test_integrity_error_not_retried(self):
        database = _mock_database()
        operation = MagicMock(side_effect=IntegrityError("INSERT", {}, Exception("duplicate key")))

        with self.assertRaises(IntegrityError):
            run_with_reconnect(database, operation, NO_WAIT)

        operation.assert_called_once()
        database.reconnect.assert_not_called()


@pytest.mark.db
def test_retry_commits_against_real_database(tmp_path):
    database = Database(f"sqlite:///{tmp_path / 'retry.db'}")
    database.create_all()
    calls = []

    def _operation(session):
        calls.append(1)
        session.add(User(clerk_user_id=f"user_{len(calls)}", skills=[]))
        if len(calls) == 1:
            session.flush()
            raise _connection_lost()
        return len(calls)

    try:
        assert run_with_reconnect(database, _operation, NO_WAIT) == 2

        with database.session_scope() as session:
            ids = session.execute(select(User.clerk_user_id)).scalars().all()
        # First attempt rolled back, second committed
        assert ids == ["user_2"]
    finally:
        database.dispose()
