"""
Bounded retry-with-reconnect for database writes.

Serverless Postgres providers drop idle connections; a write that fails
with a connection-level error is re-run in a fresh unit of work after the
pool has been disposed. Errors that are not connection-level (integrity,
programming errors) propagate on the first attempt.
"""
import logging
from typing import Callable, TypeVar

from sqlalchemy.exc import DisconnectionError, InterfaceError, OperationalError
from sqlalchemy.orm import Session
from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from core.config_loader import PersistenceConfig
from database.database import Database

logger = logging.getLogger(__name__)

T = TypeVar("T")

RETRYABLE_DB_ERRORS = (OperationalError, InterfaceError, DisconnectionError)


def run_with_reconnect(
    database: Database,
    operation: Callable[[Session], T],
    policy: PersistenceConfig,
    description: str = "database write"
) -> T:
    """Run operation in its own transaction, reconnecting between attempts.

    Args:
        database: Owner of the engine to dispose between attempts
        operation: Receives a Session; committed if it returns normally
        policy: Attempt count and backoff bounds
        description: Used in log lines

    Returns:
        Whatever operation returns on the successful attempt.

    Raises:
        The last error once attempts are exhausted, or any
        non-connection error immediately.
    """

    def _reconnect_before_retry(retry_state: RetryCallState) -> None:
        exc = retry_state.outcome.exception()
        wait = retry_state.next_action.sleep if retry_state.next_action else 0
        logger.error(
            "%s failed (attempt %s/%s): %s. Reconnecting and retrying in %.1fs",
            description, retry_state.attempt_number, policy.max_attempts, exc, wait,
        )
        database.reconnect()

    retrying = Retrying(
        retry=retry_if_exception_type(RETRYABLE_DB_ERRORS),
        stop=stop_after_attempt(policy.max_attempts),
        wait=wait_exponential(multiplier=policy.backoff_multiplier, max=policy.backoff_max_seconds),
        before_sleep=_reconnect_before_retry,
        reraise=True,
    )

    def _attempt() -> T:
        with database.session_scope() as session:
            return operation(session)

    return retrying(_attempt)
