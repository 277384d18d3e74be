"""
Test suite configuration and utilities.

All tests run against SQLite (in-memory or a temp file) and a mocked
text-generation provider, so no network or PostgreSQL is needed:

    # Run all tests
    python -m pytest tests/ -v

    # Skip tests that touch a database
    python -m pytest tests/ -v -m "not db"

    # Using unittest
    python -m unittest discover tests -v
"""

from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from core.config_loader import AppConfig, PersistenceConfig
from database.database import Database

IN_MEMORY_DB_URL = "sqlite://"


def make_memory_database() -> Database:
    """
    Build a Database on a single shared in-memory SQLite connection
    with all tables created.

    Do not call reconnect() on it: disposing the pool drops the data.
    """
    engine = create_engine(
        IN_MEMORY_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    database = Database(IN_MEMORY_DB_URL, engine=engine)
    database.create_all()
    return database


def make_test_config(max_attempts: int = 2) -> AppConfig:
    """AppConfig with zero backoff so retry tests do not sleep."""
    return AppConfig(
        persistence=PersistenceConfig(
            max_attempts=max_attempts,
            backoff_multiplier=0,
            backoff_max_seconds=0,
        )
    )


def make_llm_reply(*replies):
    """
    Side effect for a mocked LLMProvider.generate_text.

    Exceptions in replies are raised, anything else is returned.
    """
    pending = list(replies)

    def _reply(prompt, system_prompt=None):
        reply = pending.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    return _reply
