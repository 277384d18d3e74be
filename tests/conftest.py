"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest
from unittest.mock import MagicMock

from core.generation import TolerantGenerator
from core.llm.interfaces import LLMProvider
from tests import make_memory_database, make_test_config


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring database (deselect with '-m \"not db\"')"
    )


@pytest.fixture
def database():
    """Fresh in-memory SQLite database with all tables."""
    db = make_memory_database()
    yield db
    db.dispose()


@pytest.fixture
def app_config():
    return make_test_config()


@pytest.fixture
def mock_llm():
    """LLMProvider whose generate_text is a MagicMock."""
    return MagicMock(spec=LLMProvider)


@pytest.fixture
def generator(mock_llm):
    return TolerantGenerator(mock_llm)
