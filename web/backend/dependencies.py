"""
FastAPI dependencies for dependency injection.
"""

import logging
from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header

from core.app_context import AppContext
from core.config_loader import AppConfig
from core.generation import TolerantGenerator
from database.database import Database
from database.models import User
from database.uow import career_uow
from .config import get_config
from .exceptions import UnauthorizedException, UserNotFoundException

logger = logging.getLogger(__name__)


@lru_cache()
def get_app_context() -> AppContext:
    """
    Build the process-wide AppContext on first use.

    Usage:
        @app.get("/endpoint")
        def my_endpoint(ctx: AppContext = Depends(get_app_context)):
            ...
    """
    return AppContext.build(get_config())


def get_app_config(ctx: AppContext = Depends(get_app_context)) -> AppConfig:
    return ctx.config


def get_database(ctx: AppContext = Depends(get_app_context)) -> Database:
    return ctx.database


def get_generator(ctx: AppContext = Depends(get_app_context)) -> TolerantGenerator:
    return ctx.generator


def get_clerk_user_id(x_user_id: Optional[str] = Header(default=None)) -> str:
    """
    Read the user id resolved by the upstream identity provider.

    Raises:
        UnauthorizedException: If the header is missing or blank.
    """
    if not x_user_id or not x_user_id.strip():
        raise UnauthorizedException("Unauthorized")
    return x_user_id.strip()


def get_current_user(
    clerk_user_id: str = Depends(get_clerk_user_id),
    database: Database = Depends(get_database)
) -> User:
    """
    Load the profile row of the authenticated user.

    The returned User is detached; use its column attributes, not its
    relationships.

    Raises:
        UserNotFoundException: If no profile exists for the user.
    """
    with career_uow(database) as repo:
        user = repo.users.get_by_clerk_id(clerk_user_id)
    if user is None:
        raise UserNotFoundException("User not found")
    return user
