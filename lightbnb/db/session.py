"""Database engine and session management."""
from __future__ import annotations

import logging

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from ..core.config import Settings, get_settings
from .gateway import StoreGateway

logger = logging.getLogger(__name__)


def create_engine(settings: Settings) -> AsyncEngine:
    """Build the pooled async engine described by the settings."""

    connect_args: dict[str, object] = {}
    if settings.database_ssl_required:
        connect_args["ssl"] = True

    return create_async_engine(
        settings.database_async_url,
        echo=settings.database_echo,
        pool_pre_ping=True,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        connect_args=connect_args,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


def create_gateway(settings: Settings | None = None) -> StoreGateway:
    """Create the store gateway once at process start.

    The returned gateway owns the connection pool and is passed explicitly to
    every repository call.
    """

    settings = settings or get_settings()
    engine = create_engine(settings)
    logger.info(
        "Connecting to %s",
        make_url(settings.database_async_url).render_as_string(hide_password=True),
    )
    return StoreGateway(
        create_session_factory(engine),
        engine=engine,
        default_timeout=settings.statement_timeout_seconds,
    )
