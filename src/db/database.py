from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool

from core.config_models import DatabaseConfig

logger = logging.getLogger(__name__)

Base = declarative_base()


def create_engine_from_config(cfg: DatabaseConfig) -> AsyncEngine:
    """Build the process-wide connection pool."""
    if cfg.url.startswith("sqlite"):
        # SQLite drivers reject the QueuePool sizing arguments
        engine = create_async_engine(cfg.url, echo=cfg.echo)
    else:
        engine = create_async_engine(
            cfg.url,
            echo=cfg.echo,
            pool_size=cfg.pool_size,
            max_overflow=cfg.max_overflow,
            pool_pre_ping=cfg.pool_pre_ping,
            pool_timeout=cfg.pool_timeout,
            pool_recycle=3600,
        )
    logger.debug("AsyncEngine created")
    return engine


def create_oneshot_engine(cfg: DatabaseConfig) -> AsyncEngine:
    """Engine without pooling, for work that runs outside the server's event loop."""
    return create_async_engine(cfg.url, echo=cfg.echo, poolclass=NullPool)


async def close_engine(engine: AsyncEngine | None) -> None:
    if engine is None:
        return
    try:
        await engine.dispose()
        logger.info("Database connections closed")
    except Exception as e:
        logger.error("Error closing database connections: %s", e)
