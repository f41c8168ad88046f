from __future__ import annotations

from dataclasses import dataclass
import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from core.config_models import DatabaseConfig
from core.exceptions import FatalProvisioningError
from db.database import Base, create_oneshot_engine
from db.models import post as _post_model  # noqa: F401  registers the posts table

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProvisioningResult:
    """Outcome of the startup schema check."""

    ok: bool
    error: FatalProvisioningError | None = None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error


async def ensure_schema(engine: AsyncEngine) -> ProvisioningResult:
    """Create the posts table if it does not exist yet.

    Existing tables are left untouched. Failures are reported through the
    returned result rather than raised, so the caller decides how to halt.
    """
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all, checkfirst=True)
    except Exception as e:
        logger.error("posts table could not be created: %s", e)
        return ProvisioningResult(ok=False, error=FatalProvisioningError(str(e)))
    logger.info("posts table ready")
    return ProvisioningResult(ok=True)


async def provision_storage(cfg: DatabaseConfig) -> ProvisioningResult:
    """Run ensure_schema on a short-lived engine and dispose it afterwards."""
    try:
        engine = create_oneshot_engine(cfg)
    except Exception as e:
        logger.error("Database engine could not be created: %s", e)
        return ProvisioningResult(ok=False, error=FatalProvisioningError(str(e)))
    try:
        return await ensure_schema(engine)
    finally:
        await engine.dispose()
