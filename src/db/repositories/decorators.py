from collections.abc import Callable
import functools
import logging
from typing import Any

from sqlalchemy.exc import DBAPIError, SQLAlchemyError

from core.exceptions import PersistenceError

logger = logging.getLogger(__name__)

AsyncFunc = Callable[..., Any]


def handle_db_errors(entity_name: str = ""):
    """Decorator converting database errors into PersistenceError.

    There are no retries: the first failure is logged once and surfaced with
    the driver's own message.

    Args:
        entity_name: Entity name for logging
    """

    def decorator(func: AsyncFunc) -> AsyncFunc:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            func_name = getattr(func, "__name__", str(func))

            try:
                return await func(*args, **kwargs)
            except SQLAlchemyError as e:
                entity_info = _extract_entity_info(func_name, args, kwargs)
                log_prefix = f"{entity_name} " if entity_name else ""
                logger.error(f"Database error while {log_prefix}{func_name} {entity_info}: {e}")
                raise PersistenceError(message=_driver_message(e)) from e
            except OSError as e:
                # Socket-level failures from the driver before SQLAlchemy wraps them
                entity_info = _extract_entity_info(func_name, args, kwargs)
                logger.error(f"Connection error while {func_name} {entity_info}: {e}")
                raise PersistenceError(message=str(e)) from e

        return wrapper

    return decorator


def _driver_message(exc: SQLAlchemyError) -> str:
    """Return the underlying DBAPI message without SQLAlchemy's statement dump."""
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)


def _extract_entity_info(func_name: str, args: tuple, kwargs: dict) -> str:
    """Extracts entity information from function arguments for logging.

    Tries to find an entity ID or other information in the arguments
    to create more informative log messages.
    """
    # Skip the first argument (the repository itself)
    if len(args) > 1 and isinstance(args[1], int | str):
        return str(args[1])

    for key in ["id", "post_id", "title"]:
        if key in kwargs:
            return f"{key}={kwargs[key]}"

    return ""
