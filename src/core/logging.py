import logging

from .config_models import DatabaseConfig, LoggingConfig

SQL_LOGGER = "sqlalchemy.engine"


def setup_logging(log_cfg: LoggingConfig, db_cfg: DatabaseConfig | None = None) -> None:
    """
    Configure root logging for the service.

    - Root level and format come from log_cfg
    - A second call only adjusts levels, handlers are installed once
    - SQL statements are logged only when db_cfg.echo is on
    """
    level = getattr(logging, log_cfg.level.upper(), logging.INFO)

    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
    else:
        logging.basicConfig(level=level, format=log_cfg.format)

    echo = db_cfg is not None and db_cfg.echo
    logging.getLogger(SQL_LOGGER).setLevel(logging.INFO if echo else logging.WARNING)
