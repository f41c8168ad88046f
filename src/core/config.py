from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

from .config_models import DatabaseConfig, LoggingConfig, ServerConfig

ASYNC_DRIVER = "postgresql+asyncpg"


def to_async_dsn(url: str) -> str:
    """Rewrite a PostgreSQL DSN so that it targets the asyncpg driver."""
    if url.startswith(f"{ASYNC_DRIVER}://"):
        return url
    for prefix in ("postgresql+psycopg2://", "postgresql://", "postgres://"):
        if url.startswith(prefix):
            return url.replace(prefix, f"{ASYNC_DRIVER}://", 1)
    return url


class Settings(BaseSettings):
    """Application settings assembled from environment variables and defaults."""

    # Environment
    environment: str = Field(default="development", pattern="^(development|staging|production)$")
    debug: bool = Field(default=False)

    # API
    api_title: str = Field(default="Mini Blog Backend API")
    api_version: str = Field(default="1.0.0")
    api_description: str = Field(default="Create, list and delete text posts")

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)

    # Database connection parts, overridden by DATABASE_URL when present
    db_host: str = Field(default="postgres")
    db_user: str = Field(default="bloguser")
    db_pass: str = Field(default="blogpass")
    db_name: str = Field(default="blogdb")
    db_port: int = Field(default=5432, ge=1, le=65535)
    database_url: str | None = Field(default=None)

    # Pool
    db_pool_size: int = Field(default=10)
    db_max_overflow: int = Field(default=20)
    db_pool_timeout: int = Field(default=30)

    log_level: str = Field(default="INFO")

    # Assembled in validator
    server: ServerConfig = ServerConfig()
    logging: LoggingConfig = LoggingConfig()
    database: DatabaseConfig | None = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @model_validator(mode="after")
    def _assemble_subconfigs(self):
        """Assemble nested configurations from the flat environment fields."""
        if self.database_url:
            url = to_async_dsn(self.database_url)
        else:
            url = URL.create(
                ASYNC_DRIVER,
                username=self.db_user,
                password=self.db_pass,
                host=self.db_host,
                port=self.db_port,
                database=self.db_name,
            ).render_as_string(hide_password=False)

        self.database = DatabaseConfig(
            url=url,
            echo=self.environment == "development" and self.debug,
            pool_size=self.db_pool_size,
            max_overflow=self.db_max_overflow,
            pool_timeout=self.db_pool_timeout,
        )
        self.server = ServerConfig(
            host=self.host,
            port=self.port,
        )
        self.logging = LoggingConfig(level=self.log_level.upper())
        return self


@lru_cache
def get_settings() -> "Settings":
    """Return cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
