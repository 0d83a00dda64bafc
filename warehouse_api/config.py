from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from the environment (and an optional .env file).

    DATABASE_URL has no default: the service refuses to start without it.
    An empty API_KEY keeps every mutating route closed.
    """
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DATABASE_URL: str
    API_KEY: str = ""

    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    # Connection pool
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    DB_STATEMENT_TIMEOUT_MS: int = 30000

    # Seconds to wait for in-flight requests on shutdown
    SHUTDOWN_GRACE_PERIOD: int = 5


@lru_cache
def get_settings() -> Settings:
    return Settings()
