from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = ConfigDict(env_file=".env", case_sensitive=True)

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Bootstrap the volatile store with the sample listings on startup
    SEED_SAMPLE_DATA: bool = True

    # Business rule configuration
    DEFAULT_ACTIVITY_LIMIT: int = 10
    DEFAULT_SEARCH_RADIUS_MILES: float = 5.0
    SIMILAR_PROPERTIES_LIMIT: int = 2
    SIMILAR_PRICE_TOLERANCE: float = 0.2

    # "strict" fails the whole favorites listing on a dangling property,
    # "lenient" skips the orphan and logs a warning.
    FAVORITES_JOIN_POLICY: str = "strict"

    # CORS configuration: comma-separated origins
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:8080"


settings = Settings()
