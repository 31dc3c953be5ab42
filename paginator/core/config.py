from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "Paginator"
    app_env: str = "development"
    log_level: str | None = Field(default=None, alias="LOG_LEVEL")

    # Page size used when a listing request omits `size`
    default_page_size: int = Field(default=10, alias="DEFAULT_PAGE_SIZE")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def resolved_log_level(self) -> str:
        """Explicit LOG_LEVEL wins; otherwise DEBUG in development, INFO elsewhere."""
        if self.log_level:
            return self.log_level.upper()
        return "DEBUG" if self.app_env == "development" else "INFO"

settings = Settings()
