"""Application settings and configuration."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


def get_default_data_dir() -> Path:
    """Return the default data directory."""
    return Path.home() / ".edustocks"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="EDUSTOCKS_",
    )

    app_name: str = "EduStocks Trading Simulator"
    app_version: str = "0.1.0"

    # Data directory (SQLite database lives here)
    data_dir: Optional[Path] = None

    # Database URL (derived from data_dir if not set explicitly)
    database_url: Optional[str] = None

    # "sqlite" for the SQLAlchemy store, "memory" for process-local stores
    storage_backend: str = "sqlite"

    log_level: str = "INFO"
    log_format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    # Level for outbound HTTP client logs (quote provider, AI tutor)
    http_log_level: str = "WARNING"

    # Quote provider (Alpha Vantage GLOBAL_QUOTE)
    quote_api_key: Optional[str] = None
    quote_api_base_url: str = "https://www.alphavantage.co/query"
    quote_fetch_timeout_seconds: float = 10.0
    quote_cache_ttl_seconds: int = 600

    # AI tutor (OpenAI-compatible chat completions)
    tutor_api_key: Optional[str] = None
    tutor_api_base_url: str = "https://api.openai.com/v1"
    tutor_model: str = "gpt-3.5-turbo"
    tutor_max_tokens: int = 300
    tutor_timeout_seconds: float = 60.0

    # Simulated trading
    starting_balance: float = 10000.0

    # Identity tokens
    auth_secret_key: str = "change-me"
    auth_token_max_age_seconds: int = 7 * 24 * 3600

    def get_data_dir(self) -> Path:
        """Get the data directory, creating it if needed."""
        data_dir = self.data_dir or get_default_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def get_database_url(self) -> str:
        """Get database URL, deriving from data_dir if not set."""
        if self.database_url:
            return self.database_url
        db_path = self.get_data_dir() / "edustocks.db"
        return f"sqlite:///{db_path}"


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
