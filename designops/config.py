"""Application configuration using pydantic-settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str = "sqlite+aiosqlite:///./designops.db"

    # Application
    app_name: str = "DesignOps Admin API"
    debug: bool = False
    log_level: str = "INFO"

    # CORS
    frontend_cors_origin: str = "http://localhost:5173"

    # Operator API keys as comma-separated "name:key" pairs.
    # Empty means development mode (every caller is the "local" operator).
    api_keys: str = ""

    # Optimistic-lock retries for the shared department list
    lookup_write_retries: int = Field(3, ge=1)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    @property
    def operator_keys(self) -> dict[str, str]:
        """Map API key -> operator name.

        Parses API_KEYS ("alice:k1,bob:k2"). Entries without a name use the
        key itself as the name.
        """
        keys: dict[str, str] = {}
        for entry in self.api_keys.split(","):
            entry = entry.strip()
            if not entry:
                continue
            name, sep, key = entry.partition(":")
            if sep:
                keys[key.strip()] = name.strip()
            else:
                keys[name] = name
        return keys

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


# Global settings instance
settings = Settings()
