from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Service settings, read from ``PERMISSIONS_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="PERMISSIONS_", extra="ignore")

    app_name: str = "Subuser Permission Registry"
    environment: str = "development"
    access_log_enabled: bool = True
    access_log_path: Path = Path("logs/access.log")
    allowed_origins: Annotated[list[str], NoDecode] = Field(default_factory=lambda: ["http://localhost"])
    # raise instead of skipping stored legacy values that have no translation
    legacy_translation_strict: bool = False

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def parse_origins(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("access_log_path", mode="after")
    @classmethod
    def resolve_access_log_path(cls, value: Path) -> Path:
        return value if value.is_absolute() else Path.cwd() / value


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
