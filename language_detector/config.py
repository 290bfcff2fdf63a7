from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    # Resolver cache
    cache_enabled: bool = True
    cache_size: int = Field(default=100, ge=1)

    # Detection defaults
    standardize: bool = True
    max_fallbacks: int = Field(default=10, ge=1)
    default_language: str = "english"

    # Logging
    log_level: str = "WARNING"
    log_json: bool = False

    model_config = SettingsConfigDict(
        env_prefix="LANGUAGE_DETECTOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()


def get_settings() -> Settings:
    return settings
