from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_env: str = Field(default="dev", alias="APP_ENV")
    app_host: str = Field(default="0.0.0.0", alias="APP_HOST")
    app_port: int = Field(default=8000, alias="APP_PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    enable_openapi_docs: bool = Field(default=True, alias="ENABLE_OPENAPI_DOCS")

    # Empty source selects the bundled question bank.
    quiz_data_source: str = Field(default="", alias="QUIZ_DATA_SOURCE")
    quiz_data_timeout_seconds: float = Field(default=5.0, gt=0, alias="QUIZ_DATA_TIMEOUT_SECONDS")
    quiz_shuffle_seed: int | None = Field(default=None, alias="QUIZ_SHUFFLE_SEED")
    quiz_strict_correct_text: bool = Field(default=False, alias="QUIZ_STRICT_CORRECT_TEXT")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
