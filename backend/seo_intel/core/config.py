from typing import List, Union, Optional

from pydantic import AnyHttpUrl, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # API settings
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "SEO Intel API"
    VERSION: str = "0.1.0"

    # CORS
    BACKEND_CORS_ORIGINS: List[AnyHttpUrl] = []

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, (list, str)):
            return v
        raise ValueError(v)

    # Analysis settings
    ANALYSIS_CACHE_MAX_SIZE: int = 512
    ANALYSIS_CACHE_TTL: int = 3600  # 0 disables expiry
    ANALYSIS_RANDOM_SEED: Optional[int] = None
    MAX_TEXT_LENGTH: int = 100000

    # Logging
    LOG_LEVEL: str = "INFO"

    # Environment
    ENVIRONMENT: str = "development"  # Default to development
    DEBUG: bool = True  # Default to True for development

    @model_validator(mode="after")
    def check_cache_limits(self) -> "Settings":
        if self.ANALYSIS_CACHE_MAX_SIZE < 1:
            raise ValueError("ANALYSIS_CACHE_MAX_SIZE must be at least 1")
        if self.ANALYSIS_CACHE_TTL < 0:
            raise ValueError("ANALYSIS_CACHE_TTL must not be negative")
        return self

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )


settings = Settings()
