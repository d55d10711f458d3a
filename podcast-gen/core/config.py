from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Literal, Optional
from functools import lru_cache

class Settings(BaseSettings):

    # Project settings
    PROJECT_NAME: str = "PodcastGen API"
    API_PREFIX: str = "/api"
    DEBUG: bool = False

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # Not required at startup: a missing key is reported per request
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = "gpt-4.1-mini"
    OPENAI_TIMEOUT_SECONDS: int = Field(default=120, gt=0)

    # Dialogue generation
    DIALOGUE_FORMAT: Literal["text", "structured"] = Field(default="text", description="Return a single transcript or a list of voice-tagged turns")
    DOCUMENT_SCOPE: Literal["all", "primary"] = Field(default="all", description="Reference every uploaded document or only the first one")
    REQUIRE_PDF: bool = True
    DELETE_UPLOADED_FILES: bool = Field(default=True, description="Delete provider-side files once the dialogue is generated")
    HOST_VOICE_ID: str = "21m00Tcm4TlvDq8ikWAM"
    GUEST_VOICE_ID: str = "ErXwobaYiN019PkySvjV"

    # Optional logging settings
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore"
    )

    @field_validator("OPENAI_API_KEY")
    @classmethod
    def blank_key_is_missing(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value

@lru_cache()
def get_settings() -> Settings:
    return Settings()

settings = get_settings()
