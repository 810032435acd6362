from functools import lru_cache
from typing import List
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Application settings using pydantic-settings for structured configuration

class Settings(BaseSettings):
    # --- App ---
    app_name: str = "Word Bag - Big Bag Of Words"
    debug: bool = False                   # DEBUG-level logs on stderr

    # --- Demo driver ---
    # texts ingested by the driver when none are given on the command line
    demo_texts: List[str] = Field(default_factory=lambda: ["This is a te'st string"])

    # pydantic v2 / pydantic-settings configuration
    model_config = SettingsConfigDict(
        env_file=".env",     # auto-load from your .env
        case_sensitive=False,  # .env keys can be upper/lower
        extra="ignore"
    )


@lru_cache
def get_settings() -> Settings:
    """Cache settings so we don't re-parse .env on every call."""
    return Settings()
