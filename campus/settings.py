from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from campus.moderation.config import ModerationConfig, load_moderation_config
from campus.moderation.engine import DEFAULT_REMOTE_TIMEOUT, ModerationEngine
from campus.moderation.remote import DEFAULT_MODERATION_MODEL, OpenAIModerationClient


class Settings(BaseSettings):
    # App settings
    ENVIRONMENT: str = "development"
    PROJECT_NAME: str = "Campus Connect"
    LOG_LEVEL: str = "INFO"

    # Storage for flagged-content records and documents
    DATA_DIR: Path = Path.home() / ".campus"

    # Remote moderation
    MODERATION_PROVIDER: Literal["openai", "anthropic", "none"] = "openai"
    MODERATION_MODEL: str = DEFAULT_MODERATION_MODEL
    MODERATION_TIMEOUT_S: float = DEFAULT_REMOTE_TIMEOUT
    OPENAI_API_KEY: str = Field(
        default="", validation_alias=AliasChoices("CAMPUS_OPENAI_API_KEY", "OPENAI_API_KEY")
    )
    ANTHROPIC_API_KEY: str = Field(
        default="", validation_alias=AliasChoices("CAMPUS_ANTHROPIC_API_KEY", "ANTHROPIC_API_KEY")
    )

    # Local policy
    MODERATION_CONFIG_FILE: Optional[Path] = None  # YAML word lists / thresholds
    PATTERN_FILTER_ENABLED: bool = False
    SENTIMENT_SCORING_ENABLED: bool = False

    model_config = SettingsConfigDict(
        env_prefix="CAMPUS_",
        env_file=".env",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def build_moderation_config(settings: Settings) -> ModerationConfig:
    """Policy from the optional YAML file, with the env switches applied on top."""
    base = ModerationConfig()
    if settings.MODERATION_CONFIG_FILE:
        base = load_moderation_config(settings.MODERATION_CONFIG_FILE)
    return base.with_overrides(
        pattern_filter_enabled=base.pattern_filter_enabled or settings.PATTERN_FILTER_ENABLED,
        sentiment_scoring_enabled=base.sentiment_scoring_enabled or settings.SENTIMENT_SCORING_ENABLED,
    )


def build_remote_client(settings: Settings):
    """Return the configured remote classifier, or None when unavailable."""
    if settings.MODERATION_PROVIDER == "openai" and settings.OPENAI_API_KEY:
        return OpenAIModerationClient(
            api_key=settings.OPENAI_API_KEY, model=settings.MODERATION_MODEL
        )
    if settings.MODERATION_PROVIDER == "anthropic" and settings.ANTHROPIC_API_KEY:
        from campus.llm.client import LLMModerationClient

        return LLMModerationClient(api_key=settings.ANTHROPIC_API_KEY)
    return None


def build_engine(settings: Settings) -> ModerationEngine:
    return ModerationEngine(
        config=build_moderation_config(settings),
        remote=build_remote_client(settings),
        timeout=settings.MODERATION_TIMEOUT_S,
    )
