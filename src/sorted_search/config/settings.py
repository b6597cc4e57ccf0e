"""Configuration management using Pydantic Settings v2."""

from typing import Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

from sorted_search.config.constants import DEFAULT_COMPARATOR

# Load .env into os.environ before the nested settings below are
# instantiated as class-body defaults of Settings; they only read
# os.environ and have no env_file of their own.
load_dotenv()


class SearchSettings(BaseSettings):
    """Search configuration."""

    comparator: str = DEFAULT_COMPARATOR

    model_config = SettingsConfigDict(env_prefix="SEARCH_")


class DisplaySettings(BaseSettings):
    """CLI output configuration."""

    show_comparisons: bool = True

    model_config = SettingsConfigDict(env_prefix="DISPLAY_")


class Settings(BaseSettings):
    """Root settings class combining all sections."""

    search: SearchSettings = SearchSettings()
    display: DisplaySettings = DisplaySettings()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Prefixed env vars belong to the nested classes
    )


_settings_instance: Optional[Settings] = None


def _load_settings() -> Settings:
    # Rebuild the nested sections so environment changes made after
    # import are picked up.
    return Settings(search=SearchSettings(), display=DisplaySettings())


def get_settings() -> Settings:
    """Return the global Settings instance (singleton pattern)."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = _load_settings()
    return _settings_instance


def reload_settings() -> Settings:
    """Reload settings from environment (mainly for testing)."""
    global _settings_instance
    _settings_instance = _load_settings()
    return _settings_instance
