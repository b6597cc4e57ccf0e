"""Configuration module: settings and constants."""

from sorted_search.config.constants import (
    DEFAULT_COMPARATOR,
    NOT_FOUND,
    SUPPORTED_COMPARATORS,
    parse_comparator_name,
)
from sorted_search.config.settings import (
    DisplaySettings,
    SearchSettings,
    Settings,
    get_settings,
    reload_settings,
)

__all__ = [
    # Constants
    "NOT_FOUND",
    "SUPPORTED_COMPARATORS",
    "DEFAULT_COMPARATOR",
    "parse_comparator_name",
    # Settings
    "Settings",
    "SearchSettings",
    "DisplaySettings",
    "get_settings",
    "reload_settings",
]
