"""Statusboard configuration system."""

from statusboard.config.loader import find_config_file, load_config
from statusboard.config.models import AuthConfig, PagerDutyConfig, StatusboardConfig, normalize_subdomain

__all__ = [
    "AuthConfig",
    "PagerDutyConfig",
    "StatusboardConfig",
    "load_config",
    "find_config_file",
    "normalize_subdomain",
]
