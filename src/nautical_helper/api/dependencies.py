"""Dependency wiring for API service."""
from __future__ import annotations

from functools import lru_cache

from nautical_helper.core.config import HelperConfig, get_config


@lru_cache(maxsize=1)
def get_settings() -> HelperConfig:
    return get_config()
