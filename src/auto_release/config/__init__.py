"""Configuration management for auto-release."""

from __future__ import annotations

from auto_release.config.loader import find_manifest, is_ci, load_config
from auto_release.config.models import ReleaseConfig

__all__ = [
    "ReleaseConfig",
    "find_manifest",
    "is_ci",
    "load_config",
]
