"""Configuration loading from package.json.

The manifest is located by walking up from the project directory. Its
optional ``"auto-release"`` object is validated into a ReleaseConfig.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from auto_release.config.models import ReleaseConfig
from auto_release.exceptions import ConfigNotFoundError, ConfigValidationError, FileIOError

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "package.json"
CONFIG_KEY = "auto-release"


def find_manifest(start: Path | None = None) -> Path:
    """Find package.json by searching upward from ``start``.

    Args:
        start: Directory to start from (defaults to cwd)

    Returns:
        Path to package.json

    Raises:
        ConfigNotFoundError: If no manifest exists in start or its parents
    """
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / MANIFEST_FILENAME
        if candidate.is_file():
            logger.debug("Found manifest at %s", candidate)
            return candidate

    raise ConfigNotFoundError(f"Could not find {MANIFEST_FILENAME} in {current} or any parent")


def load_manifest_json(path: Path) -> dict[str, Any]:
    """Read and decode a JSON manifest.

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigValidationError: If it is not a JSON object
        FileIOError: If it cannot be read
    """
    if not path.is_file():
        raise ConfigNotFoundError(f"Manifest not found: {path}")

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise FileIOError(f"Failed to read {path}: {e}") from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigValidationError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigValidationError(f"Expected a JSON object in {path}")
    return data


def extract_release_config(manifest: Mapping[str, Any]) -> dict[str, Any]:
    """Return the manifest's auto-release section, or an empty dict."""
    section = manifest.get(CONFIG_KEY, {})
    if not isinstance(section, dict):
        raise ConfigValidationError(f'"{CONFIG_KEY}" in {MANIFEST_FILENAME} must be an object')
    return dict(section)


def load_config(project_path: Path | None = None) -> ReleaseConfig:
    """Load configuration for the project at ``project_path``.

    Raises:
        ConfigNotFoundError: If package.json cannot be found
        ConfigValidationError: If the auto-release section is invalid
    """
    manifest_path = find_manifest(project_path)
    raw = extract_release_config(load_manifest_json(manifest_path))
    try:
        return ReleaseConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid {CONFIG_KEY} configuration: {e}") from e


def is_ci(config: ReleaseConfig, environ: Mapping[str, str] | None = None) -> bool:
    """Whether the CI signal variable is set to ``true``."""
    env = os.environ if environ is None else environ
    return env.get(config.ci_env_var) == "true"
