"""package.json version manipulation.

This module provides functionality for reading and updating the version
in a JSON project manifest. The file is rewritten with 2-space indentation
and a trailing newline; key order is preserved.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from auto_release.config.loader import find_manifest, load_manifest_json
from auto_release.exceptions import FileIOError, VersionNotFoundError

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class Manifest:
    """A loaded package.json.

    Instances are immutable; with_version() returns a modified copy.
    """

    path: Path
    data: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def load(cls, path: Path) -> Manifest:
        """Load a manifest file.

        Args:
            path: Path to package.json or a directory to search upward from

        Raises:
            ConfigNotFoundError: If no manifest exists
            ConfigValidationError: If it is not a JSON object
            FileIOError: If it cannot be read
        """
        manifest_path = find_manifest(path) if path.is_dir() else path
        return cls(path=manifest_path, data=load_manifest_json(manifest_path))

    @property
    def version(self) -> str:
        """The manifest's version string.

        Raises:
            VersionNotFoundError: If the field is missing or empty
        """
        version = self.data.get("version")
        if not isinstance(version, str) or not version.strip():
            raise VersionNotFoundError(f'Missing "version" field in {self.path.name}')
        return version.strip()

    def with_version(self, new_version: str) -> Manifest:
        data = dict(self.data)
        data["version"] = new_version
        return Manifest(path=self.path, data=data)

    def dumps(self) -> str:
        return json.dumps(self.data, indent=2, ensure_ascii=False) + "\n"

    def save(self) -> Path:
        """Write the manifest back to disk.

        Raises:
            FileIOError: If the file cannot be written
        """
        try:
            self.path.write_text(self.dumps(), encoding="utf-8")
        except OSError as e:
            raise FileIOError(f"Failed to update package version: {e}") from e
        return self.path


def get_manifest_version(path: Path) -> str:
    """Get the version from package.json.

    Args:
        path: Path to package.json or directory to search from

    Returns:
        Version string

    Raises:
        VersionNotFoundError: If version cannot be found
    """
    return Manifest.load(path).version


def update_manifest_version(path: Path, new_version: str) -> Path:
    """Set the version in package.json and write it.

    Args:
        path: Path to package.json or directory containing it
        new_version: New version string to set

    Returns:
        Path to the updated package.json
    """
    return Manifest.load(path).with_version(new_version).save()
