"""Project manifest access."""

from __future__ import annotations

from auto_release.project.manifest import Manifest, get_manifest_version, update_manifest_version

__all__ = [
    "Manifest",
    "get_manifest_version",
    "update_manifest_version",
]
