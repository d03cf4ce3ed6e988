"""Version control integration."""

from __future__ import annotations

from auto_release.vcs.base import RepoInfo, VcsGateway, normalize_remote_url, parse_remote_url
from auto_release.vcs.git import GitRepository

__all__ = [
    "GitRepository",
    "RepoInfo",
    "VcsGateway",
    "normalize_remote_url",
    "parse_remote_url",
]
