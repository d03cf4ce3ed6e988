"""Core business logic for auto-release.

This module contains the fundamental building blocks:
- Version parsing and bumping
- Conventional commit parsing and bump detection
- Changelog rendering and merging
"""

from __future__ import annotations

from auto_release.core.changelog import (
    ChangelogDocument,
    ReleaseInfo,
    build_release_info,
    link_pull_requests,
    merge_changelog,
    render_changelog,
)
from auto_release.core.commits import (
    COMMIT_TYPES,
    ParsedCommit,
    calculate_bump,
    group_commits_by_type,
    parse_commit,
    parse_commits,
)
from auto_release.core.version import (
    BumpType,
    Version,
    increment,
    is_strictly_greater,
    parse_version,
)

__all__ = [
    # Commits
    "COMMIT_TYPES",
    # Version
    "BumpType",
    # Changelog
    "ChangelogDocument",
    "ParsedCommit",
    "ReleaseInfo",
    "Version",
    "build_release_info",
    "calculate_bump",
    "group_commits_by_type",
    "increment",
    "is_strictly_greater",
    "link_pull_requests",
    "merge_changelog",
    "parse_commit",
    "parse_commits",
    "parse_version",
    "render_changelog",
]
