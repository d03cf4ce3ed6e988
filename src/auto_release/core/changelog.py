"""Changelog rendering and merging.

Builds a markdown section for one release from grouped commit subjects,
and merges it into an existing CHANGELOG.md. The rendered layout is::

    ## Changelog

    ### [1.3.0](https://host/owner/repo/compare/v1.2.0...v1.3.0) (2024-05-01)

    #### Features

    - add login ([#12](https://host/owner/repo/pull/12))

The ``## Changelog`` title line is the anchor used for merging: a new
section replaces it, so the newest release always sits on top.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

from auto_release.core.commits import COMMIT_TYPES

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

CHANGELOG_TITLE = "## Changelog\n"
NO_CHANGES_BULLET = "- No significant changes (initial release or maintenance update)."

_PR_REFERENCE = re.compile(r"\(#(\d+)\)|#(\d+)")
_TITLE_LINE = re.compile(r"^## Changelog\n+")
_VERSION_LINE = re.compile(r"^###\s.*\n+")


@dataclass(frozen=True)
class ReleaseInfo:
    """Version, release date and optional compare link for one release."""

    version: str
    date: date
    compare_url: str | None = None


@dataclass(frozen=True)
class ChangelogDocument:
    """A rendered release section plus its release-notes excerpt."""

    full: str
    release_notes: str


def compare_url(repo_url: str, last_tag: str, version: str) -> str:
    """Build the hosting platform compare link between two tags.

    The new tag uses a ``v`` prefix only when the last tag has one.
    """
    new_tag = f"v{version}" if last_tag.startswith("v") else version
    return f"{repo_url}/compare/{last_tag}...{new_tag}"


def build_release_info(
    version: str,
    last_tag: str | None,
    repo_url: str,
    today: date | None = None,
) -> ReleaseInfo:
    """Create ReleaseInfo for ``version``.

    Args:
        version: Manifest version, with or without a leading ``v``
        last_tag: Most recent tag, or None for the initial changelog
        repo_url: Base https URL of the repository
        today: Release date; defaults to the current local date

    Returns:
        ReleaseInfo with a compare URL only when a last tag exists
    """
    normalized = version[1:] if version.startswith("v") else version
    return ReleaseInfo(
        version=normalized,
        date=today or date.today(),
        compare_url=compare_url(repo_url, last_tag, normalized) if last_tag else None,
    )


def link_pull_requests(text: str, repo_url: str) -> str:
    """Rewrite ``(#123)`` and ``#123`` references into pull request links."""

    def _replace(match: re.Match[str]) -> str:
        number = match.group(1) or match.group(2)
        return f"([#{number}]({repo_url}/pull/{number}))"

    return _PR_REFERENCE.sub(_replace, text)


def _version_heading(info: ReleaseInfo) -> str:
    released = info.date.isoformat()
    if info.compare_url:
        return f"\n### [{info.version}]({info.compare_url}) ({released})\n"
    return f"\n### {info.version} ({released})\n"


def render_changelog(
    info: ReleaseInfo,
    grouped: Mapping[str, Sequence[str]],
    repo_url: str,
) -> ChangelogDocument:
    """Render one release section.

    Args:
        info: Release version, date and compare link
        grouped: Subjects per commit type, as produced by group_commits_by_type
        repo_url: Base URL used for pull request links

    Returns:
        ChangelogDocument with the full section and its release notes
    """
    content = CHANGELOG_TITLE + _version_heading(info)

    if not any(grouped.values()):
        content += f"\n{NO_CHANGES_BULLET}\n"
        return ChangelogDocument(full=content, release_notes=content)

    for commit_type, subjects in grouped.items():
        if not subjects:
            continue
        title = COMMIT_TYPES.get(commit_type, commit_type)
        bullets = "\n".join(f"- {link_pull_requests(subject, repo_url)}" for subject in subjects)
        content += f"\n#### {title}\n\n{bullets}\n"

    release_notes = _VERSION_LINE.sub("", _TITLE_LINE.sub("", content, count=1), count=1)
    return ChangelogDocument(full=content, release_notes=release_notes)


def merge_changelog(existing: str | None, section: str) -> str:
    """Merge a freshly rendered section into an existing changelog.

    - no existing file: the section itself
    - existing file with the title line: title replaced by the section
    - existing file without it: section prepended
    """
    if existing is None:
        return section
    if CHANGELOG_TITLE in existing:
        return existing.replace(CHANGELOG_TITLE, section, 1)
    return section + existing
