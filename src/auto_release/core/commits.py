"""Conventional commit parsing and bump detection.

Only the header grammar ``type(scope): subject`` is recognized; the first
body line rides along in the subject.
Everything here is pure: it works on message strings and never touches git.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from auto_release.core.version import BumpType

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

# Recognized commit types and their changelog section titles, in display order.
COMMIT_TYPES: dict[str, str] = {
    "feat": "Features",
    "fix": "Bug Fixes",
}

BREAKING_MARKERS = ("BREAKING CHANGE", "BREAKING CHANGES")

COMMIT_PATTERN = re.compile(r"^(\w+)(?:\(([^)]+)\))?:\s*(.+)$")
FEAT_PATTERN = re.compile(r"^feat(\([^)]+\))?!?:")
FIX_PATTERN = re.compile(r"^fix(\([^)]+\))?!?:")

_PARAGRAPH_SPLIT = re.compile(r"\n\s*\n")


def log_line(message: str) -> str:
    """Collapse a full commit message to ``<header> <first body line>``."""
    lines = [line.strip() for line in message.strip().splitlines()]
    if not lines:
        return ""
    header, body = lines[0], next((line for line in lines[1:] if line), "")
    return f"{header} {body}" if body else header


@dataclass(frozen=True)
class ParsedCommit:
    """A commit subject decomposed into type, scope and subject."""

    commit_type: str
    subject: str
    scope: str | None = None

    @classmethod
    def from_message(cls, message: str) -> ParsedCommit | None:
        """Parse a commit message as its one-line log form.

        The header line and the first non-blank body line are joined with a
        space, so body references such as ``Closes #12`` stay in the subject.

        Returns None when the header does not follow the conventional format.
        """
        match = COMMIT_PATTERN.match(log_line(message))
        if not match:
            return None

        commit_type, scope, subject = match.groups()
        return cls(commit_type=commit_type, scope=scope or None, subject=subject.strip())

    @property
    def is_changelog_type(self) -> bool:
        """Whether this commit's type has a changelog section."""
        return self.commit_type in COMMIT_TYPES


def parse_commit(message: str) -> ParsedCommit | None:
    """Parse a single commit message. See :meth:`ParsedCommit.from_message`."""
    return ParsedCommit.from_message(message)


def parse_commits(messages: Iterable[str]) -> list[ParsedCommit]:
    """Parse messages, silently dropping those that are not conventional."""
    parsed = (ParsedCommit.from_message(message) for message in messages)
    return [pc for pc in parsed if pc is not None]


def _paragraphs(messages: Sequence[str]) -> list[str]:
    blocks: list[str] = []
    for message in messages:
        blocks.extend(block.strip() for block in _PARAGRAPH_SPLIT.split(message))
    return [block for block in blocks if block]


def calculate_bump(messages: Sequence[str]) -> BumpType:
    """Determine the version bump implied by a set of full commit messages.

    Each message is split into paragraphs. The whole set is scanned once
    per level, so precedence is MAJOR > MINOR > PATCH > NONE regardless of
    which commit carried the marker:

    - any paragraph containing ``BREAKING CHANGE(S)`` -> MAJOR
    - any paragraph starting with ``feat:`` / ``feat(scope):`` -> MINOR
    - any paragraph starting with ``fix:`` / ``fix(scope):`` -> PATCH

    The ``!`` suffix is accepted but carries no weight of its own:
    ``feat!:`` without the marker text is still MINOR.
    """
    if not messages:
        return BumpType.NONE

    blocks = _paragraphs(messages)

    if any(marker in block for block in blocks for marker in BREAKING_MARKERS):
        return BumpType.MAJOR

    if any(FEAT_PATTERN.match(block) for block in blocks):
        return BumpType.MINOR

    if any(FIX_PATTERN.match(block) for block in blocks):
        return BumpType.PATCH

    return BumpType.NONE


def group_commits_by_type(commits: Iterable[ParsedCommit]) -> dict[str, list[str]]:
    """Bucket subjects by commit type.

    Buckets follow COMMIT_TYPES order and exist for every recognized type,
    even when empty. Unrecognized types are dropped. Subjects keep the order
    in which the commits were given.
    """
    grouped: dict[str, list[str]] = {commit_type: [] for commit_type in COMMIT_TYPES}
    for pc in commits:
        if pc.is_changelog_type and pc.subject:
            grouped[pc.commit_type].append(pc.subject)
    return grouped
