"""Semantic version parsing and bumping.

Versions are plain ``major.minor.patch`` triples. Parsing is lenient:
a leading ``v`` is dropped, missing or non-numeric segments become 0,
and anything after the third segment is ignored. Parsing never fails.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_LEADING_DIGITS = re.compile(r"^\s*(\d+)")


class BumpType(str, Enum):
    """Magnitude of the next version increment implied by a set of commits."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    NONE = "none"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class Version:
    """An immutable ``major.minor.patch`` version.

    Ordering compares (major, minor, patch) lexicographically.
    """

    major: int = 0
    minor: int = 0
    patch: int = 0

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    @classmethod
    def parse(cls, text: str | None) -> Version:
        """Parse a version string. See :func:`parse_version`."""
        return parse_version(text)

    def bump(self, bump_type: BumpType) -> Version:
        """Return the next version for the given bump type.

        Lower components are reset to zero.

        Raises:
            ValueError: If bump_type is NONE; callers must check first.
        """
        if bump_type is BumpType.MAJOR:
            return Version(self.major + 1, 0, 0)
        if bump_type is BumpType.MINOR:
            return Version(self.major, self.minor + 1, 0)
        if bump_type is BumpType.PATCH:
            return Version(self.major, self.minor, self.patch + 1)
        raise ValueError(f"Unknown bump version type: {bump_type}")


def _coerce(segment: str) -> int:
    match = _LEADING_DIGITS.match(segment)
    return int(match.group(1)) if match else 0


def parse_version(text: str | None) -> Version:
    """Parse a version string into a Version.

    Examples:
        "1.2.3"  -> 1.2.3
        "v2.5"   -> 2.5.0
        "1.x.3"  -> 1.0.3
        ""       -> 0.0.0
    """
    if not text:
        return Version()

    stripped = text[1:] if text.startswith("v") else text
    parts = [_coerce(part) for part in stripped.split(".")[:3]]
    while len(parts) < 3:
        parts.append(0)
    return Version(*parts)


def is_strictly_greater(a: Version, b: Version) -> bool:
    """Return True if ``a`` sorts strictly after ``b``."""
    return (a.major, a.minor, a.patch) > (b.major, b.minor, b.patch)


def increment(base: Version, bump_type: BumpType) -> Version:
    """Functional alias for :meth:`Version.bump`."""
    return base.bump(bump_type)
