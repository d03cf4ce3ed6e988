"""auto-release: conventional-commit release bookkeeping.

Bumps the package.json version, maintains CHANGELOG.md and creates the
release commit and tag.
"""

from __future__ import annotations

__version__ = "1.0.0"
