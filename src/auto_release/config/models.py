"""Configuration models for auto-release.

Settings live in an optional ``"auto-release"`` object inside the project's
package.json. Every field has a default, so a project without that object
gets the stock layout.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class ReleaseConfig(BaseModel):
    """Root configuration."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    changelog_path: Path = Field(
        default=Path("CHANGELOG.md"),
        description="Changelog file, relative to the project root",
    )
    release_notes_path: Path = Field(
        default=Path(".RELEASE_NOTES.md"),
        description="Single-release notes file written in CI",
    )
    ci_env_var: str = Field(
        default="GITHUB_ACTIONS",
        min_length=1,
        description="Environment variable that is 'true' when running in CI",
    )
    tag_prefix: str = Field(
        default="v",
        description="Prefix for tags created by the tag command",
    )

    def tag_name(self, version: str) -> str:
        return f"{self.tag_prefix}{version}"

    def commit_message(self, version: str) -> str:
        return f"chore: release {self.tag_name(version)}"

    def tag_message(self, version: str) -> str:
        return f"release {self.tag_name(version)}"
