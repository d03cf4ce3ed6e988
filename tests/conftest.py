"""Shared fixtures for auto-release tests."""

from __future__ import annotations

import io
import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import pytest
from rich.console import Console

from auto_release.cli.output import ReleaseLogger
from auto_release.exceptions import VcsError

if TYPE_CHECKING:
    from pathlib import Path


@dataclass
class FakeRepository:
    """In-memory stand-in for GitRepository.

    ``tags`` are most recent first; ``commits`` maps a tag (or None for the
    whole history) to the messages after it, oldest first.
    """

    remote: str | None = "git@github.com:octo/widgets.git"
    tags: list[str] = field(default_factory=list)
    commits: dict[str | None, list[str]] = field(default_factory=dict)
    calls: list[tuple[str, ...]] = field(default_factory=list)
    fail_on: set[str] = field(default_factory=set)

    def _check(self, operation: str) -> None:
        if operation in self.fail_on:
            raise VcsError(f"git {operation} failed with exit code 1", stderr="fatal: boom")

    def remote_url(self) -> str:
        if self.remote is None:
            raise VcsError("Failed to get repository URL: no origin remote configured")
        return self.remote

    def list_tags(self) -> list[str]:
        return list(self.tags)

    def latest_tag(self) -> str | None:
        return self.tags[0] if self.tags else None

    def commit_messages(self, since: str | None = None) -> list[str]:
        self.calls.append(("log", since or ""))
        return list(self.commits.get(since, []))

    def stage_all(self) -> None:
        self._check("add")
        self.calls.append(("add",))

    def commit(self, message: str) -> None:
        self._check("commit")
        self.calls.append(("commit", message))

    def create_tag(self, name: str, message: str) -> None:
        self._check("tag")
        self.calls.append(("tag", name, message))

    @property
    def mutations(self) -> list[tuple[str, ...]]:
        return [call for call in self.calls if call[0] != "log"]


class CapturedLogger(ReleaseLogger):
    """ReleaseLogger writing to in-memory buffers."""

    def __init__(self, *, dry_run: bool = False) -> None:
        self.out = io.StringIO()
        self.err = io.StringIO()
        super().__init__(
            Console(file=self.out, width=200, color_system=None),
            Console(file=self.err, width=200, color_system=None),
            dry_run=dry_run,
        )

    @property
    def output(self) -> str:
        return self.out.getvalue()

    @property
    def errors(self) -> str:
        return self.err.getvalue()


def write_manifest(directory: Path, data: dict) -> Path:
    path = directory / "package.json"
    path.write_text(json.dumps(data, indent=2) + "\n")
    return path


@pytest.fixture
def make_repo() -> type[FakeRepository]:
    """The FakeRepository class, for tests that build their own history."""
    return FakeRepository


@pytest.fixture
def make_manifest():
    """Write a package.json into a directory."""
    return write_manifest


@pytest.fixture
def make_logger() -> type[CapturedLogger]:
    return CapturedLogger


@pytest.fixture
def fake_repo() -> FakeRepository:
    """A repository with one tag and two conventional commits after it."""
    return FakeRepository(
        tags=["v1.1.0", "v1.0.0"],
        commits={"v1.1.0": ["feat: add login", "fix(ui): button spacing"]},
    )


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A project directory holding a package.json at version 1.2.0."""
    write_manifest(tmp_path, {"name": "widgets", "version": "1.2.0", "private": True})
    return tmp_path


@pytest.fixture
def log() -> CapturedLogger:
    return CapturedLogger()


@pytest.fixture
def dry_log() -> CapturedLogger:
    return CapturedLogger(dry_run=True)
