"""Git implementation of the version control gateway.

Each method runs one git subprocess in the repository directory and
returns its stripped stdout. Non-zero exits are raised as VcsError with
git's stderr attached.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from auto_release.exceptions import VcsError

logger = logging.getLogger(__name__)

# Separates commits in `git log` output; bodies may contain blank lines.
RECORD_SEPARATOR = "\x1e"
LOG_FORMAT = "--format=%s%n%n%b%x1e"

_NO_TAG_MARKERS = ("No names found", "No tags can describe", "cannot describe")


class GitRepository:
    """A git working tree driven through the ``git`` executable."""

    def __init__(self, path: Path | str | None = None) -> None:
        self.path = Path(path) if path is not None else Path.cwd()

    def __repr__(self) -> str:
        return f"GitRepository({str(self.path)!r})"

    def _run(self, *args: str, check: bool = True) -> subprocess.CompletedProcess[str]:
        command = ["git", *args]
        logger.debug("Running %s in %s", " ".join(command), self.path)
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                check=False,
                cwd=self.path,
            )
        except FileNotFoundError as e:
            raise VcsError("git executable not found", command=command) from e

        if check and result.returncode != 0:
            raise VcsError(
                f"git {args[0]} failed with exit code {result.returncode}",
                command=command,
                returncode=result.returncode,
                stderr=result.stderr,
            )
        return result

    def _git(self, *args: str) -> str:
        return self._run(*args).stdout.strip()

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def remote_url(self) -> str:
        """Return the origin remote URL.

        Raises:
            VcsError: If no origin remote is configured
        """
        result = self._run("config", "--get", "remote.origin.url", check=False)
        url = result.stdout.strip()
        if result.returncode != 0 or not url:
            raise VcsError(
                "Failed to get repository URL: no origin remote configured",
                command=["git", "config", "--get", "remote.origin.url"],
                returncode=result.returncode,
                stderr=result.stderr,
            )
        return url

    def list_tags(self) -> list[str]:
        """Return all tag names, most recently created first."""
        output = self._git("tag", "--sort=-creatordate")
        return [line.strip() for line in output.splitlines() if line.strip()]

    def latest_tag(self) -> str | None:
        """Return the most recent tag reachable from HEAD, or None."""
        result = self._run("describe", "--tags", "--abbrev=0", check=False)
        if result.returncode == 0:
            return result.stdout.strip() or None

        if any(marker in result.stderr for marker in _NO_TAG_MARKERS):
            logger.debug("No reachable tag: %s", result.stderr.strip())
            return None

        raise VcsError(
            f"git describe failed with exit code {result.returncode}",
            command=["git", "describe", "--tags", "--abbrev=0"],
            returncode=result.returncode,
            stderr=result.stderr,
        )

    def commit_messages(self, since: str | None = None) -> list[str]:
        """Return full commit messages in ``(since, HEAD]``, oldest first.

        Args:
            since: Tag to start after; None for the whole history

        Returns:
            One string per commit, subject and body separated by a blank line
        """
        args = ["log"]
        if since:
            args.append(f"{since}..HEAD")
        args.extend(["--reverse", LOG_FORMAT])

        output = self._git(*args)
        messages = [record.strip() for record in output.split(RECORD_SEPARATOR)]
        return [message for message in messages if message]

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def stage_all(self) -> None:
        """Stage every change in the working tree."""
        self._run("add", "./")

    def commit(self, message: str) -> None:
        """Create a commit from the staged changes."""
        self._run("commit", "-m", message)

    def create_tag(self, name: str, message: str) -> None:
        """Create an annotated tag at HEAD."""
        self._run("tag", "-a", name, "-m", message)
