"""Implementation of the 'version' command.

The version command bumps the manifest version according to the
conventional commits made since the latest tag.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from auto_release.cli.output import ReleaseLogger
from auto_release.core.commits import calculate_bump
from auto_release.core.version import BumpType, parse_version
from auto_release.exceptions import AutoReleaseError
from auto_release.project.manifest import Manifest
from auto_release.vcs import GitRepository

if TYPE_CHECKING:
    from auto_release.vcs import VcsGateway


def bump_version(
    repo: VcsGateway,
    manifest: Manifest,
    *,
    dry_run: bool,
    log: ReleaseLogger,
) -> str | None:
    """Compute the next version and write it to the manifest.

    Args:
        repo: Version control gateway
        manifest: Loaded project manifest
        dry_run: Report the next version without writing
        log: Output logger

    Returns:
        The new version, or None when there is nothing to release

    Raises:
        AutoReleaseError: If any step fails
    """
    current_version = manifest.version

    # The first tag has to be created by hand, after an initial changelog.
    if not repo.list_tags():
        log.warn(
            "No tags found. Please run the changelog command to init CHANGELOG.md first, "
            "then create the first tag."
        )
        return None

    commits = repo.commit_messages(since=repo.latest_tag())
    bump_type = calculate_bump(commits)

    if bump_type is BumpType.NONE:
        log.warn("No new commits or version bump required. Skipping...")
        return None

    next_version = str(parse_version(current_version).bump(bump_type))

    if dry_run:
        log.info(
            f"Version would be updated from {current_version} to {next_version} "
            f"({bump_type} bump)"
        )
        return next_version

    manifest.with_version(next_version).save()
    log.success(f"Successfully updated version to v{next_version}")
    return next_version


def run_version(
    path: Path | None,
    *,
    dry_run: bool,
    log: ReleaseLogger | None = None,
    repo: VcsGateway | None = None,
) -> None:
    """Run the version command.

    Args:
        path: Optional path to project directory
        dry_run: Whether to skip writing the manifest
        log: Output logger
        repo: Version control gateway (defaults to git in the project directory)
    """
    log = log or ReleaseLogger(dry_run=dry_run)
    project_path = path or Path.cwd()

    try:
        manifest = Manifest.load(project_path)
        bump_version(
            repo or GitRepository(project_path),
            manifest,
            dry_run=dry_run,
            log=log,
        )
    except AutoReleaseError as e:
        log.error(str(e))
        raise SystemExit(1) from e
