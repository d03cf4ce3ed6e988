"""Implementation of the 'tag' command.

Interactively stages all changes, commits them as the release commit and
creates an annotated tag for the current manifest version.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

from auto_release.cli.output import ReleaseLogger, console_confirm
from auto_release.config import ReleaseConfig, load_config
from auto_release.exceptions import AutoReleaseError
from auto_release.project.manifest import Manifest
from auto_release.vcs import GitRepository

if TYPE_CHECKING:
    from auto_release.vcs import VcsGateway

Confirm = Callable[[str], bool]


def create_release_tag(
    repo: VcsGateway,
    version: str,
    config: ReleaseConfig,
    *,
    confirm: Confirm,
    dry_run: bool,
    log: ReleaseLogger,
) -> bool:
    """Commit and tag the release after confirmation.

    Args:
        repo: Version control gateway
        version: Version being released
        config: Release configuration (tag prefix)
        confirm: Asks a yes/no question, returns True for yes
        dry_run: Report the commit and tag without prompting or mutating
        log: Output logger

    Returns:
        True if the commit and tag were created
    """
    tag_name = config.tag_name(version)
    commit_message = config.commit_message(version)
    tag_message = config.tag_message(version)

    if dry_run:
        log.info(f'Would commit all changes with message: "{commit_message}"')
        log.info(f'Would create tag {tag_name} with message: "{tag_message}"')
        return False

    log.warn("This operation will perform git add, commit, and tag actions.")
    if not confirm(f"Are you sure you want to create a Git commit and tag for {tag_name}? (y/N): "):
        log.info("Aborted git tag creation, nothing changed.")
        return False

    repo.stage_all()
    repo.commit(commit_message)
    log.success(f'Git committed with message: "{commit_message}"')
    repo.create_tag(tag_name, tag_message)
    log.success(f"Git tag created: {tag_name}")
    return True


def run_tag(
    path: Path | None,
    *,
    dry_run: bool,
    log: ReleaseLogger | None = None,
    repo: VcsGateway | None = None,
    confirm: Confirm | None = None,
) -> None:
    """Run the tag command.

    Args:
        path: Optional path to project directory
        dry_run: Whether to only report the commit and tag
        log: Output logger
        repo: Version control gateway (defaults to git in the project directory)
        confirm: Confirmation prompt (defaults to reading a line from the console)
    """
    log = log or ReleaseLogger(dry_run=dry_run)
    project_path = path or Path.cwd()

    try:
        config = load_config(project_path)
        version = Manifest.load(project_path).version
        create_release_tag(
            repo or GitRepository(project_path),
            version,
            config,
            confirm=confirm or console_confirm,
            dry_run=dry_run,
            log=log,
        )
    except AutoReleaseError as e:
        log.error(str(e))
        raise SystemExit(1) from e
