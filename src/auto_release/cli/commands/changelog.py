"""Implementation of the 'changelog' command.

The changelog command renders a section for the current manifest version
from the commits since the latest tag and merges it into CHANGELOG.md.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from auto_release.cli.output import ReleaseLogger
from auto_release.config import ReleaseConfig, is_ci, load_config
from auto_release.core.changelog import build_release_info, merge_changelog, render_changelog
from auto_release.core.commits import group_commits_by_type, parse_commits
from auto_release.core.version import is_strictly_greater, parse_version
from auto_release.exceptions import AutoReleaseError, FileIOError, VersioningPolicyError
from auto_release.project.manifest import Manifest
from auto_release.vcs import GitRepository, parse_remote_url

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import date

    from auto_release.core.changelog import ChangelogDocument
    from auto_release.vcs import VcsGateway


def check_version_order(version: str, last_tag: str | None) -> None:
    """Require the manifest version to be newer than the latest tag.

    Raises:
        VersioningPolicyError: If version is not strictly greater
    """
    if last_tag is None:
        return
    if not is_strictly_greater(parse_version(version), parse_version(last_tag)):
        raise VersioningPolicyError(
            f'Version "{version}" is not greater than last tag "{last_tag}"'
        )


def _read_existing(path: Path) -> str | None:
    if not path.exists():
        return None
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise FileIOError(f"Failed to read {path}: {e}") from e


def _write(path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise FileIOError(f"Failed to write changelog: {e}") from e


def update_changelog(
    repo: VcsGateway,
    manifest: Manifest,
    config: ReleaseConfig,
    *,
    dry_run: bool,
    log: ReleaseLogger,
    environ: Mapping[str, str] | None = None,
    today: date | None = None,
) -> ChangelogDocument:
    """Render the release section and merge it into the changelog.

    Args:
        repo: Version control gateway
        manifest: Loaded project manifest
        config: Release configuration
        dry_run: Print the results instead of writing files
        log: Output logger
        environ: Environment used for CI detection (defaults to os.environ)
        today: Release date (defaults to the current date)

    Returns:
        The rendered ChangelogDocument

    Raises:
        AutoReleaseError: If any step fails
    """
    repo_info = parse_remote_url(repo.remote_url())
    version = manifest.version

    tags = repo.list_tags()
    last_tag = tags[0] if tags else None
    if last_tag is None:
        log.warn("No tags found. Creating initial changelog...")

    check_version_order(version, last_tag)

    info = build_release_info(version, last_tag, repo_info.url, today=today)
    commits = parse_commits(repo.commit_messages(since=last_tag))
    document = render_changelog(info, group_commits_by_type(commits), repo_info.url)

    root = manifest.path.parent
    changelog_path = root / config.changelog_path
    release_notes_path = root / config.release_notes_path
    content = merge_changelog(_read_existing(changelog_path), document.full)

    if dry_run:
        log.block("Changelog would be updated with:", content)
        log.block("Release notes would be updated with:", document.release_notes)
        return document

    _write(changelog_path, content)

    if is_ci(config, environ):
        _write(release_notes_path, document.release_notes)
    else:
        log.info(f"Skipping {config.release_notes_path} generation in local environment...")

    log.success(f"Successfully updated {config.changelog_path}")
    return document


def run_changelog(
    path: Path | None,
    *,
    dry_run: bool,
    log: ReleaseLogger | None = None,
    repo: VcsGateway | None = None,
) -> None:
    """Run the changelog command.

    Args:
        path: Optional path to project directory
        dry_run: Whether to print instead of writing files
        log: Output logger
        repo: Version control gateway (defaults to git in the project directory)
    """
    log = log or ReleaseLogger(dry_run=dry_run)
    project_path = path or Path.cwd()

    log.info("Starting changelog update process...")
    try:
        config = load_config(project_path)
        manifest = Manifest.load(project_path)
        update_changelog(
            repo or GitRepository(project_path),
            manifest,
            config,
            dry_run=dry_run,
            log=log,
        )
    except AutoReleaseError as e:
        log.error(str(e))
        raise SystemExit(1) from e
