"""Command-line interface for auto-release.

``main`` is the console script entry point. It looks for ``--dry-run``
anywhere in the arguments, routes the first positional argument to a
subcommand and prints a usage line for anything it does not recognize.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer

from auto_release.cli.commands.changelog import run_changelog
from auto_release.cli.commands.tag import run_tag
from auto_release.cli.commands.version import run_version
from auto_release.cli.output import configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence

PROG_NAME = "auto-release"
DRY_RUN_FLAG = "--dry-run"
COMMANDS = ("version", "changelog", "tag")
VALUE_OPTIONS = ("--path", "-p")
USAGE = f"Usage: {PROG_NAME} <{'|'.join(COMMANDS)}> [{DRY_RUN_FLAG}]"

app = typer.Typer(
    name=PROG_NAME,
    add_completion=False,
    no_args_is_help=True,
    help="Conventional-commit driven version bumps, changelogs and release tags.",
)

PathOption = Annotated[
    Path | None,
    typer.Option(
        "--path",
        "-p",
        help="Project directory (defaults to the current directory).",
        file_okay=False,
    ),
]
DryRunOption = Annotated[
    bool,
    typer.Option(DRY_RUN_FLAG, help="Report intended changes without writing anything."),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Show git commands and other debug output."),
]


@app.command("version")
def version_command(
    path: PathOption = None,
    dry_run: DryRunOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Bump the package.json version from commits since the last tag."""
    configure_logging(verbose)
    run_version(path, dry_run=dry_run)


@app.command("changelog")
def changelog_command(
    path: PathOption = None,
    dry_run: DryRunOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Add a section for the current version to CHANGELOG.md."""
    configure_logging(verbose)
    run_changelog(path, dry_run=dry_run)


@app.command("tag")
def tag_command(
    path: PathOption = None,
    dry_run: DryRunOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Commit all changes and create an annotated release tag."""
    configure_logging(verbose)
    run_tag(path, dry_run=dry_run)


def normalize_args(argv: Sequence[str]) -> list[str] | None:
    """Reorder arguments for the typer app.

    Options given before the command are moved after it.

    Returns None when the first positional argument is not a known command.
    """
    args = [arg for arg in argv if arg != DRY_RUN_FLAG]
    leading: list[str] = []
    while args and args[0].startswith("-"):
        option = args.pop(0)
        leading.append(option)
        if option in VALUE_OPTIONS and args:
            leading.append(args.pop(0))
    if not args or args[0] not in COMMANDS:
        return None
    args[1:1] = leading
    if DRY_RUN_FLAG in argv:
        args.append(DRY_RUN_FLAG)
    return args


def main(argv: Sequence[str] | None = None) -> None:
    """Console script entry point."""
    args = normalize_args(sys.argv[1:] if argv is None else argv)
    if args is None:
        typer.echo(USAGE)
        return
    app(args=args, prog_name=PROG_NAME)
