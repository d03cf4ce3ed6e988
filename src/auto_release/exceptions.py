"""Exception hierarchy for auto-release.

Every error raised by the library derives from AutoReleaseError, so the
CLI layer can catch once, report a single line and exit with status 1.
"""

from __future__ import annotations


class AutoReleaseError(Exception):
    """Base class for all auto-release errors."""


# =============================================================================
# Configuration
# =============================================================================


class ConfigurationError(AutoReleaseError):
    """Project configuration is missing or invalid."""


class ConfigNotFoundError(ConfigurationError):
    """The project manifest could not be located."""


class ConfigValidationError(ConfigurationError):
    """The manifest or its auto-release section failed validation."""


class VersionNotFoundError(ConfigurationError):
    """The manifest has no usable version field."""


class RemoteUrlError(ConfigurationError):
    """The origin remote URL is not in a supported format."""


# =============================================================================
# Version control
# =============================================================================


class VcsError(AutoReleaseError):
    """A git query or mutation exited with a non-zero status."""

    def __init__(
        self,
        message: str,
        *,
        command: list[str] | None = None,
        returncode: int | None = None,
        stderr: str | None = None,
    ) -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr.strip() if stderr else None
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        if self.stderr:
            return f"{message}: {self.stderr}"
        return message


# =============================================================================
# Release policy and file access
# =============================================================================


class VersioningPolicyError(AutoReleaseError):
    """The manifest version is not strictly greater than the latest tag."""


class FileIOError(AutoReleaseError):
    """A project file could not be read or written."""
