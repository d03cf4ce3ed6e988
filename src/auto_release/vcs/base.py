"""Version control gateway interface and remote URL parsing."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from auto_release.exceptions import RemoteUrlError

_SSH_REMOTE = re.compile(r"^git@([^:]+):(.+)\.git$")
_HTTPS_REPO = re.compile(r"^https://([^/]+)/([^/]+)/([^/]+)$")


@dataclass(frozen=True)
class RepoInfo:
    """Hosting platform coordinates of a repository."""

    owner: str
    name: str
    url: str


@runtime_checkable
class VcsGateway(Protocol):
    """Everything auto-release needs from version control.

    Queries return plain strings; any failure raises VcsError.
    """

    def remote_url(self) -> str: ...

    def list_tags(self) -> list[str]: ...

    def latest_tag(self) -> str | None: ...

    def commit_messages(self, since: str | None = None) -> list[str]: ...

    def stage_all(self) -> None: ...

    def commit(self, message: str) -> None: ...

    def create_tag(self, name: str, message: str) -> None: ...


def normalize_remote_url(remote_url: str) -> str:
    """Turn an origin URL into an https base URL.

    ``git@host:owner/repo.git`` becomes ``https://host/owner/repo``;
    ``https://host/owner/repo.git`` loses its ``.git`` suffix.

    Raises:
        RemoteUrlError: For any other URL form
    """
    if remote_url.startswith("git@"):
        match = _SSH_REMOTE.match(remote_url)
        if match:
            host, path = match.groups()
            return f"https://{host}/{path}"

    if remote_url.startswith("https://"):
        return re.sub(r"\.git$", "", remote_url)

    raise RemoteUrlError(f"Unsupported remote URL format: {remote_url}")


def parse_remote_url(remote_url: str) -> RepoInfo:
    """Resolve owner, name and base URL from an origin URL.

    Raises:
        RemoteUrlError: If the URL is unsupported or not ``host/owner/name``
    """
    repo_url = normalize_remote_url(remote_url.strip())
    match = _HTTPS_REPO.match(repo_url)
    if not match:
        raise RemoteUrlError(f"Could not parse repository owner and name from URL: {repo_url}")

    _, owner, name = match.groups()
    return RepoInfo(owner=owner, name=name, url=repo_url)
