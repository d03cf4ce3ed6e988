"""Unit tests for the git gateway and remote URL parsing."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import MagicMock, patch

import pytest

from auto_release.exceptions import RemoteUrlError, VcsError
from auto_release.vcs import GitRepository, RepoInfo, VcsGateway, parse_remote_url
from auto_release.vcs.base import normalize_remote_url

if TYPE_CHECKING:
    from pathlib import Path


def completed(stdout: str = "", stderr: str = "", returncode: int = 0) -> MagicMock:
    return MagicMock(stdout=stdout, stderr=stderr, returncode=returncode)


@pytest.fixture
def repo(tmp_path: Path) -> GitRepository:
    return GitRepository(tmp_path)


class TestParseRemoteUrl:
    """Tests for parse_remote_url()."""

    def test_ssh(self):
        info = parse_remote_url("git@github.com:octo/widgets.git")

        assert info == RepoInfo(owner="octo", name="widgets", url="https://github.com/octo/widgets")

    def test_https_with_suffix(self):
        info = parse_remote_url("https://gitlab.example.com/team/tool.git")

        assert info.url == "https://gitlab.example.com/team/tool"
        assert info.owner == "team"
        assert info.name == "tool"

    def test_https_without_suffix(self):
        assert parse_remote_url("https://github.com/o/r\n").url == "https://github.com/o/r"

    @pytest.mark.parametrize(
        "url",
        [
            "http://github.com/o/r.git",
            "ssh://git@github.com/o/r.git",
            "/srv/git/repo.git",
            "git@github.com:o/r",
        ],
    )
    def test_unsupported_scheme(self, url: str):
        with pytest.raises(RemoteUrlError, match="Unsupported remote URL format"):
            parse_remote_url(url)

    def test_nested_path_rejected(self):
        """Only host/owner/name URLs are accepted."""
        with pytest.raises(RemoteUrlError, match="Could not parse repository owner and name"):
            parse_remote_url("https://gitlab.com/group/sub/repo.git")

    def test_normalize_ssh_with_nested_path(self):
        assert normalize_remote_url("git@host:a/b/c.git") == "https://host/a/b/c"


class TestGitRepositoryQueries:
    """Tests for GitRepository read operations."""

    def test_satisfies_protocol(self, repo: GitRepository):
        assert isinstance(repo, VcsGateway)

    def test_remote_url(self, repo: GitRepository, tmp_path: Path):
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = completed("git@github.com:o/r.git\n")

            assert repo.remote_url() == "git@github.com:o/r.git"

            args, kwargs = mock_run.call_args
            assert args[0] == ["git", "config", "--get", "remote.origin.url"]
            assert kwargs["cwd"] == tmp_path

    def test_remote_url_missing(self, repo: GitRepository):
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = completed(returncode=1)

            with pytest.raises(VcsError, match="no origin remote"):
                repo.remote_url()

    def test_list_tags(self, repo: GitRepository):
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = completed("v1.1.0\nv1.0.0\n\n")

            assert repo.list_tags() == ["v1.1.0", "v1.0.0"]
            assert mock_run.call_args[0][0] == ["git", "tag", "--sort=-creatordate"]

    def test_list_tags_empty(self, repo: GitRepository):
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = completed("")

            assert repo.list_tags() == []

    def test_latest_tag(self, repo: GitRepository):
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = completed("v1.1.0\n")

            assert repo.latest_tag() == "v1.1.0"

    def test_latest_tag_none(self, repo: GitRepository):
        """No reachable tag is not an error."""
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = completed(
                stderr="fatal: No names found, cannot describe anything.\n", returncode=128
            )

            assert repo.latest_tag() is None

    def test_latest_tag_other_failure(self, repo: GitRepository):
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = completed(
                stderr="fatal: not a git repository\n", returncode=128
            )

            with pytest.raises(VcsError, match="not a git repository"):
                repo.latest_tag()

    def test_commit_messages_since_tag(self, repo: GitRepository):
        """Records are split on the separator and returned oldest first."""
        output = "feat: a\n\n\x1e\nfix: b\n\nbody line\n\x1e\n"
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = completed(output)

            assert repo.commit_messages("v1.0.0") == ["feat: a", "fix: b\n\nbody line"]

            command = mock_run.call_args[0][0]
            assert command[:3] == ["git", "log", "v1.0.0..HEAD"]
            assert "--reverse" in command

    def test_commit_messages_full_history(self, repo: GitRepository):
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = completed("")

            assert repo.commit_messages() == []

            command = mock_run.call_args[0][0]
            assert not any(".." in part for part in command)

    def test_query_failure(self, repo: GitRepository):
        """Non-zero exits become VcsError with the diagnostic."""
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = completed(
                stderr="fatal: bad revision 'v9..HEAD'", returncode=128
            )

            with pytest.raises(VcsError) as excinfo:
                repo.commit_messages("v9")

            assert excinfo.value.returncode == 128
            assert "bad revision" in str(excinfo.value)

    def test_git_not_installed(self, repo: GitRepository):
        with patch("subprocess.run") as mock_run:
            mock_run.side_effect = FileNotFoundError("git")

            with pytest.raises(VcsError, match="git executable not found"):
                repo.list_tags()


class TestGitRepositoryMutations:
    """Tests for GitRepository write operations."""

    def test_stage_all(self, repo: GitRepository):
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = completed()
            repo.stage_all()

            assert mock_run.call_args[0][0] == ["git", "add", "./"]

    def test_commit(self, repo: GitRepository):
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = completed()
            repo.commit("chore: release v1.3.0")

            assert mock_run.call_args[0][0] == ["git", "commit", "-m", "chore: release v1.3.0"]

    def test_create_tag(self, repo: GitRepository):
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = completed()
            repo.create_tag("v1.3.0", "release v1.3.0")

            assert mock_run.call_args[0][0] == [
                "git",
                "tag",
                "-a",
                "v1.3.0",
                "-m",
                "release v1.3.0",
            ]

    def test_nothing_to_commit(self, repo: GitRepository):
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = completed(
                stdout="nothing to commit, working tree clean", returncode=1
            )

            with pytest.raises(VcsError, match="git commit failed with exit code 1"):
                repo.commit("chore: release v1.3.0")

    def test_duplicate_tag(self, repo: GitRepository):
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = completed(
                stderr="fatal: tag 'v1.3.0' already exists", returncode=128
            )

            with pytest.raises(VcsError, match="already exists"):
                repo.create_tag("v1.3.0", "release v1.3.0")
