"""Tests for git_utils against real git repositories."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from ghpr.git_utils import (
    GitCheckout,
    GitError,
    get_commit_message,
    get_current_branch,
    get_first_commit_on_branch,
    get_remote_url,
    has_git_repo,
    parse_github_remote,
    run_git,
)
from tests.helpers.git import configure_git_user, init_git_repo_with_commit, run_git_quiet

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.integration


async def _commit(repo: Path, name: str, subject: str, body: str | None = None) -> str:
    (repo / name).write_text(f"{name}\n")
    await run_git_quiet(repo, "add", name)
    message_args = ["-m", subject] if body is None else ["-m", subject, "-m", body]
    await run_git_quiet(repo, "commit", *message_args)
    return await run_git_quiet(repo, "rev-parse", "HEAD")


@pytest.fixture
async def remote_setup(tmp_path: Path) -> tuple[Path, Path]:
    """A bare origin with main and feature branches, plus a seed clone that pushed them."""
    origin = tmp_path / "origin.git"
    await run_git_quiet(tmp_path, "init", "--bare", "-b", "main", str(origin))
    seed = tmp_path / "seed"
    await init_git_repo_with_commit(seed)
    await run_git_quiet(seed, "remote", "add", "origin", str(origin))
    await run_git_quiet(seed, "push", "origin", "main")
    await run_git_quiet(seed, "checkout", "-b", "feature")
    await _commit(seed, "feature.txt", "Add feature")
    await run_git_quiet(seed, "push", "origin", "feature")
    return origin, seed


class TestParseGitHubRemote:
    @pytest.mark.parametrize(
        "url",
        [
            "git@github.com:octo/repo.git",
            "git@github.com:octo/repo",
            "ssh://git@github.com/octo/repo.git",
            "https://github.com/octo/repo.git",
            "https://github.com/octo/repo",
            "https://github.com/octo/repo/",
            "https://token@ghe.example.com/octo/repo.git\n",
        ],
    )
    def test_owner_and_repository(self, url: str) -> None:
        assert parse_github_remote(url) == ("octo", "repo")

    def test_dotted_repository_name(self) -> None:
        assert parse_github_remote("https://github.com/octo/repo.js.git") == ("octo", "repo.js")

    @pytest.mark.parametrize("url", ["", "local-mirror"])
    def test_unparseable_url_raises(self, url: str) -> None:
        with pytest.raises(GitError, match="not a GitHub repository"):
            parse_github_remote(url)


class TestRepositoryQueries:
    async def test_has_git_repo(self, tmp_path: Path) -> None:
        repo = tmp_path / "repo"
        plain = tmp_path / "plain"
        plain.mkdir()
        await init_git_repo_with_commit(repo)

        assert await has_git_repo(repo) is True
        assert await has_git_repo(plain) is False

    async def test_current_branch(self, tmp_path: Path) -> None:
        repo = tmp_path / "repo"
        await init_git_repo_with_commit(repo, branch="trunk")

        assert await get_current_branch(repo) == "trunk"

    async def test_detached_head_has_no_branch(self, tmp_path: Path) -> None:
        repo = tmp_path / "repo"
        await init_git_repo_with_commit(repo)
        await run_git_quiet(repo, "checkout", "--detach")

        assert await get_current_branch(repo) is None

    async def test_remote_url(self, remote_setup: tuple[Path, Path]) -> None:
        origin, seed = remote_setup

        assert await get_remote_url(seed, "origin") == str(origin)

    async def test_missing_remote_raises(self, tmp_path: Path) -> None:
        repo = tmp_path / "repo"
        await init_git_repo_with_commit(repo)

        with pytest.raises(GitError):
            await get_remote_url(repo, "origin")

    async def test_failed_command_carries_stderr(self, tmp_path: Path) -> None:
        repo = tmp_path / "repo"
        await init_git_repo_with_commit(repo)

        with pytest.raises(GitError) as exc_info:
            await run_git(repo, "checkout", "does-not-exist")

        assert exc_info.value.command == ("checkout", "does-not-exist")
        assert "does-not-exist" in exc_info.value.stderr

    async def test_missing_directory_is_reported_as_such(self, tmp_path: Path) -> None:
        with pytest.raises(GitError, match="Repository directory does not exist"):
            await run_git(tmp_path / "gone", "status")

    async def test_missing_directory_is_not_a_repository(self, tmp_path: Path) -> None:
        assert await has_git_repo(tmp_path / "gone") is False


class TestBranchCommits:
    async def test_first_commit_and_message(self, remote_setup: tuple[Path, Path]) -> None:
        _, seed = remote_setup
        first = await run_git_quiet(seed, "rev-parse", "HEAD")
        await _commit(seed, "second.txt", "Second change")
        await run_git_quiet(seed, "fetch", "origin")

        assert await get_first_commit_on_branch(seed, "origin/main") == first
        assert await get_commit_message(seed, first) == ("Add feature", "")

    async def test_commit_body(self, tmp_path: Path) -> None:
        repo = tmp_path / "repo"
        await init_git_repo_with_commit(repo)
        sha = await _commit(repo, "x.txt", "Subject line", "Body paragraph")

        assert await get_commit_message(repo, sha) == ("Subject line", "Body paragraph")

    async def test_no_commits_ahead(self, remote_setup: tuple[Path, Path]) -> None:
        _, seed = remote_setup
        await run_git_quiet(seed, "checkout", "main")

        assert await get_first_commit_on_branch(seed, "origin/main") is None


class TestCheckout:
    async def test_fetches_and_checks_out_remote_branch(
        self, tmp_path: Path, remote_setup: tuple[Path, Path]
    ) -> None:
        origin, _ = remote_setup
        work = tmp_path / "work"
        await run_git_quiet(tmp_path, "clone", str(origin), str(work))
        await configure_git_user(work)

        await GitCheckout("origin").checkout(work, "feature")

        assert await get_current_branch(work) == "feature"
        assert (work / "feature.txt").exists()

    async def test_unknown_branch_raises(
        self, tmp_path: Path, remote_setup: tuple[Path, Path]
    ) -> None:
        origin, _ = remote_setup
        work = tmp_path / "work"
        await run_git_quiet(tmp_path, "clone", str(origin), str(work))

        with pytest.raises(GitError):
            await GitCheckout("origin").checkout(work, "missing-branch")

    async def test_existing_local_branch_is_not_fast_forwarded(
        self, tmp_path: Path, remote_setup: tuple[Path, Path]
    ) -> None:
        origin, seed = remote_setup
        work = tmp_path / "work"
        await run_git_quiet(tmp_path, "clone", str(origin), str(work))
        await configure_git_user(work)
        await GitCheckout("origin").checkout(work, "feature")
        local_head = await run_git_quiet(work, "rev-parse", "HEAD")
        await run_git_quiet(work, "checkout", "main")
        remote_head = await _commit(seed, "later.txt", "Later change")
        await run_git_quiet(seed, "push", "origin", "feature")

        await GitCheckout("origin").checkout(work, "feature")

        assert await run_git_quiet(work, "rev-parse", "HEAD") == local_head
        assert await run_git_quiet(work, "rev-parse", "origin/feature") == remote_head
