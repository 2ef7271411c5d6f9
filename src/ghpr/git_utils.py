"""Async git helpers used by the pull request commands.

All functions are async to avoid blocking the event loop during subprocess calls.
"""

from __future__ import annotations

import asyncio
import re
from typing import TYPE_CHECKING

from ghpr.debug_log import log
from ghpr.limits import GIT_TIMEOUT

if TYPE_CHECKING:
    from pathlib import Path

# git@github.com:owner/repo.git, ssh://git@github.com/owner/repo, https://github.com/owner/repo.git
_REMOTE_PATTERN = re.compile(r"[:/](?P<owner>[^/:]+)/(?P<repo>[^/]+?)(?:\.git)?/?$")


class GitError(Exception):
    """Raised when a git command fails or git is unavailable."""

    def __init__(self, message: str, *, command: tuple[str, ...] = (), stderr: str = "") -> None:
        super().__init__(message)
        self.command = command
        self.stderr = stderr


async def run_git(repo_root: Path, *args: str, timeout: float = GIT_TIMEOUT) -> str:
    """Run a git command in repo_root and return stripped stdout.

    Raises:
        GitError: repo_root is not a directory, git is missing, timed out,
            or exited non-zero.
    """
    if not repo_root.is_dir():
        raise GitError(f"Repository directory does not exist: {repo_root}", command=args)
    try:
        proc = await asyncio.create_subprocess_exec(
            "git",
            *args,
            cwd=repo_root,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except FileNotFoundError as exc:
        raise GitError("Git is not installed", command=args) from exc

    try:
        stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=timeout)
    except TimeoutError as exc:
        proc.kill()
        await proc.wait()
        raise GitError(f"git {args[0]} timed out after {timeout:.0f}s", command=args) from exc

    if proc.returncode != 0:
        error_text = stderr.decode(errors="replace").strip()
        raise GitError(
            error_text or f"git {' '.join(args)} failed with exit code {proc.returncode}",
            command=args,
            stderr=error_text,
        )
    return stdout.decode(errors="replace").strip()


async def has_git_repo(repo_root: Path) -> bool:
    """Return True if the path is inside a git work tree."""
    try:
        output = await run_git(repo_root, "rev-parse", "--is-inside-work-tree")
    except GitError:
        return False
    return output == "true"


async def get_current_branch(repo_root: Path) -> str | None:
    """Return the checked-out branch name, or None on a detached HEAD."""
    branch = await run_git(repo_root, "rev-parse", "--abbrev-ref", "HEAD")
    if not branch or branch == "HEAD":
        return None
    return branch


async def get_remote_url(repo_root: Path, remote: str) -> str:
    return await run_git(repo_root, "config", "--get", f"remote.{remote}.url")


def parse_github_remote(url: str) -> tuple[str, str]:
    """Extract (owner, repository) from a GitHub remote URL.

    Raises:
        GitError: URL does not look like an owner/repository remote.
    """
    match = _REMOTE_PATTERN.search(url.strip())
    if match is None:
        raise GitError(f"Remote URL is not a GitHub repository: {url}")
    return match.group("owner"), match.group("repo")


async def get_first_commit_on_branch(repo_root: Path, base_ref: str) -> str | None:
    """Return the oldest commit reachable from HEAD but not from base_ref."""
    output = await run_git(repo_root, "rev-list", "--reverse", f"{base_ref}..HEAD")
    commits = output.splitlines()
    return commits[0] if commits else None


async def get_commit_message(repo_root: Path, sha: str) -> tuple[str, str]:
    """Return (subject, body) of a commit."""
    subject = await run_git(repo_root, "log", "-1", "--format=%s", sha)
    body = await run_git(repo_root, "log", "-1", "--format=%b", sha)
    return subject, body


async def checkout(repo_root: Path, ref: str, *, remote: str = "origin") -> None:
    """Fetch a branch from the remote and check it out.

    A missing local branch is created tracking `<remote>/<ref>`. An existing
    local branch is switched to as it is; it is not fast-forwarded to the
    fetched remote state, so pull afterwards to pick up newer commits.
    """
    log.info("Checking out branch", ref=ref, remote=remote)
    await run_git(repo_root, "fetch", remote, ref)
    await run_git(repo_root, "checkout", ref)


class GitCheckout:
    """Checkout collaborator bound to a remote name."""

    def __init__(self, remote: str = "origin") -> None:
        self.remote = remote

    async def checkout(self, repo_root: Path, ref: str) -> None:
        await checkout(repo_root, ref, remote=self.remote)


__all__ = [
    "GitCheckout",
    "GitError",
    "checkout",
    "get_commit_message",
    "get_current_branch",
    "get_first_commit_on_branch",
    "get_remote_url",
    "has_git_repo",
    "parse_github_remote",
    "run_git",
]
