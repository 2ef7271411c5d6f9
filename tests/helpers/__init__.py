"""Test helpers package."""

from tests.helpers.fakes import (
    FakeCheckout,
    FakeGitHub,
    FakeHost,
    FakeStatus,
    build_context,
    make_pull_request,
)
from tests.helpers.git import configure_git_user, init_git_repo_with_commit, run_git_quiet
from tests.helpers.wait import wait_for_modal, wait_until

__all__ = [
    "FakeCheckout",
    "FakeGitHub",
    "FakeHost",
    "FakeStatus",
    "build_context",
    "configure_git_user",
    "init_git_repo_with_commit",
    "make_pull_request",
    "run_git_quiet",
    "wait_for_modal",
    "wait_until",
]
