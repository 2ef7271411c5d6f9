"""Pytest fixtures for ghpr tests."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from hypothesis import Phase, Verbosity, settings

_TEST_BASE_DIR = Path(tempfile.mkdtemp(prefix="ghpr-tests-"))
os.environ["GHPR_DATA_DIR"] = str(_TEST_BASE_DIR / "data")
os.environ["GHPR_CONFIG_DIR"] = str(_TEST_BASE_DIR / "config")
os.environ.setdefault("GHPR_DEBUG", "1")

from tests.helpers.fakes import FakeCheckout, FakeGitHub, FakeHost, FakeStatus  # noqa: E402

if TYPE_CHECKING:
    from collections.abc import Callable

    from ghpr.session import CommandContext
    from ghpr.state import GlobalState


settings.register_profile(
    "ci",
    max_examples=100,
    deadline=None,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
)
settings.register_profile(
    "dev",
    max_examples=20,
    deadline=500,
)
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    deadline=None,
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def state_path(tmp_path: Path) -> Path:
    return tmp_path / "state" / "state.json"


@pytest.fixture
def global_state(state_path: Path) -> GlobalState:
    from ghpr.state import GlobalState

    return GlobalState(state_path)


@pytest.fixture
def fake_host() -> FakeHost:
    return FakeHost()


@pytest.fixture
def fake_github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
def fake_status() -> FakeStatus:
    return FakeStatus()


@pytest.fixture
def fake_checkout() -> FakeCheckout:
    return FakeCheckout()


@pytest.fixture
def make_ctx(
    fake_host: FakeHost,
    fake_github: FakeGitHub,
    fake_status: FakeStatus,
    fake_checkout: FakeCheckout,
    global_state: GlobalState,
    tmp_path: Path,
) -> Callable[..., CommandContext]:
    """Factory for command contexts wired to the shared fakes."""
    from tests.helpers.fakes import build_context

    def _factory(*, connected: bool = True, workspace: bool = True) -> CommandContext:
        return build_context(
            host=fake_host,
            github=fake_github,
            status=fake_status,
            git=fake_checkout,
            state=global_state,
            working_directory=tmp_path if workspace else None,
            token="ghp_test" if connected else None,
        )

    return _factory
