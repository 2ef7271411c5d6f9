"""Main ghpr TUI application."""

from __future__ import annotations

from functools import partial
from pathlib import Path
from typing import TYPE_CHECKING, Any

from textual.app import App, SystemCommand
from textual.containers import Vertical
from textual.widgets import Footer, Header, Static

from ghpr.commands.activation import activate, check_version_and_token
from ghpr.commands.registry import COMMANDS, CommandSpec, get_command
from ghpr.commands.reporting import report_failure
from ghpr.config import GhprConfig
from ghpr.debug_log import capture_logging, log
from ghpr.github.errors import failure_from_exception
from ghpr.limits import DEBUG_BUILD
from ghpr.ui.keybindings import APP_BINDINGS
from ghpr.ui.modals import DebugLogModal, PullRequestPickerModal, TokenInputModal
from ghpr.ui.theme import GHPR_THEME
from ghpr.ui.widgets import OutputPanel, PullRequestStatusBar
from ghpr.version import installed_version

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

    import httpx
    from textual.app import ComposeResult
    from textual.screen import Screen
    from textual.worker import Worker

    from ghpr.commands.host import PickItem
    from ghpr.session import CommandContext
    from ghpr.state import GlobalState


class GhprApp(App):
    """GitHub pull requests for the repository in the current directory.

    Acts as the editor host for the command layer: notifications, the token
    prompt, the pull request picker and the browser all go through it.
    """

    TITLE = "ghpr"
    CSS_PATH = "styles/ghpr.tcss"

    BINDINGS = APP_BINDINGS

    def __init__(
        self,
        project_root: str | Path | None = None,
        *,
        config: GhprConfig | None = None,
        state: GlobalState | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        version_reader: Callable[[], str] = installed_version,
    ) -> None:
        super().__init__()
        self.register_theme(GHPR_THEME)
        self.theme = "ghpr"

        self.project_root = Path(project_root) if project_root else Path.cwd()
        self.config = config or GhprConfig()
        self._state = state
        self._transport = transport
        self._version_reader = version_reader
        self._ctx: CommandContext | None = None

    @property
    def ctx(self) -> CommandContext:
        """Get the command context once activation has finished."""
        assert self._ctx is not None, "CommandContext not initialized"
        return self._ctx

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="main"):
            yield Static("", id="workspace-label")
            yield OutputPanel(classes="" if self.config.ui.show_output_panel else "hidden")
        yield PullRequestStatusBar()
        yield Footer()

    async def on_mount(self) -> None:
        """Activate the command layer and wire widgets to it."""
        capture_logging()

        ctx = await activate(
            self,
            self.project_root,
            config=self.config,
            state=self._state,
            transport=self._transport,
        )
        self._ctx = ctx

        workspace = ctx.working_directory or "no git repository open"
        self.query_one("#workspace-label", Static).update(f"Workspace: {workspace}")
        self.query_one(OutputPanel).attach(ctx.channel)
        self.query_one(PullRequestStatusBar).attach(ctx.status)

        if ctx.working_directory is not None:
            self.run_worker(ctx.status.update(), name="status-refresh", exit_on_error=False)
        self.run_worker(
            check_version_and_token(ctx, self._version_reader()),
            name="version-check",
            exit_on_error=False,
        )

    # -- EditorHost -------------------------------------------------------

    def show_information(self, message: str) -> None:
        self.notify(message, severity="information")

    def show_warning(self, message: str) -> None:
        self.notify(message, severity="warning")

    def show_error(self, message: str) -> None:
        self.notify(message, severity="error", timeout=10)

    async def prompt_secret(self, placeholder: str) -> str | None:
        return await self.push_screen_wait(TokenInputModal(placeholder))

    async def pick(self, items: Sequence[PickItem[Any]]) -> PickItem[Any] | None:
        return await self.push_screen_wait(PullRequestPickerModal(items))

    # -- Commands ---------------------------------------------------------

    def dispatch_command(self, command_id: str) -> Worker[None] | None:
        """Run a registered command in its own worker.

        Invocations are independent; two rapid presses run concurrently.
        """
        if self._ctx is None:
            self.notify("ghpr is still starting up", severity="warning")
            return None
        spec = get_command(command_id)
        return self.run_worker(
            self._run_command(spec),
            name=command_id,
            group="commands",
            exit_on_error=False,
        )

    async def _run_command(self, spec: CommandSpec) -> None:
        ctx = self.ctx
        log.info("Running command", command=spec.command_id)
        try:
            await spec.handler(ctx)
        except Exception as exc:
            # Anything a handler lets escape (e.g. a failed checkout) ends here
            log.error("Command raised", command=spec.command_id, error=repr(exc))
            report_failure(ctx, failure_from_exception(exc))

    def action_run_command(self, command_id: str) -> None:
        self.dispatch_command(command_id)

    def get_system_commands(self, screen: Screen) -> Iterable[SystemCommand]:
        yield from super().get_system_commands(screen)
        for spec in COMMANDS:
            yield SystemCommand(
                spec.title, spec.help_text, partial(self.dispatch_command, spec.command_id)
            )
        yield SystemCommand(
            "Debug Log", "Open debug log viewer", self.action_toggle_debug_log
        )

    def action_toggle_debug_log(self) -> None:
        """Toggle the debug log viewer (F12). Disabled in production builds."""
        if not DEBUG_BUILD:
            self.notify("Debug log disabled in production builds", severity="warning")
            return
        if isinstance(self.screen, DebugLogModal):
            self.screen.dismiss(None)
            return
        self.push_screen(DebugLogModal())


def run(project_root: str | Path | None = None, config: GhprConfig | None = None) -> None:
    """Run the ghpr application."""
    app = GhprApp(project_root, config=config or GhprConfig.load())
    app.run()
