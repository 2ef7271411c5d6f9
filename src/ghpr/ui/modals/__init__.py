"""Modal components for the ghpr TUI."""

from ghpr.ui.modals.debug_log import DebugLogModal
from ghpr.ui.modals.pull_request_picker import PullRequestPickerModal
from ghpr.ui.modals.token_input import TokenInputModal

__all__ = ["DebugLogModal", "PullRequestPickerModal", "TokenInputModal"]
