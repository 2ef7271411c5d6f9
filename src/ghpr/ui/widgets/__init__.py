"""Widgets for the ghpr TUI."""

from ghpr.ui.widgets.output_panel import OutputPanel
from ghpr.ui.widgets.status_bar import PullRequestStatusBar

__all__ = ["OutputPanel", "PullRequestStatusBar"]
