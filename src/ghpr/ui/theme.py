"""Shared Textual theme definition for ghpr."""

from __future__ import annotations

from textual.theme import Theme

GHPR_THEME = Theme(
    name="ghpr",
    primary="#2f81f7",
    secondary="#a371f7",
    accent="#3fb950",
    foreground="#c9d1d9",
    background="#0d1117",
    surface="#161b22",
    panel="#21262d",
    warning="#d29922",
    error="#f85149",
    success="#3fb950",
    dark=True,
    variables={
        "border": "#30363d",
        "border-blurred": "#30363d80",
        "text-muted": "#8b949e",
        "text-disabled": "#8b949e80",
        "input-selection-background": "#2f81f733",
        "scrollbar": "#30363d",
        "scrollbar-hover": "#2f81f7",
        "link-color": "#58a6ff",
        "footer-key-background": "transparent",
    },
)
