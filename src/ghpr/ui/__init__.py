"""Textual user interface for ghpr."""
