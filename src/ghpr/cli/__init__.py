"""Command line interface for ghpr."""
