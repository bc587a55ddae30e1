"""
Command-line interface for sct_reader.

``sct`` is a Typer app; every command parses the file through the same
pipeline and reports fatal assembly errors with exit status 1.
"""

from sct_reader.cli.app import app, main

__all__ = ["app", "main"]
