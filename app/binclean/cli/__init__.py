"""CLI package for binclean.

This package contains the Typer application.
"""

from binclean.cli.main import app

__all__ = ["app"]
