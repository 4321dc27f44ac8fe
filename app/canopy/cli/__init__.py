"""CLI package for canopy.

This package contains the Typer application.
"""

from canopy.cli.main import app

__all__ = ["app"]
