"""Command-line entry point for ELZA."""

from elza.cli.app import app

__all__ = ["app"]
