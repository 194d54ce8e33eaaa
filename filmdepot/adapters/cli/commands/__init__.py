"""Sous-package CLI commands - re-exporte les applications Typer."""

from filmdepot.adapters.cli.commands.fetch_commands import fetch_app
from filmdepot.adapters.cli.commands.link_commands import link_app
from filmdepot.adapters.cli.commands.scan_commands import scan_movies_app, scan_rips_app
from filmdepot.adapters.cli.commands.visit_commands import visit_app

__all__ = [
    "fetch_app",
    "link_app",
    "scan_movies_app",
    "scan_rips_app",
    "visit_app",
]
