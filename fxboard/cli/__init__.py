"""CLI entry points."""

from __future__ import annotations

from flask import Flask

from .rates import rates_history, rates_snapshot


def register_cli(app: Flask) -> None:
    """Register CLI commands on the given Flask app."""

    app.cli.add_command(rates_history)
    app.cli.add_command(rates_snapshot)
