"""CLI commands for inspecting rate history and the local snapshot."""

from __future__ import annotations

import click
from flask import current_app
from flask.cli import with_appcontext

from fxboard.services import HistoryBuilder, SourceUnavailable, load_snapshot


@click.command("rates-history")
@click.option("--base", required=True, help="Base currency, e.g. USD")
@click.option("--days", default=5, show_default=True, type=click.IntRange(min=1))
@with_appcontext
def rates_history(base: str, days: int) -> None:
    """Print the daily rate series of the target currencies against BASE."""

    builder: HistoryBuilder = current_app.extensions["history_builder"]
    result = builder.build(base, days)
    if not result.success:
        raise click.ClickException(result.message or "History could not be built.")

    header = ["DATE"] + list(result.series)
    click.echo("\t".join(header))
    for index, day in enumerate(result.dates):
        cells = [day.isoformat()]
        for points in result.series.values():
            point = points[index]
            cells.append("-" if point is None else str(point))
        click.echo("\t".join(cells))


@click.command("rates-snapshot")
@with_appcontext
def rates_snapshot() -> None:
    """Print the rows of the local rate snapshot."""

    try:
        rows = load_snapshot(current_app.config["SNAPSHOT_PATH"])
    except SourceUnavailable as exc:
        raise click.ClickException(f"No snapshot available: {exc}") from exc

    for row in rows:
        click.echo(f"{row.currency_code}\t{row.rate}")
