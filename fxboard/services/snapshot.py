"""Parsing of the locally stored rate snapshot table."""

from __future__ import annotations

import csv
import io
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


class SourceUnavailable(Exception):
    """Raised when the snapshot document cannot be read or parsed at all."""


@dataclass(frozen=True)
class SnapshotRow:
    """One display row of the snapshot: a currency code and its rate text."""

    currency_code: str
    rate: str


def parse_snapshot(text: str) -> list[SnapshotRow]:
    """Parse a CSV rate table into rows, preserving document order.

    The first row is a header and is skipped. Data rows must have exactly two
    cells (currency, rate); anything else is ignored. Rate text is kept as
    written since it is only displayed.

    Raises:
        SourceUnavailable: If the text is not valid CSV or has no header row.
    """

    reader = csv.reader(io.StringIO(text), strict=True)
    try:
        header = next(reader, None)
        if header is None:
            raise SourceUnavailable("Snapshot document is empty.")

        rows: list[SnapshotRow] = []
        for line_number, cells in enumerate(reader, start=2):
            if len(cells) != 2:
                logger.debug("Skipping snapshot line %s with %s cells", line_number, len(cells))
                continue
            label, rate = (cell.strip() for cell in cells)
            if not label:
                logger.debug("Skipping snapshot line %s without a currency", line_number)
                continue
            rows.append(SnapshotRow(currency_code=label.upper(), rate=rate))
    except csv.Error as exc:
        raise SourceUnavailable(f"Snapshot document is malformed: {exc}") from exc

    return rows


def load_snapshot(path: str | Path) -> list[SnapshotRow]:
    """Read and parse the snapshot file at ``path``.

    Raises:
        SourceUnavailable: If the file is missing, unreadable or malformed.
    """

    snapshot_path = Path(path)
    try:
        text = snapshot_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceUnavailable(f"Snapshot file {snapshot_path} cannot be read: {exc}") from exc
    return parse_snapshot(text)
