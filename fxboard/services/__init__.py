"""Service layer modules."""

from .history import (
    HistoryBuilder,
    HistoryResult,
    InvalidBase,
    init_history_builder,
    normalize_base,
    parse_codes,
)
from .live_rates import LiveRateView, LiveRatesResult, init_live_rate_view
from .rate_fetcher import RateFetcher, init_rate_fetcher
from .snapshot import SnapshotRow, SourceUnavailable, load_snapshot, parse_snapshot


def init_services(app) -> None:
    """Wire the fetcher, live view and history builder onto the app."""

    init_rate_fetcher(app)
    init_live_rate_view(app)
    init_history_builder(app)
