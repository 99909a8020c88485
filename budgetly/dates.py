"""Date window helpers for Plaid transaction queries."""

from datetime import date, datetime, timedelta, timezone
from typing import NamedTuple, Optional

LOOKBACK_DAYS = 30


def plaid_date(value: date) -> str:
    """Render a date the way Plaid expects it (YYYY-MM-DD)."""
    return value.strftime("%Y-%m-%d")


class DateWindow(NamedTuple):
    """Inclusive calendar date range for a transactions query."""

    start: date
    end: date

    @property
    def start_date(self) -> str:
        return plaid_date(self.start)

    @property
    def end_date(self) -> str:
        return plaid_date(self.end)


def date_window(reference: Optional[datetime] = None, days: int = LOOKBACK_DAYS) -> DateWindow:
    """Compute the lookback window ending on the UTC date of ``reference``.

    Naive datetimes are treated as UTC. Defaults to the current instant.
    """
    if reference is None:
        reference = datetime.now(timezone.utc)
    elif reference.tzinfo is None:
        reference = reference.replace(tzinfo=timezone.utc)
    else:
        reference = reference.astimezone(timezone.utc)

    end = reference.date()
    return DateWindow(start=end - timedelta(days=days), end=end)
