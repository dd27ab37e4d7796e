"""UTC-everywhere time handling. Invoice dates are UTC calendar dates."""

from datetime import datetime, timezone


def now_utc() -> datetime:
    """
    Current time in UTC.

    Use this instead of datetime.now() everywhere.
    """
    return datetime.now(timezone.utc)


def today_iso() -> str:
    """
    Today's UTC calendar date as an ISO string (YYYY-MM-DD).

    This is the value stamped on newly created invoices.
    """
    return now_utc().date().isoformat()
