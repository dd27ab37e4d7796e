"""Utility modules for cross-cutting concerns."""

from utils.timezone import now_utc, today_iso
