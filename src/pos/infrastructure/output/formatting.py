"""id-ID style date formatting for receipts and reports."""

from __future__ import annotations

from datetime import date, datetime


def format_date(day: date) -> str:
    """``19/10/2026`` — day and month unpadded, as id-ID prints dates."""
    return f"{day.day}/{day.month}/{day.year}"


def format_datetime(moment: datetime) -> str:
    """``19/10/2026, 14.05.09`` in the machine's local time zone."""
    local = moment.astimezone()
    return f"{format_date(local.date())}, {local:%H.%M.%S}"
