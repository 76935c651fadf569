# -*- coding: utf-8 -*-
"""
DateTime Utilities

Centralized date handling for wizard drafts and stored records.

Form fields hold QDate values, stored records hold ISO strings. The helpers
below are the single place where one is turned into the other.
"""

from datetime import datetime, date, timezone
from typing import Any, Optional, Union

from PyQt5.QtCore import QDate, QDateTime, Qt


def from_isoformat(value: Union[str, datetime, date, None]) -> Optional[datetime]:
    """
    Convert ISO format string to datetime object.

    Args:
        value: ISO string, datetime, date, or None

    Returns:
        datetime object or None

    Examples:
        >>> from_isoformat('2024-01-15T10:30:00')
        datetime(2024, 1, 15, 10, 30)
        >>> from_isoformat('2024-01-15T10:30:00.000Z')
        datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)
        >>> from_isoformat('2024-01-15')
        datetime(2024, 1, 15, 0, 0)
        >>> from_isoformat('not a date')
        None
    """
    if value is None:
        return None

    # Already datetime -> return as-is
    if isinstance(value, datetime):
        return value

    # date -> convert to datetime
    if isinstance(value, date):
        return datetime.combine(value, datetime.min.time())

    if isinstance(value, str):
        text = value.strip()
        # JSON.stringify(new Date()) style suffix
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            return None

    return None


def to_qdate(value: Any) -> QDate:
    """
    Convert a raw record value into a QDate.

    Accepts QDate, date, datetime, ISO strings and numbers (epoch
    milliseconds). Anything else, including None and unparsable strings,
    yields an invalid QDate (``QDate().isValid() is False``).
    """
    if isinstance(value, QDate):
        return QDate(value)

    if isinstance(value, (datetime, date)):
        return QDate(value.year, value.month, value.day)

    # bool is an int subclass but never a timestamp
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return QDateTime.fromMSecsSinceEpoch(int(value), Qt.UTC).date()

    if isinstance(value, str):
        parsed = from_isoformat(value)
        if parsed is not None:
            return QDate(parsed.year, parsed.month, parsed.day)

    return QDate()


def qdate_to_isoformat(value: QDate) -> Optional[str]:
    """Serialize a QDate to YYYY-MM-DD, or None when the date is invalid."""
    if not value.isValid():
        return None
    return value.toString(Qt.ISODate)


def now_utc() -> datetime:
    """Get the current timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)
