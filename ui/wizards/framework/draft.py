# -*- coding: utf-8 -*-
"""
Draft helpers - merge, rehydrate and serialize wizard drafts.

A draft is a plain dict keyed by form field name. Steps contribute keys
incrementally; merging is a union where the incoming values win.
"""

from typing import Any, Dict, Mapping, Optional

from PyQt5.QtCore import QDate

from utils.datetime_utils import to_qdate, qdate_to_isoformat


# Fields rehydrated into QDate values when an editing record is loaded
DATE_FIELDS = (
    "startDate",
    "endDate",
    "validFrom",
    "validTo",
    "blackoutStartDate",
    "blackoutEndDate",
    "blackoutDates",
)


def detach_value(value: Any) -> Any:
    """Copy containers and QDates so the draft never shares them with callers."""
    if isinstance(value, QDate):
        return QDate(value)
    if isinstance(value, Mapping):
        return {key: detach_value(item) for key, item in value.items()}
    if isinstance(value, list):
        return [detach_value(item) for item in value]
    if isinstance(value, tuple):
        return tuple(detach_value(item) for item in value)
    if isinstance(value, (set, frozenset)):
        return type(value)(detach_value(item) for item in value)
    return value


def union_merge(draft: Dict[str, Any], values: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Merge values into draft in place and return the draft.

    Keys in values overwrite; every other key already in the draft is kept.
    Applying the same values twice leaves the draft unchanged. Nested
    values are copied.
    """
    if values:
        draft.update((key, detach_value(value)) for key, value in values.items())
    return draft


def rehydrate_editing_record(
    record: Optional[Mapping[str, Any]],
    rehydrate_absent_dates: bool = False
) -> Dict[str, Any]:
    """
    Build a draft from an editing record.

    Every field is copied, containers included, then the date fields are
    replaced by QDate values. Unparsable values become an invalid QDate.

    Args:
        record: Existing configuration record, may be None or empty
        rehydrate_absent_dates: When True, date fields missing from the
            record are added as invalid QDates (the legacy modal behaviour).
            When False they stay absent.

    Returns:
        New draft dict; the record itself is never modified.
    """
    if not record:
        return {}

    draft = {key: detach_value(value) for key, value in record.items()}
    for name in DATE_FIELDS:
        if name in record:
            draft[name] = to_qdate(record[name])
        elif rehydrate_absent_dates:
            draft[name] = QDate()
    return draft


def _to_plain(value: Any) -> Any:
    if isinstance(value, QDate):
        return qdate_to_isoformat(value)
    if isinstance(value, (set, frozenset)):
        return sorted(_to_plain(item) for item in value)
    if isinstance(value, (list, tuple)):
        return [_to_plain(item) for item in value]
    if isinstance(value, Mapping):
        return {str(key): _to_plain(item) for key, item in value.items()}
    return value


def draft_to_record(draft: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Serialize a draft into a JSON-safe record.

    QDate values become YYYY-MM-DD strings (None when invalid) and option
    sets become sorted lists.
    """
    return {key: _to_plain(value) for key, value in draft.items()}
