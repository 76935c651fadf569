# -*- coding: utf-8 -*-
"""
Offer Desk Utility Module
"""

from .logger import get_logger, setup_logger
from .datetime_utils import from_isoformat, to_qdate, qdate_to_isoformat, now_utc

__all__ = [
    "get_logger",
    "setup_logger",
    "from_isoformat",
    "to_qdate",
    "qdate_to_isoformat",
    "now_utc",
]
