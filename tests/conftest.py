# -*- coding: utf-8 -*-
"""Shared pytest configuration for all test suites."""

import os
import sys
import tempfile
from pathlib import Path

# Set environment before any application imports
_TMP_ROOT = Path(tempfile.mkdtemp(prefix="offerdesk-tests-"))
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ["OFFERDESK_LOGS_DIR"] = str(_TMP_ROOT / "logs")
os.environ["OFFERDESK_SETTINGS_PATH"] = str(_TMP_ROOT / "settings.ini")
os.environ["OFFERDESK_TAX_RATE"] = "0.08"
os.environ["OFFERDESK_GROUP_DISCOUNT_RATE"] = "0.15"
os.environ["OFFERDESK_GROUP_DISCOUNT_THRESHOLD"] = "10"
os.environ["OFFERDESK_REHYDRATE_ABSENT_DATES"] = "false"

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import pytest  # noqa: E402

from repositories.kv_store import InMemoryKeyValueStore  # noqa: E402


@pytest.fixture
def memory_store():
    """Empty in-memory record store."""
    return InMemoryKeyValueStore()
