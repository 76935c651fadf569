# -*- coding: utf-8 -*-
"""
Offer Desk Repository Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "SettingsKeyValueStore",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "KeyValueStore":
        from .kv_store import KeyValueStore
        return KeyValueStore
    elif name == "InMemoryKeyValueStore":
        from .kv_store import InMemoryKeyValueStore
        return InMemoryKeyValueStore
    elif name == "SettingsKeyValueStore":
        from .kv_store import SettingsKeyValueStore
        return SettingsKeyValueStore
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
