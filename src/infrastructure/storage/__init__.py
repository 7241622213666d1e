"""
Settings persistence infrastructure.

Stores the last calculator inputs in a string key-value store.
"""

from .settings_store import InMemorySettingsStore, JsonFileSettingsStore
from .snapshot import InputSnapshot, clear_inputs, load_inputs, save_inputs

__all__ = [
    "InMemorySettingsStore",
    "JsonFileSettingsStore",
    "InputSnapshot",
    "save_inputs",
    "load_inputs",
    "clear_inputs",
]
