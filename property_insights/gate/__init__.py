"""Unlock gate and its persistence."""

from property_insights.gate.storage import JsonFileStore, KeyValueStore, MemoryStore
from property_insights.gate.unlock import (
    CLEAR_SECTIONS,
    PROFILE_KEY,
    SectionView,
    UnlockGate,
    render_sections,
    unlock_key,
)

__all__ = [
    "CLEAR_SECTIONS",
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    "PROFILE_KEY",
    "SectionView",
    "UnlockGate",
    "render_sections",
    "unlock_key",
]
