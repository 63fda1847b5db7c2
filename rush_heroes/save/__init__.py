"""
Save module - player persistence.
"""

from rush_heroes.save.manager import (
    SaveManager,
    SaveEvent,
    SaveMetadata,
)

__all__ = [
    "SaveManager",
    "SaveEvent",
    "SaveMetadata",
]
