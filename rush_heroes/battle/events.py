"""
Battle events published on the EventBus for presentation layers.
"""

from enum import Enum, auto


class BattleEvent(Enum):
    """Battle-specific events."""
    BATTLE_STARTED = auto()
    BATTLE_ENDED = auto()
    SKILL_SELECTED = auto()
    ACTION_STARTED = auto()
    ACTION_COMMITTED = auto()
    ACTION_COMPLETED = auto()
    DAMAGE_DEALT = auto()
    HEALING_DONE = auto()
    STATUS_APPLIED = auto()
    STATUS_EXPIRED = auto()
    UNIT_DEFEATED = auto()
    TURN_ADVANCED = auto()
    TURN_FORFEITED = auto()
    VICTORY = auto()
    DEFEAT = auto()
