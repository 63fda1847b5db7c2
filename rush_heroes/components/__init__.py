"""
Rush Heroes components - data-only record definitions.

All components are Pydantic models containing only data.
Rules live in the battle and progression modules.
"""

from rush_heroes.components.skill import (
    SkillKind,
    EffectKind,
    TargetMode,
    StatName,
    SkillEffect,
    Skill,
    StatusEntry,
)
from rush_heroes.components.character import (
    MIN_STARS,
    MAX_STARS,
    Role,
    BaseStats,
    Species,
    Mob,
)
from rush_heroes.components.progression import (
    Track,
    Rewards,
    CampaignStage,
    TowerFloor,
    CampaignProgress,
    TowerProgress,
    AFKRewards,
)
from rush_heroes.components.player import Player

__all__ = [
    # Skills
    "SkillKind",
    "EffectKind",
    "TargetMode",
    "StatName",
    "SkillEffect",
    "Skill",
    "StatusEntry",
    # Characters
    "MIN_STARS",
    "MAX_STARS",
    "Role",
    "BaseStats",
    "Species",
    "Mob",
    # Progression
    "Track",
    "Rewards",
    "CampaignStage",
    "TowerFloor",
    "CampaignProgress",
    "TowerProgress",
    "AFKRewards",
    # Player
    "Player",
]
