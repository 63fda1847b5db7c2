"""
Progression components - stage/floor descriptors, track progress, AFK counters.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import Field

from heroes_engine.core.component import Component


class Track(Enum):
    """Progression track a battle belongs to."""
    CAMPAIGN = "campaign"
    TOWER = "tower"


class Rewards(Component):
    """Rewards granted for clearing a stage or floor."""
    exp: int = Field(default=0, ge=0)
    diamonds: int = Field(default=0, ge=0)
    tickets: Optional[int] = Field(default=None, ge=0)


class CampaignStage(Component):
    """A stage of the finite campaign."""
    chapter: int = Field(ge=1)
    stage: int = Field(ge=1)
    name: str
    difficulty: int = Field(ge=1)
    enemies: int = Field(ge=1)
    rewards: Rewards
    unlocked: bool = False
    completed: bool = False
    stars: int = Field(default=0, ge=0, le=3)


class TowerFloor(Component):
    """A floor of the tower."""
    floor: int = Field(ge=1)
    name: str
    difficulty: int = Field(ge=1)
    enemies: int = Field(ge=1)
    rewards: Rewards
    completed: bool = False


class CampaignProgress(Component):
    current_chapter: int = 1
    current_stage: int = 1
    stages: list[CampaignStage] = Field(default_factory=list)


class TowerProgress(Component):
    """
    Tower progress.

    Floors are generated on demand; only floors that were actually
    cleared are recorded.
    """
    current_floor: int = Field(default=1, ge=1)
    completed_floors: list[int] = Field(default_factory=list)


class AFKRewards(Component):
    """
    Idle rewards waiting to be claimed.

    Attributes:
        exp: Pending player experience
        diamonds: Pending diamonds
        mob_exp: Pending experience shared by the roster
        last_claimed: Unix timestamp (seconds) of the last claim
        rate: Player experience accrued per minute
    """
    exp: int = Field(default=0, ge=0)
    diamonds: int = Field(default=0, ge=0)
    mob_exp: int = Field(default=0, ge=0)
    last_claimed: float = 0.0
    rate: int = Field(default=1, ge=0)
