"""
Player component - the persistent account record.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from heroes_engine.core.component import Component
from rush_heroes.components.character import Mob
from rush_heroes.components.progression import (
    AFKRewards,
    CampaignProgress,
    TowerProgress,
)


class Player(Component):
    """
    Player account.

    Attributes:
        nickname: Display name (alphanumerics and underscore)
        id: Unique account id
        level: Account level
        exp: Experience toward the next account level
        diamonds: Premium currency
        tickets: Summon tickets
        mobs: Roster
        last_online: Unix timestamp (seconds) of the last save
    """
    nickname: str
    id: str
    level: int = Field(default=1, ge=1)
    exp: int = Field(default=0, ge=0)
    diamonds: int = Field(default=0, ge=0)
    tickets: int = Field(default=0, ge=0)
    mobs: list[Mob] = Field(default_factory=list)
    campaign: CampaignProgress = Field(default_factory=CampaignProgress)
    tower: TowerProgress = Field(default_factory=TowerProgress)
    afk: AFKRewards = Field(default_factory=AFKRewards)
    last_online: float = 0.0

    @property
    def exp_to_next_level(self) -> int:
        """Experience needed for the next account level."""
        return self.level * 1000

    def find_mob(self, mob_id: str) -> Optional[Mob]:
        """Get a roster mob by id."""
        for mob in self.mobs:
            if mob.id == mob_id:
                return mob
        return None
