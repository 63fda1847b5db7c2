"""
Character components - roles, base stats, species, roster mobs.
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from heroes_engine.core.component import Component
from rush_heroes.components.skill import Skill

MIN_STARS = 3
MAX_STARS = 10


class Role(Enum):
    """Role archetypes. A role picks the skill kit a mob is born with."""
    DPS = "DPS"
    TANK = "Tank"
    SUPPORT = "Support"


class BaseStats(Component):
    """Unscaled stats of a species at level 1 with no star bonus."""
    max_hp: int = Field(ge=1)
    attack: int = Field(ge=0)
    defense: int = Field(ge=0)
    speed: int = Field(ge=0)


class Species(Component):
    """An entry of the fixed species catalog."""
    id: str
    name: str
    stars: int = Field(ge=MIN_STARS, le=MAX_STARS)
    role: Role
    base_stats: BaseStats
    image: str = ""


class Mob(Component):
    """
    A collected creature in a player's roster.

    Scaled stats are always derived from ``base_stats``, ``level`` and
    ``stars``; see rush_heroes.progression.scaling.

    Attributes:
        id: Unique instance id
        name: Display name (gains a star suffix when evolved)
        base_name: Species name, used for evolution lineage
        species_id: Catalog id of the species
        exp: Experience toward the next level
    """
    id: str
    name: str
    base_name: str
    species_id: str
    stars: int = Field(ge=MIN_STARS, le=MAX_STARS)
    role: Role
    level: int = Field(default=1, ge=1)
    exp: int = Field(default=0, ge=0)
    base_stats: BaseStats
    max_hp: int = Field(ge=0)
    current_hp: int = Field(ge=0)
    attack: int = Field(ge=0)
    defense: int = Field(ge=0)
    speed: int = Field(ge=0)
    skills: list[Skill] = Field(default_factory=list)
    image: str = ""

    @property
    def exp_to_next_level(self) -> int:
        """Experience needed for the next level."""
        return self.level * 100
