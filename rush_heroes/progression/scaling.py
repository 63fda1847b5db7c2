"""
Stat scaling - level and star multipliers.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from rush_heroes.components import BaseStats, Mob

LEVEL_STEP = 0.10
STAR_STEP = 0.30
BASE_STARS = 3


@dataclass(frozen=True)
class ScaledStats:
    """Stats after level and star multipliers."""
    max_hp: int
    attack: int
    defense: int
    speed: int


def level_multiplier(level: int) -> float:
    """1.0 at level 1, +10% per level above."""
    return 1 + (level - 1) * LEVEL_STEP


def star_multiplier(stars: int) -> float:
    """1.0 for a 3-star, +30% per tier above."""
    return 1 + (stars - BASE_STARS) * STAR_STEP


def scale_stats(base: BaseStats, level: int, stars: int) -> ScaledStats:
    """
    Scale base stats to a level and star tier.

    Args:
        base: Unscaled species stats
        level: Unit level (>= 1)
        stars: Rarity tier (3-10)

    Returns:
        Stats multiplied by level x star multiplier, each floored
    """
    multiplier = level_multiplier(level) * star_multiplier(stars)
    return ScaledStats(
        max_hp=math.floor(base.max_hp * multiplier),
        attack=math.floor(base.attack * multiplier),
        defense=math.floor(base.defense * multiplier),
        speed=math.floor(base.speed * multiplier),
    )


def rescale_mob(mob: Mob) -> Mob:
    """
    Re-derive a mob's stats from its base stats, level and stars.

    Current HP is reset to the new max HP. Mutates and returns the mob.
    """
    scaled = scale_stats(mob.base_stats, mob.level, mob.stars)
    mob.max_hp = scaled.max_hp
    mob.current_hp = scaled.max_hp
    mob.attack = scaled.attack
    mob.defense = scaled.defense
    mob.speed = scaled.speed
    return mob
