"""
Summoning - trading tickets for random level 1 mobs.
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from rush_heroes.components import Mob, Player, Species

if TYPE_CHECKING:
    from rush_heroes.content import Catalog

logger = logging.getLogger(__name__)

TICKETS_PER_PULL = 1

# Cumulative roll thresholds, checked in order; anything above is 3-star
RARITY_TABLE = (
    (0.05, 5),
    (0.30, 4),
)
DEFAULT_STARS = 3


def roll_stars(roll: float) -> int:
    """Map a uniform [0, 1) roll to a rarity tier."""
    for threshold, stars in RARITY_TABLE:
        if roll < threshold:
            return stars
    return DEFAULT_STARS


def pull(catalog: Catalog) -> Species:
    """Draw one species: roll the tier, then pick uniformly within it."""
    stars = roll_stars(random.random())
    tier = catalog.species_by_stars(stars)
    if not tier:
        raise ValueError(f"Catalog has no {stars}-star species")
    return random.choice(tier)


def summon(player: Player, catalog: Catalog, count: int = 1) -> list[Mob]:
    """
    Summon ``count`` mobs into the player's roster.

    Returns:
        The new mobs; empty (and nothing spent) without enough tickets
    """
    if count < 1:
        raise ValueError(f"Summon count must be >= 1, got {count}")

    cost = count * TICKETS_PER_PULL
    if player.tickets < cost:
        logger.info(f"Summoning {count} needs {cost} tickets, have {player.tickets}")
        return []

    results = [catalog.create_mob(pull(catalog)) for _ in range(count)]
    player.tickets -= cost
    player.mobs.extend(results)

    logger.info(f"{player.nickname} summoned {', '.join(m.name for m in results)}")
    return results
