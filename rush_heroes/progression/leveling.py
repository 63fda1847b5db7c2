"""
Leveling - experience grants for mobs and the player account.

Battle and AFK grants raise a level at most once per grant, leaving any
surplus as experience. Paid training keeps levelling while the
experience lasts.
"""

from __future__ import annotations

import logging

from rush_heroes.components import Mob, Player
from rush_heroes.progression.scaling import rescale_mob

logger = logging.getLogger(__name__)

TRAINING_EXP_PER_DIAMOND = 10


def mob_exp_needed(level: int) -> int:
    return level * 100


def player_exp_needed(level: int) -> int:
    return level * 1000


def afk_rate_for_level(level: int) -> int:
    """Idle exp per minute unlocked by an account level."""
    return max(1, level // 10)


def add_mob_exp(mob: Mob, amount: int) -> bool:
    """
    Grant experience to a mob, levelling up at most once.

    Returns:
        True if the mob gained a level
    """
    if amount < 0:
        raise ValueError(f"Experience grant must be >= 0, got {amount}")

    total = mob.exp + amount
    needed = mob_exp_needed(mob.level)
    if total < needed:
        mob.exp = total
        return False

    mob.level += 1
    mob.exp = total - needed
    rescale_mob(mob)
    logger.debug(f"{mob.name} reached level {mob.level}")
    return True


def training_cost(amount: int) -> int:
    """Diamonds charged for training a mob with ``amount`` exp."""
    return amount // TRAINING_EXP_PER_DIAMOND


def train_mob(player: Player, mob_id: str, amount: int) -> int:
    """
    Buy experience for a roster mob with diamonds.

    Unlike battle grants, training levels up as many times as the
    experience allows.

    Args:
        player: Owner of the mob
        mob_id: Roster id
        amount: Experience to add

    Returns:
        Levels gained; 0 when the mob is unknown or diamonds run short
    """
    if amount < 0:
        raise ValueError(f"Experience grant must be >= 0, got {amount}")

    mob = player.find_mob(mob_id)
    if mob is None:
        logger.warning(f"Cannot train unknown mob {mob_id}")
        return 0

    cost = training_cost(amount)
    if player.diamonds < cost:
        logger.info(f"Training {mob.name} costs {cost} diamonds, have {player.diamonds}")
        return 0

    exp = mob.exp + amount
    level = mob.level
    while exp >= mob_exp_needed(level):
        exp -= mob_exp_needed(level)
        level += 1

    gained = level - mob.level
    mob.level = level
    mob.exp = exp
    rescale_mob(mob)
    player.diamonds -= cost
    return gained


def add_player_exp(player: Player, amount: int) -> bool:
    """
    Grant account experience, levelling up at most once.

    A level-up also raises the AFK rate.

    Returns:
        True if the player gained a level
    """
    if amount < 0:
        raise ValueError(f"Experience grant must be >= 0, got {amount}")

    total = player.exp + amount
    needed = player_exp_needed(player.level)
    if total < needed:
        player.exp = total
        return False

    player.level += 1
    player.exp = total - needed
    player.afk.rate = afk_rate_for_level(player.level)
    logger.info(f"{player.nickname} reached level {player.level}")
    return True
