"""
AFK rewards - idle experience and diamonds.

Offline time is converted in one go when a save is loaded; while the
game runs, rewards trickle in once per minute. Both land in the
player's pending counters until claimed.
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass, field
from typing import Optional

from rush_heroes.components import AFKRewards, Player
from rush_heroes.progression.leveling import add_mob_exp, add_player_exp

logger = logging.getLogger(__name__)

MIN_OFFLINE_RATE = 2
MOB_EXP_RATIO = 1.5


def offline_rate(level: int) -> int:
    return max(MIN_OFFLINE_RATE, level // 5)


def offline_minutes(last_online: float, now: Optional[float] = None) -> int:
    """Whole minutes elapsed since a timestamp (never negative)."""
    now = time.time() if now is None else now
    return max(0, int((now - last_online) // 60))


def calculate_offline(player: Player, minutes: int) -> AFKRewards:
    """
    Add rewards for time spent offline.

    The player's AFK rate is set to the offline rate for their level.

    Args:
        player: Player record (mutated)
        minutes: Whole minutes offline

    Returns:
        The player's updated pending rewards
    """
    afk = player.afk
    if minutes <= 0:
        return afk

    rate = offline_rate(player.level)
    exp = rate * minutes
    afk.rate = rate
    afk.exp += exp
    afk.diamonds += exp // 5
    afk.mob_exp += math.floor(exp / MOB_EXP_RATIO)

    logger.info(f"{player.nickname} was away {minutes} min: +{exp} exp pending")
    return afk


def accrue(afk: AFKRewards, minutes: int = 1) -> AFKRewards:
    """Add online idle rewards for the given number of whole minutes."""
    for _ in range(minutes):
        afk.exp += afk.rate
        afk.diamonds += afk.rate // 10
        afk.mob_exp += afk.rate // 2
    return afk


@dataclass
class AFKClaim:
    """What a claim paid out."""
    exp: int = 0
    diamonds: int = 0
    mob_exp_each: int = 0
    player_leveled: bool = False
    mobs_leveled: list[str] = field(default_factory=list)


def claim(player: Player, now: Optional[float] = None) -> AFKClaim:
    """
    Pay out pending AFK rewards and reset the counters.

    Mob experience is split evenly over the whole roster (remainder
    discarded); each mob can gain at most one level per claim.
    """
    afk = player.afk
    share = afk.mob_exp // max(1, len(player.mobs))
    payout = AFKClaim(exp=afk.exp, diamonds=afk.diamonds, mob_exp_each=share)

    payout.player_leveled = add_player_exp(player, afk.exp)
    for mob in player.mobs:
        if add_mob_exp(mob, share):
            payout.mobs_leveled.append(mob.id)
    player.diamonds += afk.diamonds

    afk.exp = 0
    afk.diamonds = 0
    afk.mob_exp = 0
    afk.last_claimed = time.time() if now is None else now
    return payout
