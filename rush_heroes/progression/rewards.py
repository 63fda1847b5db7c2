"""
Reward settlement - applying a finished battle to the player record.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from rush_heroes.battle.state import BattleResult, BattleState
from rush_heroes.components import CampaignStage, Player, Rewards, TowerFloor
from rush_heroes.progression.leveling import add_mob_exp, add_player_exp

logger = logging.getLogger(__name__)

SQUAD_EXP_DIVISOR = 4


@dataclass
class Settlement:
    """What a settled battle granted."""
    result: BattleResult
    rewards: Rewards = field(default_factory=Rewards)
    player_leveled: bool = False
    mobs_leveled: list[str] = field(default_factory=list)

    @property
    def granted(self) -> bool:
        return self.result is BattleResult.VICTORY


def settle(player: Player, state: BattleState, squad_ids: Iterable[str]) -> Settlement:
    """
    Apply a finished battle's outcome to the player.

    On victory the player gets the stage/floor rewards, every squad mob
    gets a quarter of the exp, and track progress moves on. Defeat
    grants nothing.

    Args:
        player: Player record (mutated)
        state: Final battle state
        squad_ids: Roster ids of the mobs that fought

    Raises:
        ValueError: If the battle is still ongoing or has no context
    """
    if not state.is_over:
        raise ValueError("Cannot settle a battle that is still ongoing")

    if state.result is not BattleResult.VICTORY:
        return Settlement(result=state.result)

    if state.context is None:
        raise ValueError("Cannot settle a battle without a stage or floor")

    descriptor = state.context.descriptor
    rewards = descriptor.rewards
    settlement = Settlement(result=state.result, rewards=rewards.clone())

    settlement.player_leveled = add_player_exp(player, rewards.exp)
    player.diamonds += rewards.diamonds
    player.tickets += rewards.tickets or 0

    share = rewards.exp // SQUAD_EXP_DIVISOR
    for mob_id in dict.fromkeys(squad_ids):
        mob = player.find_mob(mob_id)
        if mob is None:
            logger.warning(f"Squad mob {mob_id} is not in the roster")
            continue
        if add_mob_exp(mob, share):
            settlement.mobs_leveled.append(mob_id)

    if isinstance(descriptor, CampaignStage):
        _complete_stage(player, descriptor)
    elif isinstance(descriptor, TowerFloor):
        _complete_floor(player, descriptor)

    logger.info(f"{player.nickname} cleared {descriptor.name}")
    return settlement


def _complete_stage(player: Player, cleared: CampaignStage) -> None:
    stages = player.campaign.stages
    for index, stage in enumerate(stages):
        if stage.chapter == cleared.chapter and stage.stage == cleared.stage:
            stage.completed = True
            stage.stars = 3
            if index + 1 < len(stages):
                following = stages[index + 1]
                following.unlocked = True
                campaign = player.campaign
                if (following.chapter, following.stage) > (campaign.current_chapter, campaign.current_stage):
                    campaign.current_chapter = following.chapter
                    campaign.current_stage = following.stage
            return
    logger.warning(f"{cleared.name} is not part of {player.nickname}'s campaign")


def _complete_floor(player: Player, cleared: TowerFloor) -> None:
    tower = player.tower
    if cleared.floor not in tower.completed_floors:
        tower.completed_floors.append(cleared.floor)
        tower.completed_floors.sort()
    tower.current_floor = max(tower.current_floor, cleared.floor + 1)
