"""
Squad building - player squads from the roster, enemy squads from a stage.
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Iterable, Sequence

from rush_heroes.battle.unit import BattleUnit, Side
from rush_heroes.components import Mob

if TYPE_CHECKING:
    from rush_heroes.battle.state import StageDescriptor
    from rush_heroes.content import Catalog

logger = logging.getLogger(__name__)

MAX_SQUAD_SIZE = 4


def enemy_level(difficulty: int) -> int:
    """Level of every enemy on a stage/floor of the given difficulty."""
    return max(1, difficulty * 2)


def build_player_squad(
    selected_ids: Iterable[str],
    roster: Sequence[Mob],
    max_size: int = MAX_SQUAD_SIZE,
) -> list[BattleUnit]:
    """
    Battle copies of the selected roster mobs.

    Mobs keep roster order; at most ``max_size`` are taken. Unknown ids
    are ignored. An empty selection gives an empty squad, which callers
    reject before starting a battle.
    """
    selected = set(selected_ids)
    chosen = [mob for mob in roster if mob.id in selected][:max_size]
    return [BattleUnit.from_mob(mob, Side.PLAYER) for mob in chosen]


def build_enemy_squad(
    descriptor: StageDescriptor,
    catalog: Catalog,
    max_size: int = MAX_SQUAD_SIZE,
) -> list[BattleUnit]:
    """
    Procedural enemy squad for a stage or floor.

    Species are drawn uniformly from the whole pool (rarity plays no
    part) and every enemy is created at the descriptor's enemy level.
    """
    pool = catalog.species
    count = min(descriptor.enemies, max_size)
    if count < descriptor.enemies:
        logger.debug(
            f"{descriptor.name} asks for {descriptor.enemies} enemies, capped at {max_size}"
        )

    level = enemy_level(descriptor.difficulty)
    squad = []
    for _ in range(count):
        species = random.choice(pool)
        mob = catalog.create_mob(species, level=level)
        squad.append(BattleUnit.from_mob(mob, Side.ENEMY))
    return squad
