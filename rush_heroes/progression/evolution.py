"""
Evolution - fusing duplicate mobs into a higher star tier.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from rush_heroes.components import MAX_STARS, MIN_STARS, Mob, Player
from rush_heroes.progression.scaling import rescale_mob

logger = logging.getLogger(__name__)


def materials_required(stars: int) -> int:
    """A 3-star needs one material, a 4-star two, and so on."""
    return stars - 2


def evolved_name(base_name: str, stars: int) -> str:
    return f"{base_name} ★{stars}"


def eligible_materials(player: Player, target: Mob) -> list[Mob]:
    """Roster mobs that may be consumed to evolve ``target``."""
    return [m for m in player.mobs if m.id != target.id and _is_material_for(m, target)]


def _is_material_for(material: Mob, target: Mob) -> bool:
    if material.stars != target.stars:
        return False
    # Base-tier fusion must use copies of the same species
    if target.stars == MIN_STARS:
        return material.base_name == target.base_name
    return True


def evolve(player: Player, target_id: str, material_ids: Iterable[str]) -> Optional[Mob]:
    """
    Evolve a mob by consuming materials.

    The target keeps its level and experience, gains a star, is renamed
    and has its stats re-derived.

    Args:
        player: Roster owner (mutated)
        target_id: Mob to evolve
        material_ids: Mobs to consume; exactly ``stars - 2`` are needed

    Returns:
        The evolved mob, or None if the evolution is not allowed
    """
    target = player.find_mob(target_id)
    if target is None:
        logger.warning(f"Cannot evolve unknown mob {target_id}")
        return None

    if target.stars >= MAX_STARS:
        logger.info(f"{target.name} is already at {MAX_STARS} stars")
        return None

    ids = list(dict.fromkeys(material_ids))
    if target_id in ids:
        return None

    required = materials_required(target.stars)
    if len(ids) != required:
        logger.info(f"{target.name} needs {required} materials, got {len(ids)}")
        return None

    materials = [player.find_mob(mob_id) for mob_id in ids]
    if any(m is None or not _is_material_for(m, target) for m in materials):
        logger.info(f"Invalid evolution materials for {target.name}")
        return None

    consumed = set(ids)
    player.mobs = [m for m in player.mobs if m.id not in consumed]

    target.stars += 1
    target.name = evolved_name(target.base_name, target.stars)
    rescale_mob(target)

    logger.info(f"{target.base_name} evolved to {target.stars} stars")
    return target
