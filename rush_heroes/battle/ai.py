"""
Enemy AI - skill choice for turns nobody is controlling.
"""

from __future__ import annotations

import random
from typing import Optional

from rush_heroes.battle.unit import BattleUnit
from rush_heroes.components import Skill


class AIPolicy:
    """
    Picks a ready skill uniformly at random.

    Targets are never chosen here: the resolver's automatic targeting
    rules apply.
    """

    def choose_skill(self, unit: BattleUnit) -> Optional[Skill]:
        """
        Choose a skill for the unit.

        Returns:
            A skill with no cooldown remaining, or None if none is ready
        """
        available = unit.ready_skills()
        if not available:
            return None
        return random.choice(available)
