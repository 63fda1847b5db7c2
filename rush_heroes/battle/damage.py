"""
Damage and healing formulas.
"""

from __future__ import annotations

import math
import random

from rush_heroes.battle.unit import BattleUnit
from rush_heroes.components import Skill, StatName

DEFENSE_FACTOR = 0.5
HEAL_ATTACK_FACTOR = 0.30
JITTER_MIN = -10
JITTER_MAX = 9


def effective_attack(attacker: BattleUnit) -> float:
    """Attack raised by the attacker's first attack buff, if any."""
    buff = attacker.first_buff(StatName.ATK)
    bonus = buff.value if buff else 0
    return attacker.attack * (1 + bonus / 100)


def effective_defense(target: BattleUnit) -> float:
    """Defense lowered by the target's first defense debuff, if any."""
    debuff = target.first_debuff(StatName.DEF)
    penalty = debuff.value if debuff else 0
    return target.defense * (1 - penalty / 100)


def base_damage(attacker: BattleUnit, target: BattleUnit, skill: Skill) -> int:
    """Damage before the random adjustment. Always at least 1."""
    raw = effective_attack(attacker) * skill.damage_multiplier
    raw -= effective_defense(target) * DEFENSE_FACTOR
    return max(1, math.floor(raw))


def calculate_damage(attacker: BattleUnit, target: BattleUnit, skill: Skill) -> int:
    """
    Damage a skill deals to one target.

    The base damage gets a uniform adjustment in [-10, +9]. A roll that
    drives the result negative is clamped to 0 so damage never heals.
    """
    jitter = random.randint(JITTER_MIN, JITTER_MAX)
    return max(0, base_damage(attacker, target, skill) + jitter)


def calculate_healing(caster: BattleUnit, skill: Skill) -> int:
    """Heal amount: the skill's value plus 30% of the caster's attack."""
    return skill.effect.value + math.floor(caster.attack * HEAL_ATTACK_FACTOR)
