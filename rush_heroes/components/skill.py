"""
Skill components - skill kinds, effects, targeting, status entries.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import Field

from heroes_engine.core.component import Component


class SkillKind(Enum):
    """Slot of a skill in a kit. Only affects presentation."""
    BASIC = "basic"
    SPECIAL = "special"
    ULTIMATE = "ultimate"


class EffectKind(Enum):
    """What a skill does to each of its targets."""
    DAMAGE = "damage"
    HEAL = "heal"
    BUFF = "buff"
    DEBUFF = "debuff"
    SPECIAL = "special"  # No state change on targets


class TargetMode(Enum):
    """How a skill derives its target set."""
    SINGLE = "single"  # Explicit target, or first living opponent
    ALL = "all"        # Own squad for heal/buff, opposing squad otherwise
    SELF = "self"
    ALLY = "ally"      # First damaged ally in squad order

    @property
    def needs_target(self) -> bool:
        """Whether a player must pick a target before the skill runs."""
        return self in (TargetMode.SINGLE, TargetMode.ALLY)


class StatName(Enum):
    """Stats a buff or debuff can affect."""
    HP = "hp"
    ATK = "atk"
    DEF = "def"
    SPD = "spd"


class SkillEffect(Component):
    """
    Effect descriptor of a skill.

    Attributes:
        kind: Effect kind
        value: Magnitude (heal base amount, buff/debuff percent, nominal power)
        duration: Turns a buff/debuff lasts
        stat: Stat affected by a buff/debuff
    """
    kind: EffectKind
    value: int = 0
    duration: Optional[int] = Field(default=None, ge=1)
    stat: Optional[StatName] = None

    @property
    def applies_status(self) -> bool:
        """Buff/debuff effects only land when they name a stat and duration."""
        return (
            self.kind in (EffectKind.BUFF, EffectKind.DEBUFF)
            and self.stat is not None
            and self.duration is not None
        )


class Skill(Component):
    """
    A skill owned by a mob.

    Each copy carries its own cooldown counter, so the same kit entry
    can be on cooldown for one mob and ready for another.
    """
    id: str
    name: str
    kind: SkillKind = SkillKind.BASIC
    cooldown: int = Field(default=0, ge=0)
    current_cooldown: int = Field(default=0, ge=0)
    description: str = ""
    effect: SkillEffect
    damage_multiplier: float = Field(default=0.0, ge=0)
    target: TargetMode = TargetMode.SINGLE

    @property
    def is_ready(self) -> bool:
        return self.current_cooldown == 0


class StatusEntry(Component):
    """
    An active buff or debuff on a unit.

    Attributes:
        name: Name of the skill that applied it
        stat: Affected stat
        value: Magnitude in percent
        duration: Remaining duration in turns
    """
    name: str
    stat: StatName
    value: int
    duration: int = Field(ge=0)
