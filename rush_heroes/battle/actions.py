"""
Skill resolution - target derivation and effect application.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from rush_heroes.battle.damage import calculate_damage, calculate_healing
from rush_heroes.battle.state import BattleState
from rush_heroes.battle.unit import AnimationIntent, BattleUnit
from rush_heroes.components import EffectKind, Skill, StatusEntry, TargetMode

logger = logging.getLogger(__name__)


@dataclass
class ActionResult:
    """
    Result of resolving a skill.

    Damage and healing are the amounts the formulas produced, which can
    exceed what the target actually lost or regained (e.g. overheal).
    """
    caster_id: str
    skill_id: str
    skill_name: str
    target_ids: list[str] = field(default_factory=list)
    damage_dealt: dict[str, int] = field(default_factory=dict)   # unit_id -> damage
    healing_done: dict[str, int] = field(default_factory=dict)
    statuses_applied: dict[str, StatusEntry] = field(default_factory=dict)
    defeated: list[str] = field(default_factory=list)
    message: str = ""

    @property
    def total_damage(self) -> int:
        return sum(self.damage_dealt.values())

    @property
    def total_healing(self) -> int:
        return sum(self.healing_done.values())


class SkillResolver:
    """
    Applies a skill to the battle state.

    Liveness of an explicitly chosen target is not re-checked here;
    the engine only offers living targets.
    """

    def derive_targets(
        self,
        caster: BattleUnit,
        skill: Skill,
        target_id: Optional[str],
        state: BattleState,
    ) -> list[BattleUnit]:
        """
        Compute the effective target set of a skill.

        Args:
            caster: Acting unit
            skill: Skill being used
            target_id: Explicit target, or None for automatic targeting
            state: Battle state

        Returns:
            Targets in application order (possibly empty)
        """
        own = caster.side
        foe = caster.side.opponent
        mode = skill.target

        if mode is TargetMode.SINGLE:
            if target_id is not None:
                target = state.find_unit(target_id)
                return [target] if target else []
            opponents = state.living(foe)
            return opponents[:1]

        if mode is TargetMode.ALL:
            if skill.effect.kind in (EffectKind.HEAL, EffectKind.BUFF):
                return state.living(own)
            return state.living(foe)

        if mode is TargetMode.SELF:
            return [caster]

        if mode is TargetMode.ALLY:
            damaged = [u for u in state.living(own) if u.is_damaged]
            return damaged[:1]

        raise ValueError(f"Unhandled target mode: {mode}")

    def resolve(
        self,
        caster: BattleUnit,
        skill: Skill,
        target_id: Optional[str],
        state: BattleState,
    ) -> ActionResult:
        """
        Resolve a skill: apply effects, start its cooldown, log the outcome.

        Returns:
            What happened, per target
        """
        result = ActionResult(
            caster_id=caster.unit_id,
            skill_id=skill.id,
            skill_name=skill.name,
        )

        targets = self.derive_targets(caster, skill, target_id, state)
        for target in targets:
            result.target_ids.append(target.unit_id)
            self._apply_effect(caster, target, skill, result)
            damaged = result.damage_dealt.get(target.unit_id, 0) > 0
            target.animation = AnimationIntent.HIT if damaged else AnimationIntent.HEAL

        # Cooldown starts on the caster's own copy of the skill
        owned = caster.get_skill(skill.id)
        if owned is not None:
            owned.current_cooldown = owned.cooldown

        result.message = self._describe(caster, skill, result)
        state.add_log(result.message)

        if not targets:
            logger.debug(f"{caster.name} used {skill.name} with no valid target")
        return result

    def _apply_effect(
        self,
        caster: BattleUnit,
        target: BattleUnit,
        skill: Skill,
        result: ActionResult,
    ) -> None:
        """Apply a skill's effect to one target."""
        effect = skill.effect

        if effect.kind is EffectKind.DAMAGE:
            damage = calculate_damage(caster, target, skill)
            target.take_damage(damage)
            result.damage_dealt[target.unit_id] = damage
            if not target.is_alive:
                result.defeated.append(target.unit_id)

        elif effect.kind is EffectKind.HEAL:
            healing = calculate_healing(caster, skill)
            target.heal(healing)
            result.healing_done[target.unit_id] = healing

        elif effect.kind in (EffectKind.BUFF, EffectKind.DEBUFF):
            if not effect.applies_status:
                return
            entry = StatusEntry(
                name=skill.name,
                stat=effect.stat,
                value=effect.value,
                duration=effect.duration,
            )
            # No stacking rules: every application is an independent entry
            if effect.kind is EffectKind.BUFF:
                target.buffs.append(entry)
            else:
                target.debuffs.append(entry)
            result.statuses_applied[target.unit_id] = entry

        elif effect.kind is EffectKind.SPECIAL:
            pass

        else:
            raise ValueError(f"Unhandled effect kind: {effect.kind}")

    @staticmethod
    def _describe(caster: BattleUnit, skill: Skill, result: ActionResult) -> str:
        if result.total_damage > 0:
            return f"{caster.name} used {skill.name} dealing {result.total_damage} damage!"
        if result.total_healing > 0:
            return f"{caster.name} used {skill.name} healing {result.total_healing} HP!"
        return f"{caster.name} used {skill.name}!"
