"""
Battle units - live, battle-scoped copies of roster mobs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from rush_heroes.components import Mob, Role, Skill, StatName, StatusEntry


class Side(Enum):
    """Squad ownership of a unit."""
    PLAYER = "player"
    ENEMY = "enemy"

    @property
    def opponent(self) -> Side:
        return Side.ENEMY if self is Side.PLAYER else Side.PLAYER


class AnimationIntent(Enum):
    """Short-lived presentation tag, cleared after each action."""
    NONE = ""
    ATTACK = "attack"
    HIT = "hit"
    HEAL = "heal"


@dataclass
class BattleUnit:
    """
    A participant in battle.

    Created fresh from a roster mob at battle start and discarded when
    the battle ends; nothing here is written back to the roster.
    """
    unit_id: str
    name: str
    base_name: str
    side: Side
    stars: int
    role: Role
    level: int
    exp: int

    # Stats
    max_hp: int
    current_hp: int
    attack: int
    defense: int
    speed: int

    # Kit and statuses
    skills: list[Skill] = field(default_factory=list)
    buffs: list[StatusEntry] = field(default_factory=list)
    debuffs: list[StatusEntry] = field(default_factory=list)

    # Presentation
    animation: AnimationIntent = AnimationIntent.NONE
    image: str = ""

    @classmethod
    def from_mob(cls, mob: Mob, side: Side) -> BattleUnit:
        """Battle copy of a mob: full HP, cooldowns ready, no statuses."""
        return cls(
            unit_id=mob.id,
            name=mob.name,
            base_name=mob.base_name,
            side=side,
            stars=mob.stars,
            role=mob.role,
            level=mob.level,
            exp=mob.exp,
            max_hp=mob.max_hp,
            current_hp=mob.max_hp,
            attack=mob.attack,
            defense=mob.defense,
            speed=mob.speed,
            skills=[
                skill.model_copy(update={"current_cooldown": 0}, deep=True)
                for skill in mob.skills
            ],
            image=mob.image,
        )

    @property
    def is_alive(self) -> bool:
        """Alive iff HP is above zero."""
        return self.current_hp > 0

    @property
    def is_damaged(self) -> bool:
        return self.current_hp < self.max_hp

    @property
    def hp_percent(self) -> float:
        """Get HP as a fraction (0-1)."""
        if self.max_hp <= 0:
            return 0.0
        return self.current_hp / self.max_hp

    def get_skill(self, skill_id: str) -> Optional[Skill]:
        for skill in self.skills:
            if skill.id == skill_id:
                return skill
        return None

    def ready_skills(self) -> list[Skill]:
        """Skills whose cooldown has run out."""
        return [s for s in self.skills if s.current_cooldown == 0]

    def take_damage(self, amount: int) -> int:
        """
        Lose HP, never below zero.

        Returns:
            HP actually lost
        """
        amount = max(0, amount)
        actual = min(amount, self.current_hp)
        self.current_hp -= actual
        return actual

    def heal(self, amount: int) -> int:
        """
        Restore HP, never above max.

        Returns:
            HP actually restored
        """
        amount = max(0, amount)
        old = self.current_hp
        self.current_hp = min(self.current_hp + amount, self.max_hp)
        return self.current_hp - old

    def first_buff(self, stat: StatName) -> Optional[StatusEntry]:
        return next((b for b in self.buffs if b.stat == stat), None)

    def first_debuff(self, stat: StatName) -> Optional[StatusEntry]:
        return next((d for d in self.debuffs if d.stat == stat), None)

    def tick(self) -> list[StatusEntry]:
        """
        End-of-turn upkeep: cooldowns and status durations drop by one.

        Returns:
            Statuses that expired this tick
        """
        for skill in self.skills:
            if skill.current_cooldown > 0:
                skill.current_cooldown -= 1

        expired: list[StatusEntry] = []
        for entries in (self.buffs, self.debuffs):
            for entry in entries:
                entry.duration = max(0, entry.duration - 1)
            expired.extend(e for e in entries if e.duration == 0)
            entries[:] = [e for e in entries if e.duration > 0]
        return expired

    def clear_animation(self) -> None:
        self.animation = AnimationIntent.NONE
