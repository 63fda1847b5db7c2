"""
Battle state - the single authoritative record of one battle.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from rush_heroes.battle.turn_order import TurnScheduler, TurnSlot
from rush_heroes.battle.unit import BattleUnit, Side
from rush_heroes.components import CampaignStage, Skill, TowerFloor, Track


class BattleResult(Enum):
    """Outcome of a battle. Only ever moves forward from ONGOING."""
    ONGOING = "ongoing"
    VICTORY = "victory"
    DEFEAT = "defeat"


StageDescriptor = Union[CampaignStage, TowerFloor]


@dataclass(frozen=True)
class BattleContext:
    """Which track and stage/floor produced a battle, for reward settlement."""
    track: Track
    descriptor: StageDescriptor


@dataclass
class BattleState:
    """
    Authoritative battle record.

    Mutated in place by the engine only. Presentation reads it, never
    writes it.
    """
    party: list[BattleUnit]
    enemies: list[BattleUnit]
    turn_order: TurnScheduler
    context: Optional[BattleContext] = None
    log: list[str] = field(default_factory=list)
    result: BattleResult = BattleResult.ONGOING

    # Transient input/presentation flags
    is_animating: bool = False
    selected_skill: Optional[Skill] = None
    selected_target: Optional[str] = None

    @property
    def is_over(self) -> bool:
        return self.result is not BattleResult.ONGOING

    @property
    def current_turn(self) -> int:
        """Index of the acting slot in the turn order."""
        return self.turn_order.current_index

    @property
    def current_slot(self) -> Optional[TurnSlot]:
        return self.turn_order.current()

    @property
    def current_unit(self) -> Optional[BattleUnit]:
        slot = self.turn_order.current()
        return slot.unit if slot else None

    @property
    def is_player_turn(self) -> bool:
        slot = self.turn_order.current()
        return bool(slot and slot.is_player)

    @property
    def all_units(self) -> list[BattleUnit]:
        return self.party + self.enemies

    def squad(self, side: Side) -> list[BattleUnit]:
        return self.party if side is Side.PLAYER else self.enemies

    def living(self, side: Side) -> list[BattleUnit]:
        """Living units of a squad, in squad order."""
        return [u for u in self.squad(side) if u.is_alive]

    def find_unit(self, unit_id: str) -> Optional[BattleUnit]:
        for unit in self.all_units:
            if unit.unit_id == unit_id:
                return unit
        return None

    def add_log(self, line: str) -> None:
        self.log.append(line)

    def conclude(self, result: BattleResult) -> None:
        """
        Record a terminal result.

        Raises:
            ValueError: If the result is ONGOING or the battle already ended
        """
        if result is BattleResult.ONGOING:
            raise ValueError("A battle can only conclude with victory or defeat")
        if self.is_over:
            raise ValueError(f"Battle already ended in {self.result.value}")
        self.result = result
