"""
Battle module - turn-based squad combat.

Provides:
- Battle units built from roster mobs
- Speed-sorted turn order
- Skill resolution and the damage formula
- Enemy AI
- The battle engine state machine and its pacer
"""

from rush_heroes.battle.unit import (
    BattleUnit,
    Side,
    AnimationIntent,
)
from rush_heroes.battle.damage import (
    calculate_damage,
    calculate_healing,
)
from rush_heroes.battle.turn_order import (
    TurnScheduler,
    TurnSlot,
)
from rush_heroes.battle.state import (
    BattleState,
    BattleResult,
    BattleContext,
    StageDescriptor,
)
from rush_heroes.battle.actions import (
    SkillResolver,
    ActionResult,
)
from rush_heroes.battle.ai import AIPolicy
from rush_heroes.battle.squad import (
    build_player_squad,
    build_enemy_squad,
    enemy_level,
    MAX_SQUAD_SIZE,
)
from rush_heroes.battle.events import BattleEvent
from rush_heroes.battle.system import BattleEngine
from rush_heroes.battle.pacing import BattlePacer

__all__ = [
    # Units
    "BattleUnit",
    "Side",
    "AnimationIntent",
    # Formulas
    "calculate_damage",
    "calculate_healing",
    # Turn order
    "TurnScheduler",
    "TurnSlot",
    # State
    "BattleState",
    "BattleResult",
    "BattleContext",
    "StageDescriptor",
    # Actions
    "SkillResolver",
    "ActionResult",
    "AIPolicy",
    # Squads
    "build_player_squad",
    "build_enemy_squad",
    "enemy_level",
    "MAX_SQUAD_SIZE",
    # Engine
    "BattleEvent",
    "BattleEngine",
    "BattlePacer",
]
