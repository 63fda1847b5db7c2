"""
Battle system - turn-based combat controller.

The engine is synchronous. Every action goes through three explicit
phases so a presentation layer can pace them however it likes:

    begin_action()   caster gets the "attack" intent, input is locked
    commit_action()  the skill resolves, termination is checked, the
                     turn advances and every unit ticks
    finish_action()  intents are cleared and input unlocks

``advance()`` steps whichever phase is next; BattlePacer drives the
phases from a frame clock.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from heroes_engine.core.events import EventBus
from rush_heroes.battle.actions import ActionResult, SkillResolver
from rush_heroes.battle.ai import AIPolicy
from rush_heroes.battle.events import BattleEvent
from rush_heroes.battle.squad import MAX_SQUAD_SIZE
from rush_heroes.battle.state import BattleContext, BattleResult, BattleState
from rush_heroes.battle.turn_order import TurnScheduler
from rush_heroes.battle.unit import AnimationIntent, BattleUnit, Side
from rush_heroes.components import Skill, TargetMode

logger = logging.getLogger(__name__)


@dataclass
class PendingAction:
    """The single action in flight."""
    unit: BattleUnit
    skill: Skill
    target_id: Optional[str] = None
    committed: bool = False
    result: Optional[ActionResult] = None


class BattleEngine:
    """
    Turn-based battle controller.

    Owns one BattleState at a time and is the only writer to it.

    Usage:
        engine = BattleEngine(events)
        engine.start_battle(party, enemies, context)
        engine.select_skill("dps_special")
        engine.select_target(enemy_id)
        engine.advance()   # commit
        engine.advance()   # finish
    """

    def __init__(
        self,
        events: Optional[EventBus] = None,
        resolver: Optional[SkillResolver] = None,
        ai: Optional[AIPolicy] = None,
        max_squad_size: int = MAX_SQUAD_SIZE,
    ):
        self.events = events or EventBus()
        self._resolver = resolver or SkillResolver()
        self._ai = ai or AIPolicy()
        self._max_squad_size = max_squad_size

        self._state: Optional[BattleState] = None
        self._pending: Optional[PendingAction] = None
        # Bumped on every start/teardown so stale timers can tell
        self._generation = 0

    # Lifecycle

    def start_battle(
        self,
        party: list[BattleUnit],
        enemies: list[BattleUnit],
        context: Optional[BattleContext] = None,
    ) -> bool:
        """
        Start a battle.

        Args:
            party: Player squad (1 to max squad size units)
            enemies: Enemy squad (1 to max squad size units)
            context: Track and stage/floor that produced the battle

        Returns:
            True if battle started successfully
        """
        if self._state is not None:
            logger.warning("start_battle called while a battle is active")
            return False

        if not party or not enemies:
            logger.warning("Cannot start a battle with an empty squad")
            return False

        if len(party) > self._max_squad_size or len(enemies) > self._max_squad_size:
            logger.warning(f"Squads are limited to {self._max_squad_size} units")
            return False

        self._state = BattleState(
            party=list(party),
            enemies=list(enemies),
            turn_order=TurnScheduler(list(party), list(enemies)),
            context=context,
            log=["Battle started!"],
        )
        self._pending = None
        self._generation += 1

        logger.info(f"Battle started: {len(party)} vs {len(enemies)}")
        self.events.publish(
            BattleEvent.BATTLE_STARTED,
            party=[u.unit_id for u in party],
            enemies=[u.unit_id for u in enemies],
            first=self._state.current_unit.unit_id,
        )
        return True

    def end_battle(self) -> Optional[BattleState]:
        """
        Tear down the battle.

        Any phase still scheduled against it becomes a no-op.

        Returns:
            The final state, for reward settlement
        """
        state = self._state
        if state is None:
            return None

        self._state = None
        self._pending = None
        self._generation += 1

        logger.info(f"Battle ended: {state.result.value}")
        self.events.publish(BattleEvent.BATTLE_ENDED, result=state.result)
        return state

    # Player input

    def select_skill(self, skill_id: str) -> Optional[BattleState]:
        """
        Pick a skill for the acting player unit.

        Skills targeting "all" or "self" start right away; "single" and
        "ally" skills wait for select_target(). Ignored off the player's
        turn, while animating, after the battle ended, or when the skill
        is on cooldown.
        """
        state = self._state
        if not self._accepts_input(state) or not state.is_player_turn:
            return state

        skill = state.current_unit.get_skill(skill_id)
        if skill is None or not skill.is_ready:
            return state

        state.selected_skill = skill
        state.selected_target = None
        self.events.publish(
            BattleEvent.SKILL_SELECTED,
            unit_id=state.current_unit.unit_id,
            skill_id=skill.id,
        )

        if not skill.target.needs_target:
            self.begin_action(skill)
        return state

    def select_target(self, target_id: str) -> Optional[BattleState]:
        """
        Pick the target for the selected skill and start the action.

        Ignored when no skill is selected or the skill picks its own
        targets.
        """
        state = self._state
        if not self._accepts_input(state) or state.selected_skill is None:
            return state

        skill = state.selected_skill
        if not skill.target.needs_target:
            return state

        state.selected_target = target_id
        self.begin_action(skill, target_id)
        return state

    def targetable_units(self) -> list[BattleUnit]:
        """Units a player may click for the selected skill."""
        state = self._state
        if state is None or state.selected_skill is None:
            return []

        unit = state.current_unit
        if state.selected_skill.target is TargetMode.SINGLE:
            return state.living(unit.side.opponent)
        if state.selected_skill.target is TargetMode.ALLY:
            return state.living(unit.side)
        return []

    # Action phases

    def begin_action(self, skill: Skill, target_id: Optional[str] = None) -> bool:
        """
        Phase 1: lock input and mark the caster as attacking.

        Returns:
            True if the action is now in flight
        """
        state = self._state
        if not self._accepts_input(state):
            return False

        unit = state.current_unit
        owned = unit.get_skill(skill.id)
        if owned is None or not owned.is_ready:
            return False

        state.is_animating = True
        unit.animation = AnimationIntent.ATTACK
        self._pending = PendingAction(unit=unit, skill=owned, target_id=target_id)

        self.events.publish(
            BattleEvent.ACTION_STARTED,
            unit_id=unit.unit_id,
            skill_id=owned.id,
            target_id=target_id,
        )
        return True

    def commit_action(self) -> Optional[ActionResult]:
        """
        Phase 2: resolve the pending skill and complete the turn.

        Returns:
            The action result, or None if nothing was waiting to commit
        """
        state = self._state
        pending = self._pending
        if state is None or pending is None or pending.committed or state.is_over:
            return None

        result = self._resolver.resolve(pending.unit, pending.skill, pending.target_id, state)
        pending.committed = True
        pending.result = result

        self._publish_result(result)
        self.events.publish(
            BattleEvent.ACTION_COMMITTED,
            unit_id=pending.unit.unit_id,
            skill_id=pending.skill.id,
            result=result,
        )
        self._complete_turn()
        return result

    def finish_action(self) -> bool:
        """
        Phase 3: clear animation intents and unlock input.

        Returns:
            True if an action was finished
        """
        state = self._state
        pending = self._pending
        if state is None or pending is None or not pending.committed:
            return False

        for unit in state.all_units:
            unit.clear_animation()
        state.is_animating = False
        state.selected_skill = None
        state.selected_target = None
        self._pending = None

        self.events.publish(BattleEvent.ACTION_COMPLETED, unit_id=pending.unit.unit_id)
        return True

    def advance(self) -> Optional[BattleState]:
        """Step the in-flight action to its next phase."""
        if self._pending is not None:
            if not self._pending.committed:
                self.commit_action()
            else:
                self.finish_action()
        return self._state

    def execute(self, skill_id: str, target_id: Optional[str] = None) -> Optional[ActionResult]:
        """
        Run a whole action for the acting unit without pacing.

        Respects the same guards as player input, but works on either
        side's turn. Handy for tests and auto-battle.
        """
        state = self._state
        if not self._accepts_input(state):
            return None

        skill = state.current_unit.get_skill(skill_id)
        if skill is None or not self.begin_action(skill, target_id):
            return None

        result = self.commit_action()
        self.finish_action()
        return result

    # AI

    def take_ai_turn(self) -> bool:
        """
        Let the AI act for the current enemy unit.

        A unit with no ready skill forfeits its turn.

        Returns:
            True if an action was started
        """
        state = self._state
        if not self._accepts_input(state) or state.is_player_turn:
            return False

        unit = state.current_unit
        skill = self._ai.choose_skill(unit)
        if skill is None:
            self.skip_turn()
            return False

        return self.begin_action(skill)

    def skip_turn(self) -> bool:
        """
        Forfeit the acting unit's turn.

        The turn still counts as completed: the order advances and
        every unit ticks.
        """
        state = self._state
        if not self._accepts_input(state):
            return False

        unit = state.current_unit
        state.add_log(f"{unit.name} has no skill ready and skips the turn.")
        self.events.publish(BattleEvent.TURN_FORFEITED, unit_id=unit.unit_id)
        self._complete_turn()
        return True

    # Queries

    @property
    def state(self) -> Optional[BattleState]:
        return self._state

    @property
    def is_active(self) -> bool:
        """Check if a battle is loaded."""
        return self._state is not None

    @property
    def generation(self) -> int:
        """Changes whenever a battle starts or is torn down."""
        return self._generation

    @property
    def has_pending_action(self) -> bool:
        return self._pending is not None

    @property
    def pending_committed(self) -> bool:
        return self._pending is not None and self._pending.committed

    # Internals

    @staticmethod
    def _accepts_input(state: Optional[BattleState]) -> bool:
        return state is not None and not state.is_over and not state.is_animating

    def _evaluate(self) -> BattleResult:
        state = self._state
        if not state.living(Side.ENEMY):
            return BattleResult.VICTORY
        if not state.living(Side.PLAYER):
            return BattleResult.DEFEAT
        return BattleResult.ONGOING

    def _complete_turn(self) -> None:
        """Check for a winner, else advance the order and tick every unit."""
        state = self._state
        outcome = self._evaluate()

        if outcome is BattleResult.VICTORY:
            state.conclude(outcome)
            state.add_log("Victory!")
            self.events.publish(BattleEvent.VICTORY, context=state.context)
            return

        if outcome is BattleResult.DEFEAT:
            state.conclude(outcome)
            state.add_log("Defeat!")
            self.events.publish(BattleEvent.DEFEAT, context=state.context)
            return

        slot = state.turn_order.advance()
        expired = state.turn_order.tick_all()
        for unit_id, entries in expired.items():
            self.events.publish(
                BattleEvent.STATUS_EXPIRED,
                unit_id=unit_id,
                statuses=[e.name for e in entries],
            )
        self.events.publish(
            BattleEvent.TURN_ADVANCED,
            turn=state.current_turn,
            unit_id=slot.unit.unit_id if slot else None,
            is_player=slot.is_player if slot else False,
        )

    def _publish_result(self, result: ActionResult) -> None:
        for unit_id, amount in result.damage_dealt.items():
            self.events.publish(BattleEvent.DAMAGE_DEALT, target_id=unit_id, amount=amount)
        for unit_id, amount in result.healing_done.items():
            self.events.publish(BattleEvent.HEALING_DONE, target_id=unit_id, amount=amount)
        for unit_id, entry in result.statuses_applied.items():
            self.events.publish(BattleEvent.STATUS_APPLIED, target_id=unit_id, status=entry)
        for unit_id in result.defeated:
            self.events.publish(BattleEvent.UNIT_DEFEATED, unit_id=unit_id)
