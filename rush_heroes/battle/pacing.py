"""
Battle pacing - drives BattleEngine phases from a frame clock.

    action begun  --action_delay-->  commit
    committed     --clear_delay--->  finish
    enemy turn    --ai_delay------>  take_ai_turn

Timers are tied to the battle they were started for. Once that battle
is torn down (or replaced) a pending timer does nothing.
"""

from __future__ import annotations

from typing import Optional

from heroes_engine.core.config import EngineConfig
from rush_heroes.battle.system import BattleEngine


class BattlePacer:
    """
    Frame-driven scheduler for one BattleEngine.

    Call update(dt) once per frame (or tick) with elapsed seconds.
    """

    def __init__(self, engine: BattleEngine, config: Optional[EngineConfig] = None):
        config = config or EngineConfig()
        self.engine = engine
        self.action_delay = config.action_delay
        self.clear_delay = config.clear_delay
        self.ai_delay = config.ai_delay

        self._timer = 0.0
        self._phase: Optional[str] = None
        self._generation = engine.generation

    def update(self, dt: float) -> None:
        """Advance timers and fire whichever phase is due."""
        engine = self.engine
        if engine.generation != self._generation:
            # Battle was torn down or replaced; drop the old timer
            self._generation = engine.generation
            self._reset()

        state = engine.state
        if state is None:
            return

        phase = self._expected_phase()
        if phase != self._phase:
            self._phase = phase
            self._timer = 0.0
        if phase is None:
            return

        self._timer += dt
        if self._timer < self._delay_for(phase):
            return

        self._reset()
        if phase == "commit":
            engine.commit_action()
        elif phase == "finish":
            engine.finish_action()
        elif phase == "ai":
            engine.take_ai_turn()

    @property
    def phase(self) -> Optional[str]:
        """Phase currently being timed, if any."""
        return self._phase

    def _expected_phase(self) -> Optional[str]:
        engine = self.engine
        state = engine.state
        if engine.has_pending_action:
            return "finish" if engine.pending_committed else "commit"
        if state.is_over or state.is_animating or state.is_player_turn:
            return None
        return "ai"

    def _delay_for(self, phase: str) -> float:
        if phase == "commit":
            return self.action_delay
        if phase == "finish":
            return self.clear_delay
        return self.ai_delay

    def _reset(self) -> None:
        self._timer = 0.0
        self._phase = None
