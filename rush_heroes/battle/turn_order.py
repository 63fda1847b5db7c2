"""
Turn order - a fixed, speed-sorted sequence of every unit in battle.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from rush_heroes.battle.unit import BattleUnit, Side
from rush_heroes.components import StatusEntry


@dataclass(frozen=True)
class TurnSlot:
    """One entry in the turn order, tagged with squad ownership."""
    unit: BattleUnit
    side: Side

    @property
    def is_player(self) -> bool:
        return self.side is Side.PLAYER


class TurnScheduler:
    """
    Manages turn order for battle.

    The order is sorted once, at battle start, by descending speed;
    ties keep concatenation order (player squad first). Dead units stay
    in the sequence and are skipped, so its length never changes.
    """

    def __init__(self, party: list[BattleUnit], enemies: list[BattleUnit]):
        self._party = party
        self._enemies = enemies
        slots = [TurnSlot(u, Side.PLAYER) for u in party]
        slots += [TurnSlot(u, Side.ENEMY) for u in enemies]
        # sorted() is stable, which keeps the tie-break rule
        self._slots: tuple[TurnSlot, ...] = tuple(
            sorted(slots, key=lambda s: s.unit.speed, reverse=True)
        )
        self._current_index = 0
        self._turn_count = 0

    @property
    def slots(self) -> tuple[TurnSlot, ...]:
        return self._slots

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def turn_count(self) -> int:
        """Completed turns so far."""
        return self._turn_count

    def __len__(self) -> int:
        return len(self._slots)

    def current(self) -> Optional[TurnSlot]:
        """Get the slot whose turn it is."""
        if not self._slots:
            return None
        return self._slots[self._current_index]

    def next_living_index(self) -> Optional[int]:
        """
        Index of the next living unit after the current one.

        Wraps around and may land back on the current unit. None when
        nobody is alive.
        """
        count = len(self._slots)
        for step in range(1, count + 1):
            index = (self._current_index + step) % count
            if self._slots[index].unit.is_alive:
                return index
        return None

    def advance(self) -> Optional[TurnSlot]:
        """Move to the next living unit and return its slot."""
        index = self.next_living_index()
        if index is None:
            return None
        self._current_index = index
        return self._slots[index]

    def tick_all(self) -> dict[str, list[StatusEntry]]:
        """
        Run end-of-turn upkeep on every unit of both squads, dead or alive.

        Returns:
            Expired statuses keyed by unit id (units with none omitted)
        """
        self._turn_count += 1
        expired: dict[str, list[StatusEntry]] = {}
        for unit in self._party + self._enemies:
            gone = unit.tick()
            if gone:
                expired[unit.unit_id] = gone
        return expired
