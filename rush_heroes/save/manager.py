"""
Save/Load system - player persistence.

Provides:
- Save/load the player record to JSON files
- Multiple save slots (10 by default) plus an auto-save slot
- Offline AFK rewards computed on load
- Event publishing for save/load operations
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass, asdict
from enum import Enum, auto
from pathlib import Path
from typing import Callable, Optional

from pydantic import ValidationError

from heroes_engine.core.events import EventBus
from rush_heroes.components import Player
from rush_heroes.progression.afk import calculate_offline, offline_minutes

logger = logging.getLogger(__name__)


class SaveEvent(Enum):
    """Save system events."""
    SAVE_STARTED = auto()
    SAVE_COMPLETED = auto()
    SAVE_FAILED = auto()
    LOAD_STARTED = auto()
    LOAD_COMPLETED = auto()
    LOAD_FAILED = auto()
    AUTO_SAVE_TRIGGERED = auto()


@dataclass
class SaveMetadata:
    """Metadata about a save file."""
    slot: int
    name: str
    timestamp: float
    nickname: str
    level: int
    mob_count: int
    version: str = "1.0"


class SaveManager:
    """
    Manages saving and loading the player.

    Usage:
        save_mgr = SaveManager(save_path="saves", event_bus=event_bus)
        save_mgr.set_player(player)
        save_mgr.save_game(slot=0, name="My Save")
        save_mgr.load_game(slot=0)
        player = save_mgr.player

        # Auto-save
        save_mgr.enable_auto_save(interval=60)
    """

    VERSION = "1.0"
    MAX_SLOTS = 10
    AUTO_SAVE_SLOT = 99  # Special slot for auto-saves

    def __init__(
        self,
        save_path: str | Path = "saves",
        event_bus: Optional[EventBus] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.save_path = Path(save_path)
        self.save_path.mkdir(parents=True, exist_ok=True)
        self.event_bus = event_bus
        self._clock = clock

        self.player: Optional[Player] = None
        self._current_slot: Optional[int] = None

        # Minutes of offline time credited by the last load
        self.offline_minutes: int = 0

        # Auto-save settings
        self._auto_save_enabled: bool = False
        self._auto_save_interval: float = 60.0
        self._auto_save_timer: float = 0.0

    def set_player(self, player: Player) -> None:
        """Set the player record to persist."""
        self.player = player

    def _get_slot_path(self, slot: int) -> Path:
        """Get path for a save slot."""
        return self.save_path / f"save_{slot:02d}.json"

    def _get_metadata_path(self, slot: int) -> Path:
        """Get path for save metadata."""
        return self.save_path / f"save_{slot:02d}_meta.json"

    def get_save_slots(self) -> list[Optional[SaveMetadata]]:
        """Get metadata for all save slots."""
        slots = []
        for i in range(self.MAX_SLOTS):
            meta_path = self._get_metadata_path(i)
            if not meta_path.exists():
                slots.append(None)
                continue
            try:
                with open(meta_path, 'r', encoding='utf-8') as f:
                    slots.append(SaveMetadata(**json.load(f)))
            except (OSError, ValueError, TypeError) as e:
                logger.warning(f"Unreadable metadata for slot {i}: {e}")
                slots.append(None)
        return slots

    def save_game(self, slot: int, name: str = "Save") -> bool:
        """
        Save the current player.

        Stamps ``last_online`` with the current time before writing.

        Args:
            slot: Save slot number
            name: Display name for the save

        Returns:
            True if save was successful
        """
        if self.player is None:
            return False

        self._publish(SaveEvent.SAVE_STARTED, slot=slot)

        try:
            now = self._clock()
            self.player.last_online = now

            with open(self._get_slot_path(slot), 'w', encoding='utf-8') as f:
                f.write(self.player.model_dump_json(indent=2))

            metadata = SaveMetadata(
                slot=slot,
                name=name,
                timestamp=now,
                nickname=self.player.nickname,
                level=self.player.level,
                mob_count=len(self.player.mobs),
                version=self.VERSION,
            )
            with open(self._get_metadata_path(slot), 'w', encoding='utf-8') as f:
                json.dump(asdict(metadata), f, indent=2)

        except OSError as e:
            logger.error(f"Save failed: {e}")
            self._publish(SaveEvent.SAVE_FAILED, slot=slot, error=str(e))
            return False

        self._current_slot = slot
        self._publish(SaveEvent.SAVE_COMPLETED, slot=slot)
        return True

    def load_game(self, slot: int) -> bool:
        """
        Load a saved player.

        Whole minutes elapsed since the save was written are credited
        as offline AFK rewards.

        Args:
            slot: Save slot number

        Returns:
            True if load was successful
        """
        save_path = self._get_slot_path(slot)
        if not save_path.exists():
            return False

        self._publish(SaveEvent.LOAD_STARTED, slot=slot)

        try:
            with open(save_path, 'r', encoding='utf-8') as f:
                player = Player.model_validate_json(f.read())
        except (OSError, ValidationError) as e:
            logger.error(f"Load failed: {e}")
            self._publish(SaveEvent.LOAD_FAILED, slot=slot, error=str(e))
            return False

        minutes = offline_minutes(player.last_online, self._clock())
        if minutes > 0:
            calculate_offline(player, minutes)
        self.offline_minutes = minutes

        self.player = player
        self._current_slot = slot
        self._publish(SaveEvent.LOAD_COMPLETED, slot=slot, offline_minutes=minutes)
        return True

    def delete_save(self, slot: int) -> bool:
        """Delete a save slot."""
        try:
            for path in (self._get_slot_path(slot), self._get_metadata_path(slot)):
                if path.exists():
                    path.unlink()
        except OSError as e:
            logger.error(f"Could not delete slot {slot}: {e}")
            return False
        return True

    def enable_auto_save(self, interval: float = 60.0) -> None:
        """
        Enable auto-save.

        Args:
            interval: Seconds between auto-saves
        """
        self._auto_save_enabled = True
        self._auto_save_interval = interval
        self._auto_save_timer = 0.0

    def disable_auto_save(self) -> None:
        """Disable auto-save."""
        self._auto_save_enabled = False

    def update(self, dt: float) -> None:
        """Update auto-save timer."""
        if not self._auto_save_enabled:
            return

        self._auto_save_timer += dt
        if self._auto_save_timer >= self._auto_save_interval:
            self._auto_save_timer = 0.0
            self.auto_save()

    def auto_save(self) -> bool:
        """Perform an auto-save."""
        self._publish(SaveEvent.AUTO_SAVE_TRIGGERED)
        return self.save_game(self.AUTO_SAVE_SLOT, "Auto Save")

    @property
    def current_slot(self) -> Optional[int]:
        """Get the slot last saved to or loaded from."""
        return self._current_slot

    @property
    def has_auto_save(self) -> bool:
        """Check if an auto-save exists."""
        return self._get_slot_path(self.AUTO_SAVE_SLOT).exists()

    def _publish(self, event: SaveEvent, **data) -> None:
        if self.event_bus:
            self.event_bus.publish(event, **data)
