"""
Engine configuration.

Holds the knobs the game layer reads at startup: where content and
saves live, how the battle presentation is paced, and how chatty the
logs are.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class EngineConfig:
    """Configuration for the engine and game layer."""

    def __init__(
        self,
        title: str = "Rush Heroes",
        data_path: str | Path | None = None,
        save_path: str | Path = "saves",
        action_delay: float = 0.5,
        clear_delay: float = 1.0,
        ai_delay: float = 1.5,
        max_squad_size: int = 4,
        log_level: str = "INFO",
    ):
        self.title = title
        # None means "use the content bundled with the game package"
        self.data_path = Path(data_path) if data_path is not None else None
        self.save_path = Path(save_path)
        # Battle pacing, in seconds
        self.action_delay = action_delay
        self.clear_delay = clear_delay
        self.ai_delay = ai_delay
        self.max_squad_size = max_squad_size
        self.log_level = log_level

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EngineConfig:
        """
        Build a config from a plain mapping.

        Raises:
            ValueError: On keys the config does not know about
        """
        known = {
            "title", "data_path", "save_path", "action_delay",
            "clear_delay", "ai_delay", "max_squad_size", "log_level",
        }
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        return cls(**data)

    @classmethod
    def from_file(cls, path: str | Path) -> EngineConfig:
        """Load a config from a JSON file."""
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        logger.debug(f"Loaded config from {path}")
        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-friendly mapping."""
        return {
            "title": self.title,
            "data_path": str(self.data_path) if self.data_path else None,
            "save_path": str(self.save_path),
            "action_delay": self.action_delay,
            "clear_delay": self.clear_delay,
            "ai_delay": self.ai_delay,
            "max_squad_size": self.max_squad_size,
            "log_level": self.log_level,
        }


def configure_logging(config: EngineConfig | None = None) -> None:
    """Set up root logging from the config's level."""
    level_name = (config.log_level if config else "INFO").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {level_name}")
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
