"""Static content loading."""

from heroes_engine.resources.database import Database

__all__ = ["Database"]
