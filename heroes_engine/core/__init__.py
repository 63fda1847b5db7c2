"""
Core engine module.

Exports:
- Component: Component base
- EventBus, Event: Event system
- EngineConfig, configure_logging: Configuration
"""

from heroes_engine.core.component import Component
from heroes_engine.core.events import EventBus, Event
from heroes_engine.core.config import EngineConfig, configure_logging

__all__ = [
    # Data
    "Component",
    # Events
    "EventBus",
    "Event",
    # Config
    "EngineConfig",
    "configure_logging",
]
