"""
Heroes Engine

Infrastructure shared by the Rush Heroes game layer:
- Component base (Pydantic data models)
- Typed event bus
- Engine configuration and logging setup
- JSON content database with schema validation

Quick Start:
    from heroes_engine import EngineConfig, EventBus, configure_logging

    config = EngineConfig(log_level="DEBUG")
    configure_logging(config)
    events = EventBus()
"""

__version__ = "0.1.0"
__author__ = "Developer"

from heroes_engine.core import (
    Component,
    EventBus,
    Event,
    EngineConfig,
    configure_logging,
)
from heroes_engine.resources import Database

__all__ = [
    # Data
    "Component",
    # Events
    "EventBus",
    "Event",
    # Config
    "EngineConfig",
    "configure_logging",
    # Resources
    "Database",
]
