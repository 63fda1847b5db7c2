"""
Component base class for data-only records.

Components are pure data containers. Game rules live in the
battle and progression modules, not on the records themselves.
This separation makes:
- Serialization trivial (save files are model dumps)
- Testing easier
- Battle copies cheap (deep model copies)

Usage:
    class BaseStats(Component):
        max_hp: int
        attack: int
        defense: int
        speed: int
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Component(BaseModel):
    """
    Base class for all components.

    Components are data-only containers using Pydantic for:
    - Automatic validation
    - JSON serialization
    - Type hints
    - Default values
    """

    model_config = ConfigDict(
        # Validate on assignment
        validate_assignment=True,
        # Reject unknown fields (catches typos in save files and content)
        extra='forbid',
    )

    def clone(self) -> Component:
        """Create a deep copy of this component."""
        return self.model_copy(deep=True)
