"""
Rush Heroes game layer.

Provides game-specific rules built on top of heroes_engine:
- Components (data-only, Pydantic models: skills, mobs, players, stages)
- Content (species pool and role skill kits loaded from JSON)
- Battle (turn-based squad combat engine and presentation pacing)
- Progression (campaign/tower tracks, rewards, leveling, evolution,
  summoning, AFK rewards)
- Save (persistence of the player record)
"""

__version__ = "0.1.0"
