"""
Progression module - everything that outlives a single battle.

Provides:
- Stat scaling by level and stars
- Campaign stages and tower floors
- Mob and player leveling
- Battle reward settlement
- AFK (idle) rewards
- Summoning and evolution

Submodules are imported directly (``from rush_heroes.progression.afk
import claim``); the content catalog depends on scaling, so this
package does not import its siblings eagerly.
"""
