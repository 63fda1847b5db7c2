"""
Game content - species catalog and role skill kits.
"""

from rush_heroes.content.catalog import Catalog, DEFAULT_DATA_PATH, new_mob_id

__all__ = [
    "Catalog",
    "DEFAULT_DATA_PATH",
    "new_mob_id",
]
