"""
Content catalog - typed access to species and skill kits.

Raw entries come from heroes_engine's Database (JSON + schema
validation); this module turns them into components and mints
roster mobs from them.
"""

from __future__ import annotations

import logging
import uuid
from pathlib import Path
from typing import Optional

from heroes_engine.resources import Database
from rush_heroes.components import (
    BaseStats,
    EffectKind,
    Mob,
    Role,
    Skill,
    SkillEffect,
    SkillKind,
    Species,
    StatName,
    TargetMode,
)
from rush_heroes.progression.scaling import rescale_mob

logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = Path(__file__).resolve().parent.parent / "data"

_KIT_ORDER = (SkillKind.BASIC, SkillKind.SPECIAL, SkillKind.ULTIMATE)


def new_mob_id(species_name: str) -> str:
    """Mint a unique roster id for a new mob."""
    slug = species_name.lower().replace(" ", "_")
    return f"{slug}_{uuid.uuid4().hex[:12]}"


def _skill_from_entry(entry: dict) -> Skill:
    effect = entry["effect"]
    return Skill(
        id=entry["id"],
        name=entry["name"],
        kind=SkillKind(entry["kind"]),
        cooldown=entry["cooldown"],
        description=entry.get("description", ""),
        effect=SkillEffect(
            kind=EffectKind(effect["kind"]),
            value=effect["value"],
            duration=effect.get("duration"),
            stat=StatName(effect["stat"]) if "stat" in effect else None,
        ),
        damage_multiplier=entry["damage_multiplier"],
        target=TargetMode(entry["target"]),
    )


def _species_from_entry(entry: dict) -> Species:
    return Species(
        id=entry["id"],
        name=entry["name"],
        stars=entry["stars"],
        role=Role(entry["role"]),
        base_stats=BaseStats(
            max_hp=entry["max_hp"],
            attack=entry["attack"],
            defense=entry["defense"],
            speed=entry["speed"],
        ),
        image=entry.get("image", ""),
    )


class Catalog:
    """
    Species pool and role kits.

    Usage:
        catalog = Catalog.load()
        wolf = catalog.get_species("fire_wolf")
        mob = catalog.create_mob(wolf, level=5)
    """

    def __init__(self, species: list[Species], kits: dict[Role, list[Skill]]):
        self._species = list(species)
        self._by_id = {s.id: s for s in self._species}
        self._kits = kits

    @classmethod
    def load(cls, data_path: Path | str | None = None) -> Catalog:
        """
        Load the catalog from a data directory.

        Args:
            data_path: Directory with schemas/ and database/ (defaults to
                the content bundled with the package)

        Raises:
            ValueError: If the species pool is empty or a role kit is not
                exactly basic/special/ultimate
        """
        db = Database(data_path or DEFAULT_DATA_PATH)
        db.load_all()
        return cls.from_database(db)

    @classmethod
    def from_database(cls, db: Database) -> Catalog:
        """Build a catalog from an already loaded database."""
        species = [_species_from_entry(e) for e in db.species.values()]
        if not species:
            raise ValueError(f"No species loaded from {db.data_path}")

        kits: dict[Role, list[Skill]] = {role: [] for role in Role}
        for entry in db.skills.values():
            kits[Role(entry["role"])].append(_skill_from_entry(entry))

        for role, skills in kits.items():
            skills.sort(key=lambda s: _KIT_ORDER.index(s.kind))
            if tuple(s.kind for s in skills) != _KIT_ORDER:
                raise ValueError(
                    f"Kit for {role.value} must have one basic, special and "
                    f"ultimate skill, got {[s.id for s in skills]}"
                )

        logger.debug(f"Catalog ready: {len(species)} species")
        return cls(species, kits)

    @property
    def species(self) -> list[Species]:
        """The full species pool, in load order."""
        return list(self._species)

    def get_species(self, species_id: str) -> Optional[Species]:
        """Get a species by id."""
        return self._by_id.get(species_id)

    def species_by_stars(self, stars: int) -> list[Species]:
        """Species of a given rarity tier."""
        return [s for s in self._species if s.stars == stars]

    def kit_for(self, role: Role) -> list[Skill]:
        """Fresh copies of a role's three skills, cooldowns ready."""
        return [
            skill.model_copy(update={"current_cooldown": 0}, deep=True)
            for skill in self._kits[role]
        ]

    def create_mob(self, species: Species, level: int = 1) -> Mob:
        """
        Mint a roster mob of a species at a level.

        Stats are scaled from the species base stats and HP starts full.
        """
        mob = Mob(
            id=new_mob_id(species.name),
            name=species.name,
            base_name=species.name,
            species_id=species.id,
            stars=species.stars,
            role=species.role,
            level=level,
            base_stats=species.base_stats.clone(),
            max_hp=species.base_stats.max_hp,
            current_hp=species.base_stats.max_hp,
            attack=species.base_stats.attack,
            defense=species.base_stats.defense,
            speed=species.base_stats.speed,
            skills=self.kit_for(species.role),
            image=species.image,
        )
        return rescale_mob(mob)
