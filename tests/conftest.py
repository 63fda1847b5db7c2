import os
import sys
import pytest
from unittest.mock import patch

# Ensure project packages can be imported without installing
sys.path.append(os.getcwd())


@pytest.fixture
def event_bus():
    """Fresh EventBus for each test, recording what was published."""
    from heroes_engine.core.events import EventBus
    return EventBus(keep_history=True)


@pytest.fixture(scope="session")
def catalog():
    """Catalog loaded from the bundled content."""
    from rush_heroes.content import Catalog
    return Catalog.load()


@pytest.fixture
def no_jitter():
    """Pin the damage roll to +0."""
    with patch("rush_heroes.battle.damage.random.randint", return_value=0) as mock_roll:
        yield mock_roll


@pytest.fixture
def make_unit(catalog):
    """
    Factory for battle units with explicit stats.

    Usage:
        hero = make_unit("hero", attack=100, role=Role.DPS)
    """
    from rush_heroes.battle.unit import BattleUnit, Side
    from rush_heroes.components import Role

    def _make(
        unit_id,
        side=Side.PLAYER,
        role=Role.DPS,
        max_hp=1000,
        current_hp=None,
        attack=100,
        defense=50,
        speed=100,
        skills=None,
    ):
        return BattleUnit(
            unit_id=unit_id,
            name=unit_id.replace("_", " ").title(),
            base_name=unit_id.title(),
            side=side,
            stars=3,
            role=role,
            level=1,
            exp=0,
            max_hp=max_hp,
            current_hp=max_hp if current_hp is None else current_hp,
            attack=attack,
            defense=defense,
            speed=speed,
            skills=catalog.kit_for(role) if skills is None else skills,
        )

    return _make


@pytest.fixture
def player(catalog):
    """New player with a four-mob roster of known species."""
    from rush_heroes.player import create_player

    p = create_player("tester", now=1_000_000.0)
    for species_id in ("fire_wolf", "water_slime", "wind_fairy", "fire_wolf"):
        p.mobs.append(catalog.create_mob(catalog.get_species(species_id)))
    return p
