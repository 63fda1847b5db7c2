import pytest
from rush_heroes.components import BaseStats
from rush_heroes.progression.scaling import level_multiplier, rescale_mob, scale_stats, star_multiplier

BASE = BaseStats(max_hp=1000, attack=100, defense=50, speed=100)

def test_multipliers():
    assert level_multiplier(1) == 1.0
    assert level_multiplier(11) == 2.0
    assert star_multiplier(3) == 1.0

def test_level_scaling():
    scaled = scale_stats(BASE, level=11, stars=3)
    assert scaled.attack == 200
    assert scaled.max_hp == 2000

def test_star_scaling():
    assert scale_stats(BASE, level=1, stars=4).attack == 130
    assert scale_stats(BASE, level=1, stars=5).attack == 160

def test_combined_scaling():
    # 2.0 x 1.3
    assert scale_stats(BASE, level=11, stars=4).attack == 260

def test_rescale_mob_is_not_cumulative(catalog):
    mob = catalog.create_mob(catalog.get_species("fire_wolf"))
    mob.level = 11
    rescale_mob(mob)
    rescale_mob(mob)

    assert mob.attack == 240
    assert mob.current_hp == mob.max_hp == 1600
