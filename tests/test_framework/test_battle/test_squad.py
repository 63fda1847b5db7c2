import pytest
from unittest.mock import patch
from rush_heroes.battle.squad import build_enemy_squad, build_player_squad, enemy_level
from rush_heroes.battle.unit import Side
from rush_heroes.progression.stages import generate_campaign, tower_floor

def test_player_squad_keeps_roster_order(player):
    ids = [m.id for m in player.mobs]

    squad = build_player_squad([ids[2], ids[0], "unknown"], player.mobs)

    assert [u.unit_id for u in squad] == [ids[0], ids[2]]
    assert all(u.side is Side.PLAYER for u in squad)

def test_player_squad_capped(player, catalog):
    player.mobs.append(catalog.create_mob(catalog.get_species("fire_imp")))
    ids = [m.id for m in player.mobs]

    assert len(build_player_squad(ids, player.mobs)) == 4

def test_empty_selection(player):
    assert build_player_squad([], player.mobs) == []

def test_enemy_level():
    assert enemy_level(1) == 2
    assert enemy_level(26) == 52

def test_enemy_squad_for_first_stage(catalog):
    stage = generate_campaign()[0]

    squad = build_enemy_squad(stage, catalog)

    assert len(squad) == stage.enemies == 2
    assert all(u.side is Side.ENEMY and u.level == 2 for u in squad)
    assert all(u.current_hp == u.max_hp for u in squad)

def test_enemy_squad_capped_at_four(catalog):
    floor = tower_floor(250)
    assert floor.enemies == 5

    assert len(build_enemy_squad(floor, catalog)) == 4

def test_enemy_species_drawn_from_whole_pool(catalog):
    stage = generate_campaign()[0]
    pool = catalog.species

    with patch("rush_heroes.battle.squad.random.choice", side_effect=lambda seq: seq[-1]) as choice:
        squad = build_enemy_squad(stage, catalog)

    assert choice.call_args.args[0] == pool
    assert all(u.base_name == pool[-1].name for u in squad)
    # Every enemy is a distinct unit
    assert len({u.unit_id for u in squad}) == 2
