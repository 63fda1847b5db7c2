import pytest
from rush_heroes.battle.turn_order import TurnScheduler
from rush_heroes.battle.unit import Side

@pytest.fixture
def squads(make_unit):
    party = [make_unit("knight", speed=80), make_unit("archer", speed=120)]
    enemies = [make_unit("slime", side=Side.ENEMY, speed=120), make_unit("bat", side=Side.ENEMY, speed=150)]
    return party, enemies

def test_sorted_by_speed_descending(squads):
    order = TurnScheduler(*squads)
    assert [s.unit.unit_id for s in order.slots] == ["bat", "archer", "slime", "knight"]

def test_ties_keep_player_first(squads):
    order = TurnScheduler(*squads)
    archer, slime = order.slots[1], order.slots[2]
    assert archer.is_player and not slime.is_player

def test_length_is_fixed(squads):
    party, enemies = squads
    order = TurnScheduler(party, enemies)

    enemies[1].take_damage(10_000)
    order.advance()

    assert len(order) == 4

def test_advance_wraps(squads):
    order = TurnScheduler(*squads)
    ids = []
    for _ in range(5):
        ids.append(order.advance().unit.unit_id)
    assert ids == ["archer", "slime", "knight", "bat", "archer"]

def test_advance_skips_dead(squads):
    party, enemies = squads
    order = TurnScheduler(party, enemies)
    party[1].take_damage(10_000)

    assert order.advance().unit.unit_id == "slime"

def test_advance_with_nobody_alive(squads):
    party, enemies = squads
    order = TurnScheduler(party, enemies)
    for unit in party + enemies:
        unit.take_damage(10_000)

    assert order.advance() is None
    assert order.current_index == 0

def test_tick_all_counts_turns_and_ticks_everyone(squads):
    party, enemies = squads
    order = TurnScheduler(party, enemies)
    enemies[0].take_damage(10_000)
    enemies[0].get_skill("dps_special").current_cooldown = 2

    order.tick_all()

    assert order.turn_count == 1
    # Dead units tick too
    assert enemies[0].get_skill("dps_special").current_cooldown == 1
