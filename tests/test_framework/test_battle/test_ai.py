import pytest
from unittest.mock import patch
from rush_heroes.battle.ai import AIPolicy
from rush_heroes.battle.unit import Side

def test_picks_only_ready_skills(make_unit):
    unit = make_unit("bat", side=Side.ENEMY)
    unit.get_skill("dps_basic").current_cooldown = 1
    unit.get_skill("dps_ultimate").current_cooldown = 1

    for _ in range(20):
        assert AIPolicy().choose_skill(unit).id == "dps_special"

def test_uniform_choice_over_ready_skills(make_unit):
    unit = make_unit("bat", side=Side.ENEMY)

    with patch("rush_heroes.battle.ai.random.choice", side_effect=lambda seq: seq[-1]) as choice:
        skill = AIPolicy().choose_skill(unit)

    assert skill.id == "dps_ultimate"
    assert [s.id for s in choice.call_args.args[0]] == ["dps_basic", "dps_special", "dps_ultimate"]

def test_nothing_ready(make_unit):
    unit = make_unit("bat", side=Side.ENEMY)
    for skill in unit.skills:
        skill.current_cooldown = 2

    assert AIPolicy().choose_skill(unit) is None
