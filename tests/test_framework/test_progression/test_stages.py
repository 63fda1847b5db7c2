import pytest
from rush_heroes.components import TowerProgress
from rush_heroes.progression.stages import (
    available_floors,
    campaign_stage_number,
    floor_is_open,
    generate_campaign,
    iter_tower_floors,
    stages_in_chapter,
    tower_floor,
)

@pytest.fixture(scope="module")
def campaign():
    return generate_campaign()

def test_campaign_shape(campaign):
    assert len(campaign) == 5 * 10 + 5 * 18
    assert stages_in_chapter(5) == 10
    assert stages_in_chapter(6) == 18
    assert [s.unlocked for s in campaign].count(True) == 1
    assert campaign[0].unlocked

def test_first_stage(campaign):
    stage = campaign[0]
    assert stage.name == "Chapter 1-1"
    assert stage.difficulty == 1
    assert stage.enemies == 2
    assert stage.rewards.exp == 60
    assert stage.rewards.diamonds == 10
    assert stage.rewards.tickets is None

def test_ticket_stages(campaign):
    assert campaign[4].rewards.tickets == 1    # 1-5
    assert campaign[9].rewards.tickets == 2    # 1-10, last of chapter
    assert campaign[67].rewards.tickets == 2   # 6-18

def test_later_stage_scaling(campaign):
    stage = campaign[50]
    assert stage.name == "Chapter 6-1"
    assert stage.difficulty == 51 // 5 + 1
    assert stage.enemies == 4
    assert stage.rewards.exp == 560

def test_stage_number():
    assert campaign_stage_number(1, 1) == 1
    assert campaign_stage_number(6, 1) == 51
    assert campaign_stage_number(10, 18) == 140
    with pytest.raises(ValueError):
        campaign_stage_number(1, 11)
    with pytest.raises(ValueError):
        campaign_stage_number(11, 1)

def test_tower_floors():
    first = tower_floor(1)
    assert first.name == "Floor 1"
    assert first.difficulty == 1
    assert first.enemies == 1
    assert first.rewards.exp == 105
    assert first.rewards.diamonds == 20
    assert first.rewards.tickets is None

    tenth = tower_floor(10)
    assert tenth.difficulty == 2
    assert tenth.rewards.tickets == 3
    assert tower_floor(5).rewards.tickets == 2
    assert tower_floor(250).enemies == 5

def test_tower_has_no_top():
    assert tower_floor(5000).floor == 5000
    with pytest.raises(ValueError):
        tower_floor(0)

def test_iter_tower_floors():
    assert [f.floor for f in iter_tower_floors(3, count=3)] == [3, 4, 5]

def test_available_floors_mark_completed():
    progress = TowerProgress(current_floor=3, completed_floors=[1, 2])
    floors = available_floors(progress, lookahead=2)

    assert [f.floor for f in floors] == [1, 2, 3, 4, 5]
    assert [f.completed for f in floors] == [True, True, False, False, False]
    assert floor_is_open(progress, 3)
    assert not floor_is_open(progress, 4)
