import pytest
from unittest.mock import patch
from rush_heroes.battle.events import BattleEvent
from rush_heroes.battle.state import BattleResult
from rush_heroes.battle.system import BattleEngine
from rush_heroes.battle.unit import AnimationIntent, Side
from rush_heroes.components import Role


@pytest.fixture
def engine(event_bus):
    return BattleEngine(event_bus)


@pytest.fixture
def duel(make_unit):
    hero = make_unit("hero", speed=200, attack=100, defense=50)
    foe = make_unit("foe", side=Side.ENEMY, speed=100, attack=100, defense=50)
    return hero, foe


@pytest.fixture
def first_skill():
    with patch("rush_heroes.battle.ai.random.choice", side_effect=lambda seq: seq[0]):
        yield


class TestLifecycle:
    def test_rejects_empty_squad(self, engine, duel):
        hero, foe = duel
        assert not engine.start_battle([], [foe])
        assert not engine.start_battle([hero], [])
        assert engine.state is None

    def test_rejects_oversized_squad(self, engine, make_unit):
        party = [make_unit(f"hero_{i}") for i in range(5)]
        assert not engine.start_battle(party, [make_unit("foe", side=Side.ENEMY)])

    def test_start(self, engine, duel, event_bus):
        hero, foe = duel

        assert engine.start_battle([hero], [foe])

        state = engine.state
        assert state.log == ["Battle started!"]
        assert state.result is BattleResult.ONGOING
        assert state.current_unit is hero
        assert state.is_player_turn
        assert BattleEvent.BATTLE_STARTED in event_bus.types_published()

    def test_cannot_start_twice(self, engine, duel):
        engine.start_battle([duel[0]], [duel[1]])
        assert not engine.start_battle([duel[0]], [duel[1]])

    def test_end_battle_makes_stale_calls_noops(self, engine, duel):
        hero, foe = duel
        engine.start_battle([hero], [foe])
        generation = engine.generation
        engine.select_skill("dps_basic")
        engine.select_target("foe")

        final = engine.end_battle()

        assert final is not None
        assert engine.state is None
        assert not engine.is_active
        assert engine.generation != generation
        assert engine.commit_action() is None
        assert not engine.finish_action()
        assert engine.advance() is None
        assert engine.select_skill("dps_basic") is None
        assert not engine.take_ai_turn()
        assert foe.current_hp == foe.max_hp

    def test_restart_after_end(self, engine, duel):
        hero, foe = duel
        engine.start_battle([hero], [foe])
        engine.end_battle()

        assert engine.start_battle([hero], [foe])
        assert engine.end_battle() is not None
        assert engine.end_battle() is None


class TestPlayerActions:
    def test_action_phases(self, engine, duel, event_bus, no_jitter):
        hero, foe = duel
        engine.start_battle([hero], [foe])

        state = engine.select_skill("dps_basic")
        assert state.selected_skill.id == "dps_basic"
        assert not state.is_animating

        engine.select_target("foe")
        assert state.is_animating
        assert hero.animation is AnimationIntent.ATTACK
        assert foe.current_hp == foe.max_hp

        engine.advance()
        assert foe.current_hp == foe.max_hp - 75
        assert foe.animation is AnimationIntent.HIT
        assert state.current_unit is foe
        assert state.turn_order.turn_count == 1
        assert state.is_animating

        engine.advance()
        assert not state.is_animating
        assert state.selected_skill is None
        assert hero.animation is AnimationIntent.NONE
        assert foe.animation is AnimationIntent.NONE
        assert not engine.has_pending_action

        published = event_bus.types_published()
        assert published.index(BattleEvent.ACTION_STARTED) < published.index(BattleEvent.DAMAGE_DEALT)
        assert published.index(BattleEvent.DAMAGE_DEALT) < published.index(BattleEvent.TURN_ADVANCED)
        assert published[-1] is BattleEvent.ACTION_COMPLETED

    def test_all_target_skill_starts_immediately(self, engine, duel):
        engine.start_battle([duel[0]], [duel[1]])

        state = engine.select_skill("dps_ultimate")

        assert state.is_animating
        assert engine.has_pending_action

    def test_input_ignored_while_animating(self, engine, duel):
        hero, foe = duel
        engine.start_battle([hero], [foe])
        engine.select_skill("dps_ultimate")

        engine.select_skill("dps_basic")

        assert engine.state.selected_skill.id == "dps_ultimate"
        assert not engine.begin_action(hero.get_skill("dps_basic"))

    def test_select_target_needs_selected_skill(self, engine, duel):
        engine.start_battle([duel[0]], [duel[1]])

        engine.select_target("foe")

        assert not engine.state.is_animating

    def test_ignored_on_enemy_turn(self, engine, duel):
        hero, foe = duel
        foe.speed = 500
        engine.start_battle([hero], [foe])

        state = engine.select_skill("dps_basic")

        assert state.selected_skill is None
        assert not engine.has_pending_action

    def test_cooldown_gating(self, engine, duel, no_jitter):
        hero, foe = duel
        engine.start_battle([hero], [foe])

        engine.execute("dps_special", "foe")
        # Set to 3 on use, then ticked at end of the turn
        assert hero.get_skill("dps_special").current_cooldown == 2

        engine.execute("dps_basic")
        assert hero.get_skill("dps_special").current_cooldown == 1
        assert engine.state.current_unit is hero

        state = engine.select_skill("dps_special")
        assert state.selected_skill is None

    def test_ally_skill_waits_for_target(self, engine, make_unit):
        healer = make_unit("healer", role=Role.SUPPORT, speed=200)
        hero = make_unit("hero", current_hp=500)
        engine.start_battle([healer, hero], [make_unit("foe", side=Side.ENEMY)])

        engine.select_skill("support_basic")
        assert not engine.state.is_animating
        assert engine.targetable_units() == [healer, hero]

        engine.select_target("healer")
        engine.advance()

        assert hero.current_hp == 500 + 180

    def test_targetable_units_skip_dead(self, engine, make_unit):
        party = [make_unit("hero", speed=200)]
        enemies = [make_unit("slime", side=Side.ENEMY), make_unit("bat", side=Side.ENEMY)]
        enemies[0].current_hp = 0
        engine.start_battle(party, enemies)

        engine.select_skill("dps_basic")

        assert engine.targetable_units() == [enemies[1]]

    def test_turn_skips_dead_units(self, engine, make_unit, no_jitter):
        party = [make_unit("hero", speed=200)]
        enemies = [
            make_unit("slime", side=Side.ENEMY, speed=150, current_hp=10),
            make_unit("bat", side=Side.ENEMY, speed=100),
        ]
        engine.start_battle(party, enemies)

        engine.execute("dps_basic", "slime")

        assert engine.state.current_unit.unit_id == "bat"
        assert len(engine.state.turn_order) == 3


class TestTermination:
    def test_victory(self, engine, duel, event_bus, no_jitter):
        hero, foe = duel
        foe.current_hp = 10
        engine.start_battle([hero], [foe])

        engine.select_skill("dps_basic")
        engine.select_target("foe")
        engine.advance()

        state = engine.state
        assert state.result is BattleResult.VICTORY
        assert state.log[-2] == "Hero used Strike dealing 75 damage!"
        assert state.log[-1] == "Victory!"
        assert BattleEvent.VICTORY in event_bus.types_published()
        assert BattleEvent.UNIT_DEFEATED in event_bus.types_published()
        # The turn does not advance after the battle ends
        assert state.current_unit is hero
        assert state.turn_order.turn_count == 0

    def test_result_never_changes_after_end(self, engine, duel, no_jitter):
        hero, foe = duel
        foe.current_hp = 10
        engine.start_battle([hero], [foe])
        engine.execute("dps_basic", "foe")

        state = engine.state
        log_size = len(state.log)
        assert engine.select_skill("dps_basic").selected_skill is None
        assert not engine.skip_turn()
        assert not engine.take_ai_turn()
        assert engine.execute("dps_basic") is None
        assert state.result is BattleResult.VICTORY
        assert len(state.log) == log_size

    def test_defeat(self, engine, duel, first_skill, no_jitter):
        hero, foe = duel
        hero.current_hp = 10
        foe.speed = 500
        engine.start_battle([hero], [foe])

        assert engine.take_ai_turn()
        assert foe.animation is AnimationIntent.ATTACK

        engine.advance()

        assert engine.state.result is BattleResult.DEFEAT
        assert engine.state.log[-1] == "Defeat!"
        assert not hero.is_alive


class TestAITurns:
    def test_ai_ignored_on_player_turn(self, engine, duel):
        engine.start_battle([duel[0]], [duel[1]])
        assert not engine.take_ai_turn()

    def test_ai_uses_automatic_targeting(self, engine, duel, first_skill, no_jitter):
        hero, foe = duel
        foe.speed = 500
        engine.start_battle([hero], [foe])

        engine.take_ai_turn()
        engine.advance()
        engine.advance()

        assert hero.current_hp == hero.max_hp - 75
        assert engine.state.is_player_turn

    def test_ai_forfeits_without_ready_skill(self, engine, duel, event_bus):
        hero, foe = duel
        foe.speed = 500
        for skill in foe.skills:
            skill.current_cooldown = 2
        engine.start_battle([hero], [foe])

        assert not engine.take_ai_turn()

        state = engine.state
        assert state.current_unit is hero
        assert state.turn_order.turn_count == 1
        assert all(s.current_cooldown == 1 for s in foe.skills)
        assert state.log[-1] == "Foe has no skill ready and skips the turn."
        assert not state.is_animating
        assert BattleEvent.TURN_FORFEITED in event_bus.types_published()
