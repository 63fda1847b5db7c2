"""
Battle Demo: Headless Auto-Battle

Demonstrates:
- Player creation and summoning
- Squad building from the roster and a campaign stage
- BattleEngine driven by BattlePacer on a fixed frame clock
- Event bus subscriptions for a presentation layer
- Reward settlement

Run: python -m demos.battle_demo
"""

from heroes_engine.core import EngineConfig, EventBus, configure_logging
from rush_heroes.battle import (
    AIPolicy,
    BattleContext,
    BattleEngine,
    BattleEvent,
    BattlePacer,
    build_enemy_squad,
    build_player_squad,
)
from rush_heroes.components import Track
from rush_heroes.content import Catalog
from rush_heroes.player import create_player
from rush_heroes.progression.gacha import summon
from rush_heroes.progression.rewards import settle

FRAME = 1 / 60
MAX_FRAMES = 60 * 60 * 10


def autopilot(engine: BattleEngine, ai: AIPolicy) -> None:
    """Stand in for a human on player turns."""
    state = engine.state
    if state.is_over or state.is_animating or not state.is_player_turn:
        return

    skill = ai.choose_skill(state.current_unit)
    if skill is None:
        engine.skip_turn()
        return

    engine.select_skill(skill.id)
    if skill.target.needs_target:
        targets = engine.targetable_units()
        if targets:
            engine.select_target(targets[0].unit_id)


def main():
    print("=" * 60)
    print("Battle Demo: Headless Auto-Battle")
    print("=" * 60)
    print()

    config = EngineConfig(title="Rush Heroes - Battle Demo", log_level="WARNING")
    configure_logging(config)

    catalog = Catalog.load(config.data_path)
    player = create_player("demo_player")
    summon(player, catalog, count=4)
    print(f"Roster: {', '.join(f'{m.name} ({m.stars}*)' for m in player.mobs)}")

    stage = player.campaign.stages[0]
    squad_ids = [m.id for m in player.mobs]
    party = build_player_squad(squad_ids, player.mobs, config.max_squad_size)
    enemies = build_enemy_squad(stage, catalog, config.max_squad_size)
    print(f"Enemies: {', '.join(u.name for u in enemies)}")
    print()

    events = EventBus()
    events.subscribe(
        BattleEvent.UNIT_DEFEATED,
        lambda e: print(f"  x {e['unit_id']} defeated"),
        weak=False,
    )

    engine = BattleEngine(events, max_squad_size=config.max_squad_size)
    pacer = BattlePacer(engine, config)
    engine.start_battle(party, enemies, BattleContext(Track.CAMPAIGN, stage))

    ai = AIPolicy()
    printed = 0
    for _ in range(MAX_FRAMES):
        autopilot(engine, ai)
        pacer.update(FRAME)

        log = engine.state.log
        for line in log[printed:]:
            print(line)
        printed = len(log)

        if engine.state.is_over and not engine.has_pending_action:
            break

    final = engine.end_battle()
    print()

    if final.is_over:
        settlement = settle(player, final, squad_ids)
        print(f"Result: {settlement.result.value}")
        if settlement.granted:
            print(f"Rewards: {settlement.rewards.exp} exp, {settlement.rewards.diamonds} diamonds")
    else:
        print("Battle did not finish in time")

    print()
    print("Demo complete!")


if __name__ == "__main__":
    main()
