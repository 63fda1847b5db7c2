"""
Progression tracks - the campaign and the tower.

The campaign is finite and generated whole for a new player. The tower
has no top; floors are built on demand from their number.
"""

from __future__ import annotations

from typing import Iterator, Optional

from rush_heroes.components import CampaignProgress, CampaignStage, Rewards, TowerFloor, TowerProgress

CHAPTER_COUNT = 10
SHORT_CHAPTER_STAGES = 10
LONG_CHAPTER_STAGES = 18
MAX_CAMPAIGN_ENEMIES = 4
MAX_TOWER_ENEMIES = 5


def stages_in_chapter(chapter: int) -> int:
    """Chapters 1-5 have 10 stages, later chapters 18."""
    return SHORT_CHAPTER_STAGES if chapter <= 5 else LONG_CHAPTER_STAGES


def campaign_stage(chapter: int, stage: int, number: int) -> CampaignStage:
    """
    Build one campaign stage.

    Args:
        chapter: Chapter (1-based)
        stage: Stage within the chapter (1-based)
        number: Global stage number across all chapters (1-based)
    """
    last_in_chapter = stage == stages_in_chapter(chapter)
    if last_in_chapter:
        tickets = 2
    elif stage % 5 == 0:
        tickets = 1
    else:
        tickets = None

    return CampaignStage(
        chapter=chapter,
        stage=stage,
        name=f"Chapter {chapter}-{stage}",
        difficulty=number // 5 + 1,
        enemies=min(2 + number // 10, MAX_CAMPAIGN_ENEMIES),
        rewards=Rewards(
            exp=50 + number * 10,
            diamonds=10 + number // 5,
            tickets=tickets,
        ),
        unlocked=number == 1,
    )


def generate_campaign() -> list[CampaignStage]:
    """All campaign stages in play order; only the first is unlocked."""
    stages = []
    for chapter in range(1, CHAPTER_COUNT + 1):
        for stage in range(1, stages_in_chapter(chapter) + 1):
            stages.append(campaign_stage(chapter, stage, len(stages) + 1))
    return stages


def new_campaign_progress() -> CampaignProgress:
    return CampaignProgress(stages=generate_campaign())


def campaign_stage_number(chapter: int, stage: int) -> int:
    """Global (1-based) number of a chapter/stage pair."""
    if not 1 <= chapter <= CHAPTER_COUNT:
        raise ValueError(f"No chapter {chapter}")
    if not 1 <= stage <= stages_in_chapter(chapter):
        raise ValueError(f"Chapter {chapter} has no stage {stage}")
    before = sum(stages_in_chapter(c) for c in range(1, chapter))
    return before + stage


def find_stage(progress: CampaignProgress, chapter: int, stage: int) -> Optional[CampaignStage]:
    for entry in progress.stages:
        if entry.chapter == chapter and entry.stage == stage:
            return entry
    return None


def chapter_stages(progress: CampaignProgress, chapter: int) -> list[CampaignStage]:
    return [s for s in progress.stages if s.chapter == chapter]


def tower_floor(floor: int, progress: Optional[TowerProgress] = None) -> TowerFloor:
    """
    Build a tower floor from its number.

    Args:
        floor: Floor number (>= 1)
        progress: If given, marks the floor completed when it was cleared

    Raises:
        ValueError: If floor < 1
    """
    if floor < 1:
        raise ValueError(f"Tower floors start at 1, got {floor}")

    return TowerFloor(
        floor=floor,
        name=f"Floor {floor}",
        difficulty=floor // 10 + 1,
        enemies=min(1 + floor // 50, MAX_TOWER_ENEMIES),
        rewards=Rewards(
            exp=100 + floor * 5,
            diamonds=20 + floor // 10,
            tickets=floor // 5 + 1 if floor % 5 == 0 else None,
        ),
        completed=progress is not None and floor in progress.completed_floors,
    )


def iter_tower_floors(start: int = 1, count: Optional[int] = None) -> Iterator[TowerFloor]:
    """Yield floors from ``start``; endless when count is None."""
    floor = start
    while count is None or floor < start + count:
        yield tower_floor(floor)
        floor += 1


def available_floors(progress: TowerProgress, lookahead: int = 5) -> list[TowerFloor]:
    """Floors a player can see: everything up to current_floor + lookahead."""
    return [tower_floor(f, progress) for f in range(1, progress.current_floor + lookahead + 1)]


def floor_is_open(progress: TowerProgress, floor: int) -> bool:
    """A floor can be attempted once every floor below it was reached."""
    return 1 <= floor <= progress.current_floor
