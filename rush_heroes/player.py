"""
Player creation.
"""

from __future__ import annotations

import logging
import re
import time
from typing import Optional

from rush_heroes.components import AFKRewards, Player
from rush_heroes.progression.stages import new_campaign_progress

logger = logging.getLogger(__name__)

NICKNAME_PATTERN = re.compile(r"^[A-Za-z0-9_]+$")
STARTING_DIAMONDS = 1000
STARTING_TICKETS = 50


def validate_nickname(nickname: str) -> str:
    """
    Normalize and check a nickname.

    Raises:
        ValueError: If the nickname is empty or has characters other than
            letters, digits and underscore
    """
    nickname = nickname.strip()
    if not NICKNAME_PATTERN.match(nickname):
        raise ValueError(
            f"Invalid nickname {nickname!r}: use only letters, digits and underscore"
        )
    return nickname


def create_player(nickname: str, now: Optional[float] = None) -> Player:
    """
    Create a new account with starting currency and a fresh campaign.

    Args:
        nickname: Display name
        now: Creation timestamp (defaults to the current time)
    """
    nickname = validate_nickname(nickname)
    now = time.time() if now is None else now

    player = Player(
        nickname=nickname,
        id=f"{nickname}_{int(now * 1000)}",
        diamonds=STARTING_DIAMONDS,
        tickets=STARTING_TICKETS,
        campaign=new_campaign_progress(),
        afk=AFKRewards(last_claimed=now),
        last_online=now,
    )
    logger.info(f"Created player {player.id}")
    return player
