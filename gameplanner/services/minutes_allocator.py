"""Minutes allocation for the Game Planner."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Sequence

from ..models import MatchSettings, Player
from .config_resolver import outfield_spots

logger = logging.getLogger(__name__)


def allocate_minutes(settings: MatchSettings, roster: Sequence[Player]) -> List[Player]:
    """
    Split the available outfield minutes equally across the roster.

    The outfield pool is ``spots * match_duration``. Every outfield player
    gets ``pool // N`` minutes and the first ``pool % N`` outfield players,
    in roster order, get one extra minute. A manual override replaces the
    computed value but still uses up its share of the remainder, so the
    allocated total may differ from the pool.

    Goalkeepers get the full match when the goalkeeper is permanent and
    zero otherwise.

    Args:
        settings: Match settings
        roster: Players in input order

    Returns:
        New player records with ``minutes`` set. When the duration is not
        positive, or there is nobody to allocate to, the records are returned
        without minutes.

    Raises:
        ConfigurationError: If the game format is unknown
    """
    players = list(roster)
    duration = settings.match_duration
    if not duration or duration <= 0 or not players:
        return [replace(player) for player in players]

    outfield_count = sum(1 for player in players if not player.is_goalkeeper)
    if outfield_count == 0:
        return [replace(player) for player in players]

    pool = outfield_spots(settings.game_format) * duration
    base, remainder = divmod(pool, outfield_count)
    logger.debug(
        "Allocating %d outfield minutes across %d players (base %d, remainder %d)",
        pool, outfield_count, base, remainder,
    )

    allocated: List[Player] = []
    for player in players:
        if player.is_goalkeeper:
            allocated.append(replace(player, minutes=duration if settings.is_permanent_gk else 0))
            continue

        minutes = base
        if remainder > 0:
            minutes += 1
            remainder -= 1

        if player.manual_minutes is not None:
            minutes = player.manual_minutes
        allocated.append(replace(player, minutes=minutes))

    return allocated
