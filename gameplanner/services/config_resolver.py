"""
Configuration resolver for the Game Planner.

Looks up the match duration, outfield spot count and formation positions
for a game format against the static formation catalog.
"""
from typing import List

from ..models import Formation, MatchConfiguration
from ..utils import FORMATIONS, MATCH_DURATIONS, OUTFIELD_SPOTS
from .errors import ConfigurationError


def formations_for(game_format: str) -> List[str]:
    """
    List formation names for a game format, in catalog order.

    Raises:
        ConfigurationError: If the game format is unknown
    """
    if game_format not in FORMATIONS:
        raise ConfigurationError(f"Error: Unknown game format '{game_format}'.")
    return list(FORMATIONS[game_format].keys())


def default_formation(game_format: str) -> str:
    """First formation listed for the format."""
    return formations_for(game_format)[0]


def resolve_formation(game_format: str, formation_name: str) -> Formation:
    """
    Build the Formation for a format and formation name.

    Raises:
        ConfigurationError: If the format or formation is not in the catalog
    """
    names = formations_for(game_format)
    if formation_name not in names:
        raise ConfigurationError(
            f"Error: Formation '{formation_name}' is not available for {game_format}."
        )
    return Formation(
        name=formation_name,
        game_format=game_format,
        positions=tuple(FORMATIONS[game_format][formation_name]),
    )


def resolve_configuration(game_format: str, formation_name: str) -> MatchConfiguration:
    """
    Resolve duration, spot count and positions for a format and formation.

    Args:
        game_format: One of the supported formats (e.g. "9v9")
        formation_name: Formation name listed for that format (e.g. "3-3-2")

    Returns:
        MatchConfiguration for the pair

    Raises:
        ConfigurationError: If the format or formation is not in the catalog
    """
    formation = resolve_formation(game_format, formation_name)
    return MatchConfiguration(
        game_format=game_format,
        match_duration=MATCH_DURATIONS[game_format],
        formation=formation,
    )


def outfield_spots(game_format: str) -> int:
    """
    Outfield spot count for a format.

    Raises:
        ConfigurationError: If the game format is unknown
    """
    if game_format not in OUTFIELD_SPOTS:
        raise ConfigurationError(f"Error: Unknown game format '{game_format}'.")
    return OUTFIELD_SPOTS[game_format]
