"""Formation models for the Game Planner."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class Formation:
    """An ordered set of outfield position labels for one game format."""
    name: str
    game_format: str
    positions: Tuple[str, ...]

    @property
    def spot_count(self) -> int:
        """Number of outfield slots in the formation."""
        return len(self.positions)

    def position_for_slot(self, slot_index: int) -> str:
        return self.positions[slot_index]

    def to_dict(self) -> Dict:
        """Convert formation to dictionary for serialization."""
        return {
            "name": self.name,
            "game_format": self.game_format,
            "positions": list(self.positions),
        }


@dataclass(frozen=True)
class MatchConfiguration:
    """Resolved format configuration: duration, spot count and formation."""
    game_format: str
    match_duration: int
    formation: Formation

    @property
    def spot_count(self) -> int:
        return self.formation.spot_count
