"""
Player model for the Game Planner application.

This module contains the Player dataclass which represents a single roster
entry and its allocated playing time.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class PlayerRole(Enum):
    """Roster role of a player."""
    GOALKEEPER = "GK"
    OUTFIELD = "Outfield"


@dataclass
class Player:
    """
    Represents a roster entry for a single match.

    Attributes:
        id: Externally assigned unique token (identity of the player)
        name: Display name; an empty name marks an unused roster row
        role: Goalkeeper or outfield player
        manual_minutes: Optional override for the allocated minutes
        minutes: Allocated minutes, None until the allocator has run
        preferred_position: Preferred position label (informational)
        secondary_position: Secondary position label (informational)
    """
    id: str
    name: str = ""
    role: PlayerRole = PlayerRole.OUTFIELD
    manual_minutes: Optional[int] = None
    minutes: Optional[int] = None
    preferred_position: str = ""
    secondary_position: str = ""

    @property
    def is_active(self) -> bool:
        """Whether this roster row holds a real player."""
        return bool(self.name and self.name.strip())

    @property
    def is_goalkeeper(self) -> bool:
        return self.role == PlayerRole.GOALKEEPER

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "role": self.role.value,
            "manual_minutes": self.manual_minutes,
            "minutes": self.minutes,
            "preferred_position": self.preferred_position,
            "secondary_position": self.secondary_position,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Player':
        """
        Create from dictionary for JSON deserialization.

        Accepts both snake_case keys and the camelCase keys used by
        browser clients (manualMinutes, preferredPosition, ...).

        Raises:
            ValueError: If the id is missing or the role is unknown
        """
        player_id = data.get("id")
        if player_id is None or str(player_id) == "":
            raise ValueError("Player id is required")

        manual = _first_present(data, "manual_minutes", "manualMinutes")
        minutes = data.get("minutes")
        return cls(
            id=str(player_id),
            name=data.get("name") or "",
            role=PlayerRole(data.get("role") or PlayerRole.OUTFIELD.value),
            manual_minutes=_optional_minutes(manual),
            minutes=_optional_minutes(minutes),
            preferred_position=_first_present(data, "preferred_position", "preferredPosition") or "",
            secondary_position=_first_present(data, "secondary_position", "secondaryPosition") or "",
        )


def _first_present(data: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None


def _optional_minutes(value: Any) -> Optional[int]:
    """Parse an optional minute count; blank values mean 'not set'."""
    if value is None or value == "":
        return None
    minutes = int(value)
    if minutes < 0:
        raise ValueError(f"Minutes cannot be negative: {minutes}")
    return minutes
