"""Dataclasses representing minutes reports for a generated plan."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class PlayerMinutesSummary:
    """Allocated versus scheduled minutes for a single player."""

    player_id: str
    name: str
    role: str
    allocated_minutes: int
    manual_override: bool
    scheduled_minutes: int
    bench_minutes: int
    delta_minutes: int
    starts: int
    substitutions_on: int
    substitutions_off: int
    target_share: float
    fairness: str
    preferred_position: Optional[str] = None


@dataclass
class MinutesReport:
    """Snapshot of the minutes distribution of a plan."""

    game_format: str
    formation: str
    match_duration: int
    period_count: int
    roster_size: int
    outfield_pool_minutes: int
    total_substitutions: int
    players: List[PlayerMinutesSummary] = field(default_factory=list)
    average_minutes: float = 0.0
    median_minutes: float = 0.0
    min_minutes: int = 0
    max_minutes: int = 0
    fairness_counts: Dict[str, int] = field(default_factory=dict)
