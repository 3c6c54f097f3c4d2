"""
Plan models for the Game Planner application.

A Plan is the ordered sequence of scheduling events produced by the
rotation scheduler: starting lineups, substitution windows, period resets
and the match end marker. All records are immutable.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from .formation import Formation
from .player import Player
from .settings import MatchSettings


@dataclass(frozen=True)
class SlotAssignment:
    """A player occupying one formation slot."""
    slot_index: int
    position: str
    player: Player


@dataclass(frozen=True)
class LineupEvent:
    """Starting lineup of a period."""
    time: int
    period: int
    slots: Tuple[SlotAssignment, ...]


@dataclass(frozen=True)
class SubstitutionPair:
    """One player coming on for another in a fixed slot."""
    incoming: Player
    outgoing: Player
    slot_index: int
    position: str


@dataclass(frozen=True)
class SubstitutionEvent:
    """All substitutions made in a single window."""
    time: int
    period: int
    pairs: Tuple[SubstitutionPair, ...]


@dataclass(frozen=True)
class PeriodResetEvent:
    """Start of a new period, where playing and bench swap."""
    time: int
    period: int
    label: str


@dataclass(frozen=True)
class MatchEndEvent:
    time: int
    total_substitutions: int


PlanEvent = Union[LineupEvent, SubstitutionEvent, PeriodResetEvent, MatchEndEvent]


@dataclass(frozen=True)
class Plan:
    """
    Result of a scheduling run.

    Attributes:
        settings: Settings the plan was built from
        formation: Formation whose slots the lineups fill
        players: Roster with allocated minutes, in input order
        goalkeeper: First goalkeeper on the roster, if any
        period_count: Number of periods (2 or 4)
        period_duration: Nominal period length in whole minutes
        substitutions_required: False when every eligible player plays throughout
        events: Ordered scheduling events
    """
    settings: MatchSettings
    formation: Formation
    players: Tuple[Player, ...]
    goalkeeper: Optional[Player]
    period_count: int
    period_duration: int
    substitutions_required: bool = True
    events: Tuple[PlanEvent, ...] = field(default_factory=tuple)

    def substitution_events(self) -> List[SubstitutionEvent]:
        return [event for event in self.events if isinstance(event, SubstitutionEvent)]

    def lineup_events(self) -> List[LineupEvent]:
        return [event for event in self.events if isinstance(event, LineupEvent)]

    @property
    def total_substitutions(self) -> int:
        """Number of individual substitutions across all windows."""
        return sum(len(event.pairs) for event in self.substitution_events())
