"""
Rotation scheduler for the Game Planner.

Simulates a match period by period and decides who starts, who sits and
when each substitution happens, so that minutes within every period stay
balanced across the squad.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..models import (
    Formation, LineupEvent, MatchEndEvent, MatchSettings, PeriodResetEvent,
    Plan, Player, SlotAssignment, SubstitutionEvent, SubstitutionPair
)
from .config_resolver import resolve_formation
from .errors import ConfigurationError, InvalidDurationError

logger = logging.getLogger(__name__)

# (slot index, incoming index, outgoing index)
Swap = Tuple[int, int, int]


@dataclass(frozen=True)
class RotationState:
    """
    Playing/bench split at one instant of the simulation.

    Players are referred to by a dense index into the eligible list of the
    current run. ``playing[slot]`` is the index occupying a formation slot,
    ``bench`` is the substitution queue and ``period_elapsed[i]`` holds the
    minutes player ``i`` has played in the current period.
    """
    playing: Tuple[int, ...]
    bench: Tuple[int, ...]
    period_elapsed: Tuple[int, ...]

    @classmethod
    def initial(cls, player_count: int, spot_count: int) -> RotationState:
        """Indices are pre-sorted by minutes, so the first slots start."""
        return cls(
            playing=tuple(range(spot_count)),
            bench=tuple(range(spot_count, player_count)),
            period_elapsed=(0,) * player_count,
        )

    def credit_playing(self, minutes: int) -> RotationState:
        """Add elapsed minutes to everyone currently on the pitch."""
        elapsed = list(self.period_elapsed)
        for index in self.playing:
            elapsed[index] += minutes
        return RotationState(self.playing, self.bench, tuple(elapsed))

    def outgoing_order(self) -> List[int]:
        """Slots ranked by period minutes, most first; ties keep slot order."""
        return sorted(
            range(len(self.playing)),
            key=lambda slot: -self.period_elapsed[self.playing[slot]],
        )

    def incoming_order(self, allocated: Sequence[int]) -> List[int]:
        """Bench ranked by allocated minutes, fewest first; ties keep queue order."""
        return sorted(self.bench, key=lambda index: allocated[index])

    def substitute(self, max_subs: int, allocated: Sequence[int]) -> Tuple[RotationState, List[Swap]]:
        """
        Run one substitution window.

        Incoming players are chosen from the bench as it stood when the
        window opened; players taken off join the back of the queue and can
        only come back on from the next window.
        """
        count = min(max_subs, len(self.bench), len(self.playing))
        outgoing_slots = self.outgoing_order()[:count]
        incoming = self.incoming_order(allocated)[:count]

        playing = list(self.playing)
        bench = list(self.bench)
        swaps: List[Swap] = []
        for slot, incoming_index in zip(outgoing_slots, incoming):
            outgoing_index = playing[slot]
            playing[slot] = incoming_index
            bench.remove(incoming_index)
            bench.append(outgoing_index)
            swaps.append((slot, incoming_index, outgoing_index))

        return RotationState(tuple(playing), tuple(bench), self.period_elapsed), swaps

    def start_next_period(self, spot_count: int) -> RotationState:
        """
        Swap playing and bench for a new period.

        The bench starts, in queue order; if it cannot fill every slot the
        remaining slots go to the previous lineup in slot order. Everyone
        else sits, previous lineup first. Period minutes reset to zero.
        """
        # short bench: top up from the previous lineup, lowest slot first
        playing = (self.bench + self.playing)[:spot_count]
        starters = set(playing)
        bench = tuple(index for index in self.playing + self.bench if index not in starters)
        return RotationState(playing, bench, (0,) * len(self.period_elapsed))


def period_bounds(period: int, period_count: int, match_duration: int) -> Tuple[int, int]:
    """Whole-minute start and end of a 1-based period."""
    start = (period - 1) * match_duration // period_count
    end = period * match_duration // period_count
    return start, end


def period_label(period: int, period_count: int) -> str:
    if period_count == 4:
        return f"QUARTER {period}"
    return "SECOND HALF"


class RotationScheduler:
    """
    Builds the substitution schedule for a match.

    The scheduler never mutates the roster it is given; the plan holds the
    same player records in lineup and substitution events.
    """

    def schedule(self, settings: MatchSettings, roster: Sequence[Player]) -> Plan:
        """
        Simulate the match and return the ordered scheduling events.

        Args:
            settings: Match settings
            roster: Players with allocated minutes

        Returns:
            Plan whose events start with the kickoff lineup and end with the
            match end marker. When every eligible player fits on the pitch the
            plan has no events and ``substitutions_required`` is False.

        Raises:
            InvalidDurationError: If the match duration is not positive
            ConfigurationError: If the format or formation is unknown, or the
                substitution interval is not positive
        """
        if not settings.match_duration or settings.match_duration <= 0:
            raise InvalidDurationError()
        if settings.sub_interval <= 0:
            raise ConfigurationError("Error: Substitution interval must be greater than zero.")

        formation = resolve_formation(settings.game_format, settings.selected_formation)
        players = tuple(roster)
        period_count = settings.period_count()
        goalkeeper = next((player for player in players if player.is_goalkeeper), None)

        # Stable sort: equal minutes keep roster order
        eligible = sorted(
            (p for p in players if not p.is_goalkeeper and (p.minutes or 0) > 0),
            key=lambda p: p.minutes,
        )

        plan_args = dict(
            settings=settings,
            formation=formation,
            players=players,
            goalkeeper=goalkeeper,
            period_count=period_count,
            period_duration=settings.match_duration // period_count,
        )

        if len(eligible) <= formation.spot_count:
            logger.debug(
                "%d eligible players for %d spots, no substitutions needed",
                len(eligible), formation.spot_count,
            )
            return Plan(substitutions_required=False, events=(), **plan_args)

        events = self._simulate(settings, formation, eligible, period_count)
        return Plan(substitutions_required=True, events=tuple(events), **plan_args)

    def _simulate(self, settings: MatchSettings, formation: Formation,
                  eligible: List[Player], period_count: int) -> list:
        allocated = [player.minutes for player in eligible]
        spot_count = formation.spot_count
        state = RotationState.initial(len(eligible), spot_count)

        events: list = [self._lineup_event(0, 1, state, eligible, formation)]
        total_substitutions = 0

        for period in range(1, period_count + 1):
            start, end = period_bounds(period, period_count, settings.match_duration)

            if period > 1:
                events.append(PeriodResetEvent(start, period, period_label(period, period_count)))
                state = state.start_next_period(spot_count)
                events.append(self._lineup_event(start, period, state, eligible, formation))

            last_event_time = start
            time = start + settings.first_sub_time
            # A window on the period boundary belongs to the period reset
            while time < end and state.bench:
                state = state.credit_playing(time - last_event_time)
                state, swaps = state.substitute(settings.max_subs, allocated)
                if swaps:
                    events.append(SubstitutionEvent(
                        time=time,
                        period=period,
                        pairs=tuple(
                            SubstitutionPair(
                                incoming=eligible[incoming],
                                outgoing=eligible[outgoing],
                                slot_index=slot,
                                position=formation.position_for_slot(slot),
                            )
                            for slot, incoming, outgoing in swaps
                        ),
                    ))
                    total_substitutions += len(swaps)
                    logger.debug("Window %d: %d substitutions", time, len(swaps))

                last_event_time = time
                time += settings.sub_interval

        events.append(MatchEndEvent(settings.match_duration, total_substitutions))
        return events

    @staticmethod
    def _lineup_event(time: int, period: int, state: RotationState,
                      eligible: List[Player], formation: Formation) -> LineupEvent:
        return LineupEvent(
            time=time,
            period=period,
            slots=tuple(
                SlotAssignment(slot, formation.position_for_slot(slot), eligible[index])
                for slot, index in enumerate(state.playing)
            ),
        )


def schedule_rotation(settings: MatchSettings, roster: Sequence[Player],
                      scheduler: Optional[RotationScheduler] = None) -> Plan:
    """Convenience wrapper around :meth:`RotationScheduler.schedule`."""
    return (scheduler or RotationScheduler()).schedule(settings, roster)
