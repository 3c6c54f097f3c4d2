"""Tests for the rotation scheduler."""

import pytest

from gameplanner.models import (
    LineupEvent, MatchEndEvent, MatchPeriods, MatchSettings, PeriodResetEvent,
    Player, PlayerRole, SubstitutionEvent
)
from gameplanner.services import (
    ConfigurationError, InvalidDurationError, RotationScheduler, RotationState,
    allocate_minutes, schedule_rotation
)


def build_roster(outfield_count, goalkeeper=True):
    roster = []
    if goalkeeper:
        roster.append(Player(id="gk", name="Ella", role=PlayerRole.GOALKEEPER))
    for i in range(1, outfield_count + 1):
        roster.append(Player(id=f"p{i}", name=f"Player {i}"))
    return roster


def nine_a_side(**overrides):
    values = dict(
        game_format="9v9",
        match_duration=60,
        selected_formation="3-3-2",
        is_permanent_gk=True,
        sub_interval=10,
        first_sub_time=10,
        max_subs=2,
        match_periods=MatchPeriods.HALVES,
    )
    values.update(overrides)
    return MatchSettings(**values)


def names(players):
    return [player.name for player in players]


def pairs_of(event):
    return [(p.incoming.name, p.outgoing.name, p.slot_index, p.position) for p in event.pairs]


@pytest.fixture
def scenario_a_plan():
    settings = nine_a_side()
    return schedule_rotation(settings, allocate_minutes(settings, build_roster(11)))


def test_scenario_a_event_sequence(scenario_a_plan):
    plan = scenario_a_plan

    assert plan.substitutions_required
    assert plan.period_count == 2
    assert plan.period_duration == 30
    assert [type(event) for event in plan.events] == [
        LineupEvent, SubstitutionEvent, SubstitutionEvent,
        PeriodResetEvent, LineupEvent, SubstitutionEvent, SubstitutionEvent,
        MatchEndEvent,
    ]
    assert [event.time for event in plan.substitution_events()] == [10, 20, 40, 50]
    assert [event.period for event in plan.substitution_events()] == [1, 1, 2, 2]

    reset = plan.events[3]
    assert reset.time == 30
    assert reset.label == "SECOND HALF"

    end = plan.events[-1]
    assert end.time == 60
    assert end.total_substitutions == 8
    assert plan.total_substitutions == 8


def test_scenario_a_kickoff_lineup_sorted_by_minutes(scenario_a_plan):
    kickoff = scenario_a_plan.events[0]

    assert kickoff.time == 0
    # Players 8-11 hold 43 minutes, 1-7 hold 44; fewest minutes start
    assert [slot.player.name for slot in kickoff.slots] == [
        "Player 8", "Player 9", "Player 10", "Player 11",
        "Player 1", "Player 2", "Player 3", "Player 4",
    ]
    assert [slot.position for slot in kickoff.slots] == [
        "CD-R", "CD-L", "CD", "CM-R", "CM-L", "CDM", "ST-R", "ST-L",
    ]


def test_scenario_a_substitution_pairs(scenario_a_plan):
    subs = scenario_a_plan.substitution_events()

    assert pairs_of(subs[0]) == [
        ("Player 5", "Player 8", 0, "CD-R"),
        ("Player 6", "Player 9", 1, "CD-L"),
    ]
    # Players taken off at 10 may come back from the next window
    assert pairs_of(subs[1]) == [
        ("Player 8", "Player 10", 2, "CD"),
        ("Player 9", "Player 11", 3, "CM-R"),
    ]
    assert pairs_of(subs[2]) == [
        ("Player 2", "Player 7", 0, "CD-R"),
        ("Player 3", "Player 10", 1, "CD-L"),
    ]
    assert pairs_of(subs[3]) == [
        ("Player 10", "Player 11", 2, "CD"),
        ("Player 4", "Player 5", 3, "CM-R"),
    ]


def test_scenario_a_second_half_lineup_starts_with_bench(scenario_a_plan):
    second_half = scenario_a_plan.lineup_events()[1]

    assert second_half.time == 30
    assert second_half.period == 2
    assert [slot.player.name for slot in second_half.slots] == [
        "Player 7", "Player 10", "Player 11", "Player 5",
        "Player 6", "Player 8", "Player 9", "Player 1",
    ]


def test_no_substitutions_when_squad_fits_formation():
    settings = nine_a_side()
    plan = schedule_rotation(settings, allocate_minutes(settings, build_roster(8)))

    assert not plan.substitutions_required
    assert plan.events == ()
    assert plan.substitution_events() == []
    assert plan.total_substitutions == 0


def test_zero_duration_rejected():
    settings = nine_a_side(match_duration=0)
    roster = allocate_minutes(settings, build_roster(11))

    with pytest.raises(InvalidDurationError):
        schedule_rotation(settings, roster)


def test_unknown_formation_rejected():
    settings = nine_a_side(selected_formation="4-4-2")

    with pytest.raises(ConfigurationError):
        RotationScheduler().schedule(settings, build_roster(11))


def test_quarters_for_five_a_side():
    settings = MatchSettings(
        game_format="5v5",
        match_duration=40,
        selected_formation="1-2-1",
        sub_interval=5,
        first_sub_time=5,
        max_subs=1,
        match_periods=MatchPeriods.QUARTERS,
    )
    plan = schedule_rotation(settings, allocate_minutes(settings, build_roster(6)))

    assert plan.period_count == 4
    assert plan.period_duration == 10
    resets = [event for event in plan.events if isinstance(event, PeriodResetEvent)]
    assert [(event.time, event.label) for event in resets] == [
        (10, "QUARTER 2"), (20, "QUARTER 3"), (30, "QUARTER 4"),
    ]
    assert [event.time for event in plan.substitution_events()] == [5, 15, 25, 35]
    assert [pairs_of(event) for event in plan.substitution_events()] == [
        [("Player 3", "Player 5", 0, "CD")],
        [("Player 1", "Player 4", 0, "CD")],
        [("Player 6", "Player 2", 0, "CD")],
        [("Player 5", "Player 3", 0, "CD")],
    ]
    assert plan.events[-1].total_substitutions == 4


def test_quarters_ignored_for_larger_formats():
    settings = nine_a_side(match_periods=MatchPeriods.QUARTERS)
    plan = schedule_rotation(settings, allocate_minutes(settings, build_roster(11)))

    assert plan.period_count == 2


def test_goalkeepers_and_zero_minute_players_never_rotate():
    settings = nine_a_side()
    roster = build_roster(11)
    roster[1] = Player(id="p1", name="Player 1", manual_minutes=0)
    plan = schedule_rotation(settings, allocate_minutes(settings, roster))

    seen = set()
    for event in plan.events:
        if isinstance(event, LineupEvent):
            seen.update(slot.player.id for slot in event.slots)
        elif isinstance(event, SubstitutionEvent):
            seen.update(pair.incoming.id for pair in event.pairs)
    assert "gk" not in seen
    assert "p1" not in seen


@pytest.mark.parametrize("outfield_count,max_subs", [(9, 1), (11, 2), (14, 3), (16, 4)])
def test_window_limits_and_no_same_window_reentry(outfield_count, max_subs):
    settings = nine_a_side(max_subs=max_subs, sub_interval=5, first_sub_time=5)
    plan = schedule_rotation(settings, allocate_minutes(settings, build_roster(outfield_count)))
    bench_size = outfield_count - 8

    for event in plan.substitution_events():
        assert len(event.pairs) <= min(max_subs, bench_size)
        incoming = {pair.incoming.id for pair in event.pairs}
        outgoing = {pair.outgoing.id for pair in event.pairs}
        assert not incoming & outgoing
        assert len({pair.slot_index for pair in event.pairs}) == len(event.pairs)


def test_lineups_fill_every_slot_even_with_short_bench():
    settings = nine_a_side()
    plan = schedule_rotation(settings, allocate_minutes(settings, build_roster(9)))

    for lineup in plan.lineup_events():
        ids = [slot.player.id for slot in lineup.slots]
        assert len(ids) == 8
        assert len(set(ids)) == 8


def test_schedule_does_not_mutate_roster():
    settings = nine_a_side()
    roster = allocate_minutes(settings, build_roster(11))
    before = [player.to_dict() for player in roster]

    schedule_rotation(settings, roster)

    assert [player.to_dict() for player in roster] == before


def test_identical_inputs_give_identical_plans():
    settings = nine_a_side()
    first = schedule_rotation(settings, allocate_minutes(settings, build_roster(13)))
    second = schedule_rotation(settings, allocate_minutes(settings, build_roster(13)))

    assert first == second


class TestRotationState:
    def test_initial_partition(self):
        state = RotationState.initial(player_count=5, spot_count=3)

        assert state.playing == (0, 1, 2)
        assert state.bench == (3, 4)
        assert state.period_elapsed == (0, 0, 0, 0, 0)

    def test_credit_playing_returns_new_state(self):
        state = RotationState.initial(4, 2)
        credited = state.credit_playing(7)

        assert credited.period_elapsed == (7, 7, 0, 0)
        assert state.period_elapsed == (0, 0, 0, 0)

    def test_outgoing_order_breaks_ties_by_slot(self):
        state = RotationState(playing=(2, 0, 1), bench=(3,), period_elapsed=(5, 10, 5, 0))

        # slot 2 holds player 1 (10 min); slots 0 and 1 are tied on 5
        assert state.outgoing_order() == [2, 0, 1]

    def test_substitute_pairs_outgoing_with_fewest_minutes(self):
        state = RotationState(playing=(0, 1), bench=(2, 3), period_elapsed=(10, 20, 0, 0))
        allocated = [30, 30, 25, 20]

        new_state, swaps = state.substitute(max_subs=2, allocated=allocated)

        assert swaps == [(1, 3, 1), (0, 2, 0)]
        assert new_state.playing == (2, 3)
        assert new_state.bench == (1, 0)

    def test_start_next_period_swaps_bench_in(self):
        state = RotationState(playing=(0, 1, 2), bench=(3, 4), period_elapsed=(5, 5, 5, 5, 5))
        next_state = state.start_next_period(3)

        assert next_state.playing == (3, 4, 0)
        assert next_state.bench == (1, 2)
        assert next_state.period_elapsed == (0, 0, 0, 0, 0)
