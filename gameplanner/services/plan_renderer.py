"""
Plan renderer for the Game Planner.

Formats a Plan's event sequence as plain text. Rendering is a pure
function of the plan: identical plans render identical text.
"""
from typing import List

from ..models import (
    LineupEvent, MatchEndEvent, PeriodResetEvent, Plan, SubstitutionEvent
)
from ..utils import fmt_match_minute

NO_SUBSTITUTIONS_TEXT = (
    "All participating players can play the full match duration based on the "
    "squad size and game format. No substitutions required for minutes management."
)

ROTATION_NOTE = (
    "***Note: This automatic plan ensures equal minutes across the two halves by "
    "resetting the playing/bench queues at halftime. The positions are fixed "
    "based on the starting formation.***"
)

MANUAL_PLAN_TEXT = (
    "To create a manual plan, you would use interactive controls here to define "
    "which player subs on and off at which minute. The plan below shows the starters."
)


def _match_info(plan: Plan) -> List[str]:
    settings = plan.settings
    return [
        "--- Match Info ---",
        f"Format: {settings.game_format} ({settings.match_periods.value})",
        f"Duration: {settings.match_duration} min "
        f"({plan.period_count} x {plan.period_duration} min periods)",
        "",
    ]


def _goalkeeper_name(plan: Plan) -> str:
    return plan.goalkeeper.name if plan.goalkeeper else "Unassigned GK"


def _allocated_minutes(plan: Plan) -> List[str]:
    lines = ["--- Allocated Minutes ---"]
    for player in plan.players:
        role = " (GK)" if player.is_goalkeeper else ""
        override = " [manual]" if player.manual_minutes is not None else ""
        minutes = "-" if player.minutes is None else str(player.minutes)
        lines.append(f"{player.name}{role}: {minutes}{override}")
    lines.append("")
    return lines


def _lineup(event: LineupEvent, show_targets: bool) -> List[str]:
    lines = [f"--- STARTING LINEUP ({fmt_match_minute(event.time)}) ---"]
    for slot in event.slots:
        target = f" (Target: {slot.player.minutes} min)" if show_targets else ""
        lines.append(f"{slot.position}: {slot.player.name}{target}")
    lines.append("")
    return lines


def _substitution(event: SubstitutionEvent) -> List[str]:
    lines = [f"--- Substitution at {fmt_match_minute(event.time)} ---"]
    for pair in event.pairs:
        lines.append(f"ON: {pair.incoming.name} ({pair.position} slot) | OFF: {pair.outgoing.name}")
    lines.append("")
    return lines


def _period_reset(event: PeriodResetEvent) -> List[str]:
    return [
        f"*** {event.label} START ({fmt_match_minute(event.time)}) "
        "- ROTATION RESET FOR EVEN MINUTES ***",
        "",
    ]


def _match_end(event: MatchEndEvent) -> List[str]:
    return [
        f"--- Match End ({fmt_match_minute(event.time)}) ---",
        f"Total substitutions made: {event.total_substitutions}.",
        "",
        ROTATION_NOTE,
    ]


def render_plan(plan: Plan) -> str:
    """
    Render the automatic rotation plan as text.

    Args:
        plan: Plan produced by the rotation scheduler

    Returns:
        Text with match info, allocated minutes, lineups, substitution
        blocks, period reset banners and the match summary.
    """
    lines = _match_info(plan)
    if not plan.substitutions_required:
        lines.append(NO_SUBSTITUTIONS_TEXT)
        return "\n".join(lines)

    lines.append(f"GK: {_goalkeeper_name(plan)}")
    lines.append(f"Formation: {plan.formation.name} ({plan.formation.spot_count} outfield spots)")
    lines.append("")
    lines.extend(_allocated_minutes(plan))

    for event in plan.events:
        if isinstance(event, LineupEvent):
            lines.extend(_lineup(event, show_targets=event.time == 0))
        elif isinstance(event, SubstitutionEvent):
            lines.extend(_substitution(event))
        elif isinstance(event, PeriodResetEvent):
            lines.extend(_period_reset(event))
        elif isinstance(event, MatchEndEvent):
            lines.extend(_match_end(event))

    return "\n".join(lines)


def render_manual_plan(plan: Plan) -> str:
    """
    Render the manual plan placeholder: goalkeeper and starters by roster order.

    Outfield players fill the formation slots in the order they appear on
    the roster; empty slots show N/A.
    """
    lines = ["--- Manual Plan Creation ---", "", MANUAL_PLAN_TEXT, ""]
    lines.append(f"GK: {_goalkeeper_name(plan)}")
    outfield = [player for player in plan.players if not player.is_goalkeeper]
    for slot, position in enumerate(plan.formation.positions):
        name = outfield[slot].name if slot < len(outfield) else "N/A"
        lines.append(f"{position}: {name}")
    return "\n".join(lines)
