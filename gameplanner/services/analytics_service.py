"""Analytics helpers for the Game Planner."""

from __future__ import annotations

import csv
import io
import statistics
from collections import Counter
from typing import Dict, List, Optional

from ..models import (
    LineupEvent, MatchEndEvent, MinutesReport, Plan, PlayerMinutesSummary,
    SubstitutionEvent
)

FAIRNESS_THRESHOLD_MINUTES = 2  # +/- 2 minutes regarded as notable variance
FAIRNESS_ORDER = {"under": 0, "ok": 1, "over": 2}


def scheduled_minutes(plan: Plan) -> Dict[str, int]:
    """
    Replay a plan's events and return minutes on the pitch per player id.

    Goalkeepers play the whole match when permanent. In a plan without
    substitutions every outfield player with minutes plays throughout.
    """
    duration = plan.settings.match_duration
    totals: Dict[str, int] = {player.id: 0 for player in plan.players}

    for player in plan.players:
        if player.is_goalkeeper:
            totals[player.id] = duration if plan.settings.is_permanent_gk else 0
        elif not plan.substitutions_required and (player.minutes or 0) > 0:
            totals[player.id] = duration

    on_since: Dict[str, int] = {}

    def close_stints(at: int) -> None:
        for player_id, since in on_since.items():
            totals[player_id] += at - since
        on_since.clear()

    for event in plan.events:
        if isinstance(event, LineupEvent):
            close_stints(event.time)
            for slot in event.slots:
                on_since[slot.player.id] = event.time
        elif isinstance(event, SubstitutionEvent):
            for pair in event.pairs:
                since = on_since.pop(pair.outgoing.id)
                totals[pair.outgoing.id] += event.time - since
                on_since[pair.incoming.id] = event.time
        elif isinstance(event, MatchEndEvent):
            close_stints(event.time)

    return totals


class MinutesReportExporter:
    """Exports a minutes report as CSV."""

    def export_to_csv(self, report: MinutesReport) -> str:
        """Return a CSV document with the report summary and player rows."""
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")

        writer.writerow(["Game Planner Minutes Report"])
        writer.writerow(["Format", report.game_format])
        writer.writerow(["Formation", report.formation])
        writer.writerow(["Match Duration", report.match_duration])
        writer.writerow(["Periods", report.period_count])
        writer.writerow(["Roster Size", report.roster_size])
        writer.writerow(["Outfield Pool Minutes", report.outfield_pool_minutes])
        writer.writerow(["Total Substitutions", report.total_substitutions])
        writer.writerow(["Average Minutes", round(report.average_minutes, 2)])
        writer.writerow(["Median Minutes", round(report.median_minutes, 2)])
        writer.writerow(["Minimum Minutes", report.min_minutes])
        writer.writerow(["Maximum Minutes", report.max_minutes])

        fairness_counts = report.fairness_counts or {}
        writer.writerow(["Players Under Target", fairness_counts.get("under", 0)])
        writer.writerow(["Players On Target", fairness_counts.get("ok", 0)])
        writer.writerow(["Players Over Target", fairness_counts.get("over", 0)])
        writer.writerow([])

        writer.writerow(
            [
                "Name",
                "Role",
                "Preferred Position",
                "Allocated Minutes",
                "Manual Override",
                "Scheduled Minutes",
                "Bench Minutes",
                "Delta Minutes",
                "Starts",
                "Subbed On",
                "Subbed Off",
                "Target Share (%)",
                "Fairness",
            ]
        )

        for summary in report.players:
            writer.writerow(
                [
                    summary.name,
                    summary.role,
                    summary.preferred_position or "",
                    summary.allocated_minutes,
                    "yes" if summary.manual_override else "no",
                    summary.scheduled_minutes,
                    summary.bench_minutes,
                    summary.delta_minutes,
                    summary.starts,
                    summary.substitutions_on,
                    summary.substitutions_off,
                    round(summary.target_share * 100, 2),
                    summary.fairness,
                ]
            )

        csv_text = buffer.getvalue()
        buffer.close()
        return csv_text


class AnalyticsService:
    """
    Compare allocated minutes with the minutes a plan actually schedules.
    """

    def __init__(self, export_service: Optional[MinutesReportExporter] = None) -> None:
        self.export_service = export_service or MinutesReportExporter()

    def generate_minutes_report(self, plan: Plan) -> MinutesReport:
        """Build a :class:`MinutesReport` for a generated plan."""
        played = scheduled_minutes(plan)
        duration = plan.settings.match_duration

        starts: Counter = Counter()
        subs_on: Counter = Counter()
        subs_off: Counter = Counter()
        for event in plan.events:
            if isinstance(event, LineupEvent):
                starts.update(slot.player.id for slot in event.slots)
            elif isinstance(event, SubstitutionEvent):
                subs_on.update(pair.incoming.id for pair in event.pairs)
                subs_off.update(pair.outgoing.id for pair in event.pairs)

        summaries: List[PlayerMinutesSummary] = []
        for player in plan.players:
            allocated = player.minutes or 0
            minutes = played.get(player.id, 0)
            delta = minutes - allocated
            summaries.append(
                PlayerMinutesSummary(
                    player_id=player.id,
                    name=player.name,
                    role=player.role.value,
                    allocated_minutes=allocated,
                    manual_override=player.manual_minutes is not None,
                    scheduled_minutes=minutes,
                    bench_minutes=max(0, duration - minutes),
                    delta_minutes=delta,
                    starts=starts.get(player.id, 0),
                    substitutions_on=subs_on.get(player.id, 0),
                    substitutions_off=subs_off.get(player.id, 0),
                    target_share=minutes / allocated if allocated > 0 else 0.0,
                    fairness=self._classify_fairness(delta),
                    preferred_position=player.preferred_position or None,
                )
            )

        summaries.sort(
            key=lambda item: (
                FAIRNESS_ORDER.get(item.fairness, 1),
                item.delta_minutes,
                item.name,
            )
        )

        totals = [summary.scheduled_minutes for summary in summaries]
        fairness_counter = Counter(summary.fairness for summary in summaries)

        return MinutesReport(
            game_format=plan.settings.game_format,
            formation=plan.formation.name,
            match_duration=duration,
            period_count=plan.period_count,
            roster_size=len(plan.players),
            outfield_pool_minutes=plan.formation.spot_count * duration,
            total_substitutions=plan.total_substitutions,
            players=summaries,
            average_minutes=statistics.mean(totals) if totals else 0.0,
            median_minutes=statistics.median(totals) if totals else 0.0,
            min_minutes=min(totals) if totals else 0,
            max_minutes=max(totals) if totals else 0,
            fairness_counts={
                "under": fairness_counter.get("under", 0),
                "ok": fairness_counter.get("ok", 0),
                "over": fairness_counter.get("over", 0),
            },
        )

    def generate_report_csv(self, report: MinutesReport) -> str:
        """
        Return a CSV document describing the minutes report.

        Raises:
            ValueError: If the report has no players
        """
        if report.roster_size == 0:
            raise ValueError("Cannot export analytics without any players")
        return self.export_service.export_to_csv(report)

    @staticmethod
    def _classify_fairness(delta_minutes: int) -> str:
        if delta_minutes <= -FAIRNESS_THRESHOLD_MINUTES:
            return "under"
        if delta_minutes >= FAIRNESS_THRESHOLD_MINUTES:
            return "over"
        return "ok"
