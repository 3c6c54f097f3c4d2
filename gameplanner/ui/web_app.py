"""
Web application module for the Game Planner.

This module contains the Flask web server exposing JSON API endpoints for
format lookup, plan generation, minutes reports and saved squads.
"""
import logging
import os
from typing import Any, Dict, List, Optional

from flask import Flask, Response, jsonify, request

from ..models import (
    LineupEvent, MatchEndEvent, MatchSettings, PeriodResetEvent, Plan, Player,
    SubstitutionEvent
)
from ..services import ConfigurationError, ServiceFactory, formations_for, resolve_configuration
from ..services.persistence_service import squad_filename
from ..utils import (
    ALL_POSITIONS, APP_TITLE, GAME_FORMATS, MAX_SUBS_OPTIONS, SUB_TIME_OPTIONS
)
from ..utils.constants import DEFAULT_HOST, DEFAULT_PORT, DEFAULT_SQUADS_DIR

logger = logging.getLogger(__name__)


class WebAppState:
    """
    State holder for the web application.

    Services are created once per application through the service factory.
    """

    def __init__(self, squads_dir: str = DEFAULT_SQUADS_DIR):
        self.squads_dir = squads_dir
        self.service_factory = ServiceFactory()

        services = self.service_factory.create_complete_service_suite()
        self.planner_service = services['planner']
        self.analytics_service = services['analytics']
        self.validation_service = services['validator']
        self.persistence_service = services['persistence']

    def squad_path(self, name: str) -> str:
        return os.path.join(self.squads_dir, squad_filename(name))


def _parse_request(data: Optional[dict]) -> tuple:
    """
    Parse settings and roster from a JSON body.

    Raises:
        ValueError: If the body or any player entry is malformed
    """
    if not isinstance(data, dict):
        raise ValueError("JSON body required")
    settings = MatchSettings.from_dict(data.get("settings") or {})
    players_data = data.get("players") or []
    if not isinstance(players_data, list):
        raise ValueError("players must be a list")
    players = [Player.from_dict(entry) for entry in players_data]
    return settings, players


def _serialize_event(event) -> Dict[str, Any]:
    if isinstance(event, LineupEvent):
        return {
            "type": "lineup",
            "time": event.time,
            "period": event.period,
            "slots": [
                {"slot": s.slot_index, "position": s.position, "player_id": s.player.id, "name": s.player.name}
                for s in event.slots
            ],
        }
    if isinstance(event, SubstitutionEvent):
        return {
            "type": "substitution",
            "time": event.time,
            "period": event.period,
            "pairs": [
                {
                    "slot": p.slot_index,
                    "position": p.position,
                    "on": {"player_id": p.incoming.id, "name": p.incoming.name},
                    "off": {"player_id": p.outgoing.id, "name": p.outgoing.name},
                }
                for p in event.pairs
            ],
        }
    if isinstance(event, PeriodResetEvent):
        return {"type": "period_reset", "time": event.time, "period": event.period, "label": event.label}
    if isinstance(event, MatchEndEvent):
        return {"type": "match_end", "time": event.time, "total_substitutions": event.total_substitutions}
    raise TypeError(f"Unknown plan event: {event!r}")


def _serialize_plan(plan: Plan) -> Dict[str, Any]:
    return {
        "settings": plan.settings.to_dict(),
        "formation": plan.formation.to_dict(),
        "period_count": plan.period_count,
        "period_duration": plan.period_duration,
        "substitutions_required": plan.substitutions_required,
        "total_substitutions": plan.total_substitutions,
        "players": [player.to_dict() for player in plan.players],
        "events": [_serialize_event(event) for event in plan.events],
    }


def create_app(squads_dir: str = DEFAULT_SQUADS_DIR) -> Flask:
    """
    Create and configure the Flask application with API endpoints.

    Args:
        squads_dir: Directory where saved squads are stored

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app_state = WebAppState(squads_dir)
    app.config["APP_STATE"] = app_state

    @app.route("/")
    def index():
        """Basic service information."""
        return jsonify({"success": True, "app": APP_TITLE})

    # ==================== Reference Data ==================== #

    @app.route("/api/formats", methods=["GET"])
    def get_formats():
        """List game formats with their durations and formations."""
        formats: List[dict] = []
        for game_format in GAME_FORMATS:
            names = formations_for(game_format)
            config = resolve_configuration(game_format, names[0])
            formats.append({
                "game_format": game_format,
                "match_duration": config.match_duration,
                "outfield_spots": config.spot_count,
                "formations": names,
            })
        return jsonify({
            "success": True,
            "formats": formats,
            "sub_time_options": SUB_TIME_OPTIONS,
            "max_subs_options": MAX_SUBS_OPTIONS,
            "positions": ALL_POSITIONS,
        })

    @app.route("/api/formats/<game_format>/formations", methods=["GET"])
    def get_format_formations(game_format: str):
        """Formations with their position labels for one format."""
        try:
            formations = [
                resolve_configuration(game_format, name).formation.to_dict()
                for name in formations_for(game_format)
            ]
        except ConfigurationError as e:
            return jsonify({"success": False, "error": e.message}), 404
        return jsonify({"success": True, "formations": formations})

    @app.route("/api/settings/default", methods=["GET"])
    def get_default_settings():
        return jsonify({"success": True, "settings": MatchSettings.default().to_dict()})

    @app.route("/api/settings/format", methods=["POST"])
    def change_format():
        """Apply a game format change to the given settings."""
        try:
            data = request.get_json(silent=True) or {}
            settings = MatchSettings.from_dict(data.get("settings") or {})
            updated = settings.with_format(data.get("game_format", ""))
        except ValueError as e:
            return jsonify({"success": False, "error": str(e)}), 400
        return jsonify({"success": True, "settings": updated.to_dict()})

    # ==================== Planning ==================== #

    @app.route("/api/validate", methods=["POST"])
    def validate_request():
        """Validate settings and roster without generating a plan."""
        try:
            settings, players = _parse_request(request.get_json(silent=True))
        except ValueError as e:
            return jsonify({"success": False, "errors": [str(e)]}), 400

        try:
            spot_count = resolve_configuration(settings.game_format, settings.selected_formation).spot_count
        except ConfigurationError as e:
            return jsonify({"success": False, "errors": [e.message]})

        rows = app_state.planner_service.select_active_players(settings, players)
        result = app_state.validation_service.validate_request(settings, rows, spot_count)
        return jsonify({"success": result.is_valid, "errors": result.errors})

    @app.route("/api/plan", methods=["POST"])
    def generate_plan():
        """Generate a match plan."""
        try:
            settings, players = _parse_request(request.get_json(silent=True))
        except ValueError as e:
            return jsonify({"success": False, "error": str(e)}), 400

        result = app_state.planner_service.generate_plan(settings, players)
        if not result.success:
            return jsonify({"success": False, "error": result.text}), 400

        return jsonify({
            "success": True,
            "text": result.text,
            "plan": _serialize_plan(result.plan),
        })

    @app.route("/api/plan/report", methods=["POST"])
    def export_plan_report():
        """Generate a plan and export its minutes report as CSV."""
        try:
            settings, players = _parse_request(request.get_json(silent=True))
        except ValueError as e:
            return jsonify({"success": False, "error": str(e)}), 400

        result = app_state.planner_service.generate_plan(settings, players)
        if not result.success:
            return jsonify({"success": False, "error": result.text}), 400

        report = app_state.analytics_service.generate_minutes_report(result.plan)
        csv_content = app_state.analytics_service.generate_report_csv(report)
        filename = f"minutes_report_{settings.game_format}_{settings.selected_formation}.csv"
        return Response(
            csv_content,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"}
        )

    # ==================== Saved Squads ==================== #

    @app.route("/api/squads", methods=["GET"])
    def list_squads():
        squads = app_state.persistence_service.list_squads(app_state.squads_dir)
        return jsonify({"success": True, "squads": squads})

    @app.route("/api/squads", methods=["POST"])
    def save_squad():
        """Save the active players (and optional settings) as a named squad."""
        data = request.get_json(silent=True) or {}
        name = (data.get("name") or "").strip()
        if not name:
            return jsonify({"success": False, "error": "Squad name is required"}), 400

        try:
            settings, players = _parse_request(data)
            path = app_state.persistence_service.save_squad(
                name, players, settings, app_state.squads_dir
            )
        except ValueError as e:
            return jsonify({"success": False, "error": str(e)}), 400
        except OSError as e:
            logger.error("Failed to save squad '%s': %s", name, e)
            return jsonify({"success": False, "error": f"Unable to save squad: {e}"}), 500

        return jsonify({"success": True, "file": os.path.basename(path)})

    @app.route("/api/squads/<name>", methods=["GET"])
    def load_squad(name: str):
        try:
            players, settings = app_state.persistence_service.load_squad(app_state.squad_path(name))
        except FileNotFoundError:
            return jsonify({"success": False, "error": f"Squad '{name}' not found"}), 404
        except ValueError as e:
            return jsonify({"success": False, "error": str(e)}), 400

        return jsonify({
            "success": True,
            "players": [player.to_dict() for player in players],
            "settings": settings.to_dict() if settings else None,
        })

    @app.route("/api/squads/<name>", methods=["DELETE"])
    def delete_squad(name: str):
        if not app_state.persistence_service.delete_squad(app_state.squad_path(name)):
            return jsonify({"success": False, "error": f"Squad '{name}' not found"}), 404
        return jsonify({"success": True})

    return app


def run_web_app(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT,
                squads_dir: str = DEFAULT_SQUADS_DIR) -> None:
    """
    Run the web application.

    Args:
        host: Host address to bind to (default: localhost only)
        port: Port number to listen on
        squads_dir: Directory for saved squads
    """
    app = create_app(squads_dir)
    app.run(host=host, port=port, debug=False)
