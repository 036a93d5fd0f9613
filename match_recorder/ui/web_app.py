"""
Web application module for the Live Match Recorder.

This module contains the Flask web server that exposes the match session as
JSON API endpoints: lifecycle controls, event recording and undo, live state
and file exports.
"""
import logging
from typing import Any, Dict, List, Optional

from flask import Flask, Response, jsonify, request

from ..models import EventKind, MatchEvent, PHASE_STATUS_TEXT, Side
from ..services import ServiceFactory
from ..utils import (
    AppConfig, EXPORT_ARTIFACTS, RECENT_EVENTS_LIMIT, UNKNOWN_PLAYER_LABEL,
    configure_logging, fmt_mmss
)

logger = logging.getLogger(__name__)


class WebAppState:
    """
    State holder for the web application.

    Services come from the factory; the session is recovered from the
    process-wide repository when one is already stored there.
    """

    def __init__(self, factory: Optional[ServiceFactory] = None):
        self.service_factory = factory or ServiceFactory()
        services = self.service_factory.create_complete_service_suite()
        self.session = services['session']
        self.exporter = services['exporter']
        self.repository = services['repository']

    def shutdown(self) -> None:
        self.session.close()


def _event_to_dict(event: MatchEvent, team_label: str) -> Dict[str, Any]:
    return {
        "sequence_id": event.sequence_id,
        "clock": f"{event.elapsed_minute}:{event.elapsed_second_in_minute:02d}",
        "elapsed_minute": event.elapsed_minute,
        "elapsed_second_in_minute": event.elapsed_second_in_minute,
        "kind": event.kind.value,
        "label": event.kind.label,
        "side": event.side.value,
        "team": team_label,
        "player": event.player or UNKNOWN_PLAYER_LABEL,
        "description": event.description,
    }


def create_app(state: Optional[WebAppState] = None) -> Flask:
    """
    Create and configure the Flask application with API endpoints.

    Args:
        state: Pre-built application state; a fresh one is created if omitted

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app_state = state or WebAppState()
    app.config["APP_STATE"] = app_state

    def _payload() -> Dict[str, Any]:
        return request.get_json(silent=True) or {}

    def _build_state_data() -> Dict[str, Any]:
        snapshot = app_state.session.snapshot()
        recent: List[Dict[str, Any]] = [
            _event_to_dict(event, snapshot.team_label(event.side))
            for event in reversed(snapshot.events[-RECENT_EVENTS_LIMIT:])
        ]
        return {
            "phase": snapshot.phase.value,
            "status": PHASE_STATUS_TEXT[snapshot.phase],
            "opponent": snapshot.opponent_name,
            "home_team": snapshot.home_team_name,
            "elapsed_seconds": snapshot.elapsed_seconds,
            "clock": fmt_mmss(snapshot.elapsed_seconds),
            "score": {"home": snapshot.tally.score.home, "away": snapshot.tally.score.away},
            "selected_player": snapshot.selected_player,
            "total_events": len(snapshot.events),
            "can_export": bool(snapshot.events),
            "can_undo": bool(snapshot.events),
            "recent_events": recent,
            "kinds": [{"kind": kind.value, "label": kind.label} for kind in EventKind],
            "statistics": snapshot.tally.statistics(),
            "snapshot": snapshot.to_json(),
        }

    @app.route("/api/state", methods=["GET"])
    def get_state():
        """Get the live match state."""
        return jsonify({"success": True, "state": _build_state_data()})

    @app.route("/api/match/start", methods=["POST"])
    def start_match():
        """Start the match against the named opponent."""
        opponent = str(_payload().get("opponent") or "")
        if not opponent.strip():
            return jsonify({
                "success": False,
                "error": "Please enter the opponent team name to start the game",
            }), 400
        if not app_state.session.start(opponent):
            return jsonify({
                "success": False,
                "error": f"Cannot start a match in phase {app_state.session.phase.value}",
            }), 400
        return jsonify({"success": True, "message": "Game started", "state": _build_state_data()})

    def _transition(name: str, message: str):
        action = getattr(app_state.session, name)
        if action():
            return jsonify({"success": True, "message": message, "state": _build_state_data()})
        return jsonify({
            "success": False,
            "error": f"Cannot {name} in phase {app_state.session.phase.value}",
        }), 400

    @app.route("/api/match/pause", methods=["POST"])
    def pause_match():
        return _transition("pause", "Game paused")

    @app.route("/api/match/resume", methods=["POST"])
    def resume_match():
        return _transition("resume", "Game resumed")

    @app.route("/api/match/stop", methods=["POST"])
    def stop_match():
        return _transition("stop", "Game stopped")

    @app.route("/api/match/reset", methods=["POST"])
    def reset_match():
        return _transition("reset", "Game reset")

    @app.route("/api/player", methods=["POST"])
    def select_player():
        """Set the player applied to the next recorded events."""
        app_state.session.select_player(_payload().get("player"))
        return jsonify({"success": True, "selected_player": app_state.session.selected_player})

    @app.route("/api/events", methods=["POST"])
    def record_event():
        """Record an event for one side."""
        data = _payload()
        try:
            kind = EventKind.parse(data.get("kind", ""))
            side = Side.parse(data.get("side", ""))
        except ValueError as e:
            return jsonify({"success": False, "error": str(e)}), 400

        event = app_state.session.record_event(
            kind, side, player=data.get("player"), description=data.get("description")
        )
        if event is None:
            return jsonify({
                "success": False,
                "error": "Events can only be recorded while the game is running",
            }), 409

        snapshot = app_state.session.snapshot()
        return jsonify({
            "success": True,
            "event": _event_to_dict(event, snapshot.team_label(event.side)),
            "state": _build_state_data(),
        })

    @app.route("/api/events/undo", methods=["POST"])
    def undo_event():
        """Undo the most recently recorded event."""
        event = app_state.session.undo_last()
        if event is None:
            return jsonify({"success": False, "message": "Nothing to undo"}), 400
        return jsonify({
            "success": True,
            "message": f"Removed {event.kind.label}",
            "state": _build_state_data(),
        })

    @app.route("/api/export/<fmt>/<artifact>", methods=["GET"])
    def export_artifact(fmt: str, artifact: str):
        """
        Download one export file.

        Each download is its own export action unless the caller passes the
        same `at` (epoch milliseconds) for both files, which pins the
        export instant and so the shared game id.
        """
        if artifact not in EXPORT_ARTIFACTS:
            return jsonify({"success": False, "error": f"Unknown export artifact: {artifact}"}), 404
        at_ms = request.args.get("at", type=int)
        now = at_ms / 1000 if at_ms is not None else None
        snapshot = app_state.session.snapshot()
        try:
            rendered = app_state.exporter.export_artifact(snapshot, fmt, artifact, now=now)
        except ValueError as e:
            logger.info("Export rejected: %s", e)
            return jsonify({"success": False, "error": str(e)}), 400

        return Response(
            rendered.to_bytes(),
            mimetype=rendered.content_type,
            headers={"Content-Disposition": f'attachment; filename="{rendered.filename}"'},
        )

    @app.route("/api/export/<fmt>", methods=["GET"])
    def export_files(fmt: str):
        """Return both export files of a format inline, with their names."""
        snapshot = app_state.session.snapshot()
        try:
            artifacts = app_state.exporter.export(snapshot, fmt)
        except ValueError as e:
            return jsonify({"success": False, "error": str(e)}), 400
        return jsonify({
            "success": True,
            "files": [
                {
                    "filename": artifact.filename,
                    "content_type": artifact.content_type,
                    "content": artifact.content,
                }
                for artifact in artifacts
            ],
        })

    return app


def run_web_app(host: Optional[str] = None, port: Optional[int] = None) -> None:
    """
    Run the web application.

    Args:
        host: Host address to bind to (default from configuration)
        port: Port number to listen on (default from configuration)
    """
    config = AppConfig.from_env()
    configure_logging(config.log_level)
    state = WebAppState(ServiceFactory(config))
    app = create_app(state)
    try:
        app.run(host=host or config.host, port=port or config.port, debug=False)
    finally:
        state.shutdown()


def main() -> None:
    run_web_app()


if __name__ == "__main__":
    main()
