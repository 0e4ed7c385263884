from typing import Awaitable, Callable, Optional

from flask import Flask, jsonify, request
from loguru import logger

from src.analysis.analyzer import AnalysisError, analyze_match
from src.catalog.leagues import supported_league_names
from src.models.enums import OutcomeKind
from src.models.outcome import MatchAnalysis
from src.prediction.groq_client import PredictionError

AnalyzeMatch = Callable[[str, str, str], Awaitable[MatchAnalysis]]

STATUS_BY_KIND = {
    OutcomeKind.UNSUPPORTED_LEAGUE: 422,
    OutcomeKind.TEAM_NOT_FOUND: 422,
    OutcomeKind.UPSTREAM_TIMEOUT: 504,
    OutcomeKind.UPSTREAM_ERROR: 502,
}


def _field(payload: dict, name: str) -> str:
    value = payload.get(name)
    return value.strip() if isinstance(value, str) else ""


def create_app(analyze: Optional[AnalyzeMatch] = None) -> Flask:
    """Builds the API; ``analyze`` defaults to a live scrape + completion run."""
    app = Flask(__name__)
    run_analysis = analyze or analyze_match

    @app.after_request
    def allow_cors(response):
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Headers"] = "Content-Type"
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
        return response

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok", "ligas": supported_league_names()})

    @app.route("/analizar", methods=["POST", "OPTIONS"])
    async def analizar():
        if request.method == "OPTIONS":
            return "", 204

        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            payload = {}
        liga = _field(payload, "liga")
        equipo1 = _field(payload, "equipo1")
        equipo2 = _field(payload, "equipo2")
        if not liga or not equipo1 or not equipo2:
            return jsonify({"error": "League and both team names are required"}), 400

        try:
            analysis = await run_analysis(liga, equipo1, equipo2)
        except AnalysisError as e:
            outcome = e.outcome
            return (
                jsonify({"error": outcome.message, "tipo": outcome.kind.value}),
                STATUS_BY_KIND.get(outcome.kind, 500),
            )
        except PredictionError as e:
            logger.error(f"Prediction failed for {equipo1} vs {equipo2}: {e}")
            return jsonify({"error": "Analysis failed", "detalles": str(e)}), 500
        except Exception as e:
            logger.exception(f"Unexpected error analyzing {equipo1} vs {equipo2}: {e}")
            return jsonify({"error": "Analysis failed", "detalles": str(e)}), 500

        return jsonify(
            {
                "resultado": analysis.prediction,
                "posiciones": {
                    "equipo1": analysis.home.position,
                    "equipo2": analysis.away.position,
                },
            }
        )

    return app
