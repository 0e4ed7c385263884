import pytest

from src.analysis.analyzer import AnalysisError
from src.api.app import create_app
from src.catalog.leagues import supported_league_names
from src.models.enums import OutcomeKind
from src.models.outcome import MatchAnalysis, PositionOutcome
from src.prediction.groq_client import PredictionError


def resolved(team, position):
    return PositionOutcome.resolved(league="LaLiga", team=team, position=position, matched_team=team)


@pytest.fixture
def calls():
    return []


def client_for(behaviour, calls):
    async def analyze(league, home, away):
        calls.append((league, home, away))
        return behaviour(league, home, away)

    app = create_app(analyze=analyze)
    app.config.update(TESTING=True)
    return app.test_client()


def succeed(league, home, away):
    return MatchAnalysis(
        league=league, home=resolved(home, 1), away=resolved(away, 4), prediction="**Favourite**: Real Madrid"
    )


def fail_with(kind, message):
    def behaviour(league, home, away):
        raise AnalysisError(PositionOutcome.failed(kind, league=league, team=home, message=message))

    return behaviour


def test_analizar_success(calls):
    client = client_for(succeed, calls)
    resp = client.post("/analizar", json={"liga": "laliga", "equipo1": " Real Madrid ", "equipo2": "Athletic"})

    assert resp.status_code == 200
    assert resp.get_json() == {
        "resultado": "**Favourite**: Real Madrid",
        "posiciones": {"equipo1": 1, "equipo2": 4},
    }
    assert calls == [("laliga", "Real Madrid", "Athletic")]
    assert resp.headers["Access-Control-Allow-Origin"] == "*"


@pytest.mark.parametrize(
    "body",
    [{}, {"liga": "laliga", "equipo1": "Real Madrid"}, {"liga": " ", "equipo1": "a", "equipo2": "b"}, {"liga": 3, "equipo1": "a", "equipo2": "b"}],
)
def test_analizar_requires_all_fields(calls, body):
    resp = client_for(succeed, calls).post("/analizar", json=body)
    assert resp.status_code == 400
    assert "required" in resp.get_json()["error"]
    assert calls == []


def test_analizar_rejects_non_json(calls):
    resp = client_for(succeed, calls).post("/analizar", data="liga=laliga")
    assert resp.status_code == 400


@pytest.mark.parametrize("body", [["x"], "laliga", 42, None])
def test_analizar_rejects_json_that_is_not_an_object(calls, body):
    resp = client_for(succeed, calls).post("/analizar", json=body)
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "League and both team names are required"}
    assert calls == []


@pytest.mark.parametrize(
    "kind, status",
    [
        (OutcomeKind.UNSUPPORTED_LEAGUE, 422),
        (OutcomeKind.TEAM_NOT_FOUND, 422),
        (OutcomeKind.UPSTREAM_TIMEOUT, 504),
        (OutcomeKind.UPSTREAM_ERROR, 502),
    ],
)
def test_analizar_maps_outcome_kinds_to_status(calls, kind, status):
    client = client_for(fail_with(kind, "something went wrong"), calls)
    resp = client.post("/analizar", json={"liga": "laliga", "equipo1": "a", "equipo2": "b"})

    assert resp.status_code == status
    assert resp.get_json() == {"error": "something went wrong", "tipo": kind.value}


def test_analizar_prediction_failure_is_500(calls):
    def behaviour(league, home, away):
        raise PredictionError("Completion API error: 401")

    resp = client_for(behaviour, calls).post("/analizar", json={"liga": "laliga", "equipo1": "a", "equipo2": "b"})
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Analysis failed", "detalles": "Completion API error: 401"}


def test_analizar_preflight(calls):
    resp = client_for(succeed, calls).open("/analizar", method="OPTIONS")
    assert resp.status_code in (200, 204)
    assert resp.headers["Access-Control-Allow-Origin"] == "*"


def test_health_lists_leagues(calls):
    resp = client_for(succeed, calls).get("/health")
    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok", "ligas": supported_league_names()}
