import asyncio
import json

import httpx
import pytest

from src.prediction.groq_client import GroqPredictionClient, PredictionError, build_prompt

API_URL = "https://api.groq.test/openai/v1/chat/completions"


def make_client(handler, api_key="gsk_test_key_123456") -> GroqPredictionClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return GroqPredictionClient(client=http, api_key=api_key, api_url=API_URL, model="test-model")


def predict(client: GroqPredictionClient) -> str:
    async def run():
        try:
            return await client.predict("Premier League", "Arsenal", 2, "Chelsea", 7)
        finally:
            await client.close()

    return asyncio.run(run())


def completion(content):
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def test_prompt_mentions_league_teams_and_positions():
    prompt = build_prompt("Serie A", "Inter", 1, "Lazio", 6)
    assert "**League**: Serie A" in prompt
    assert "Inter (Position 1) vs Lazio (Position 6)" in prompt
    assert "BTTS" in prompt


def test_predict_posts_chat_completion():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["auth"] = request.headers["Authorization"]
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=completion("  **Favourite**: Arsenal \n"))

    assert predict(make_client(handler)) == "**Favourite**: Arsenal"
    assert seen["url"] == API_URL
    assert seen["auth"] == "Bearer gsk_test_key_123456"
    body = seen["body"]
    assert body["model"] == "test-model"
    assert body["messages"][0]["role"] == "system"
    assert "Arsenal (Position 2) vs Chelsea (Position 7)" in body["messages"][0]["content"]
    assert body["temperature"] == 0.7
    assert body["max_tokens"] == 1000


def test_missing_api_key_fails_before_any_request(monkeypatch):
    from src.config import settings as settings_module

    monkeypatch.setattr(settings_module.settings, "groq_api_key", None)
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json=completion("x"))

    with pytest.raises(PredictionError, match="API key"):
        predict(make_client(handler, api_key=None))
    assert calls == []


def test_error_status_becomes_prediction_error():
    def handler(request):
        return httpx.Response(401, json={"error": {"message": "invalid key"}})

    with pytest.raises(PredictionError, match="401"):
        predict(make_client(handler))


@pytest.mark.parametrize("payload", [{}, {"choices": []}, completion(""), completion(None)])
def test_malformed_or_empty_reply(payload):
    def handler(request):
        return httpx.Response(200, json=payload)

    with pytest.raises(PredictionError):
        predict(make_client(handler))
