from typing import Any, Dict, Optional

import httpx
from loguru import logger

from src.config.settings import settings

PROMPT_TEMPLATE = """
Analyze the following football match and give a concise prediction using these key facts:

- **League**: {league}
- **Teams**: {home} (Position {home_position}) vs {away} (Position {away_position})

### Reply only with:
**Favourite**: [Team name]
**Win probability**: [Percentage]%
**BTTS probability (both teams score)**: [Percentage]%
**Over 1.5 goals probability**: [Percentage]%
**Expected corners**: [Number]
**Recommended odds**: [Decimal value]

Reply strictly in this format, with no further explanation or extended analysis.
"""


class PredictionError(Exception):
    """Raised when the completion API cannot produce a prediction."""

    pass


def build_prompt(
    league: str, home: str, home_position: int, away: str, away_position: int
) -> str:
    return PROMPT_TEMPLATE.format(
        league=league,
        home=home,
        home_position=home_position,
        away=away,
        away_position=away_position,
    )


class GroqPredictionClient:
    """Composes match predictions through an OpenAI-compatible chat-completions API."""

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        model: Optional[str] = None,
    ):
        self.api_key = api_key or settings.groq_api_key
        self.api_url = api_url or settings.groq_api_url
        self.model = model or settings.groq_model
        self.client = client or httpx.AsyncClient(timeout=httpx.Timeout(30.0))

    def _payload(self, prompt: str) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [{"role": "system", "content": prompt}],
            "temperature": settings.groq_temperature,
            "max_tokens": settings.groq_max_tokens,
        }

    async def predict(
        self, league: str, home: str, home_position: int, away: str, away_position: int
    ) -> str:
        """Returns the model's formatted prediction text."""
        if not self.api_key:
            logger.error("Groq API key is not set in environment variables.")
            raise PredictionError("Missing Groq API key configuration.")

        prompt = build_prompt(league, home, home_position, away, away_position)
        logger.debug(f"Requesting prediction from {self.model}")
        try:
            response = await self.client.post(
                self.api_url,
                json=self._payload(prompt),
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
            )
            response.raise_for_status()
            data = response.json()
            content = data["choices"][0]["message"]["content"]
        except httpx.HTTPStatusError as e:
            logger.error(f"Completion API returned {e.response.status_code}: {e.response.text[:200]}")
            raise PredictionError(f"Completion API error: {e.response.status_code}") from e
        except httpx.RequestError as e:
            logger.error(f"Completion API request failed: {e!r}")
            raise PredictionError(f"Completion API request failed: {e}") from e
        except (KeyError, IndexError, TypeError, ValueError) as e:
            logger.error(f"Unexpected completion API response shape: {e!r}")
            raise PredictionError("Malformed completion API response") from e

        if not isinstance(content, str) or not content.strip():
            raise PredictionError("Completion API returned an empty prediction")
        return content.strip()

    async def close(self):
        await self.client.aclose()
