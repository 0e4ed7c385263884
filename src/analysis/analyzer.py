from typing import Awaitable, Protocol

from loguru import logger

from src.models.outcome import MatchAnalysis, PositionOutcome
from src.prediction.groq_client import GroqPredictionClient
from src.resolution.position_resolver import PositionResolver
from src.scrapers.standings_scraper import StandingsScraper


class AnalysisError(Exception):
    """Raised when a team's position could not be resolved; carries the outcome."""

    def __init__(self, outcome: PositionOutcome):
        super().__init__(outcome.value)
        self.outcome = outcome


class Predictor(Protocol):
    def predict(
        self, league: str, home: str, home_position: int, away: str, away_position: int
    ) -> Awaitable[str]: ...


class MatchAnalyzer:
    """Resolves both teams of a fixture and asks the predictor for a verdict."""

    def __init__(self, resolver: PositionResolver, predictor: Predictor):
        self.resolver = resolver
        self.predictor = predictor

    async def analyze(self, league: str, home: str, away: str) -> MatchAnalysis:
        logger.info(f"Analyzing match: {home} vs {away} in {league}")
        home_outcome, away_outcome = await self.resolver.resolve_positions(league, home, away)

        for outcome in (home_outcome, away_outcome):
            if outcome.is_error:
                logger.warning(
                    f"Aborting analysis, {outcome.kind.value} for '{outcome.team}': {outcome.message}"
                )
                raise AnalysisError(outcome)

        prediction = await self.predictor.predict(
            league, home, home_outcome.position, away, away_outcome.position
        )
        analysis = MatchAnalysis(
            league=league, home=home_outcome, away=away_outcome, prediction=prediction
        )
        logger.success(f"Prediction ready for {analysis.description}")
        return analysis


async def analyze_match(league: str, home: str, away: str) -> MatchAnalysis:
    """One-shot analysis with live clients, closing them afterwards."""
    scraper = StandingsScraper()
    predictor = GroqPredictionClient()
    try:
        analyzer = MatchAnalyzer(PositionResolver(scraper.fetch_standings), predictor)
        return await analyzer.analyze(league, home, away)
    finally:
        await scraper.close()
        await predictor.close()
