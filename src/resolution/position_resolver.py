import asyncio
from typing import Awaitable, Callable, List

from loguru import logger

from src.catalog.leagues import resolve_league, supported_league_names
from src.models.enums import OutcomeKind
from src.models.outcome import PositionOutcome
from src.normalization.matcher import best_match
from src.normalization.normalizer import normalize_text
from src.parsing.standings_parser import extract_roster, locate_row, parse_document
from src.scrapers.base_scraper import ScraperError, ScraperTimeoutError

# Takes a standings URL and returns the page HTML, raising ScraperError on failure
FetchStandings = Callable[[str], Awaitable[str]]

TIMEOUT_MESSAGE = "Request timed out. Please try again."


def unsupported_league_message() -> str:
    return f"Unsupported league. Available leagues: {', '.join(supported_league_names())}"


class PositionResolver:
    """Turns a (league, team) pair typed by a user into a table position.

    Every failure comes back as a PositionOutcome carrying a message fit to
    show the user; nothing is raised for unknown leagues, unknown teams or
    upstream trouble.
    """

    def __init__(self, fetch: FetchStandings):
        self._fetch = fetch

    async def resolve_position(self, league_text: str, team_text: str) -> PositionOutcome:
        league = resolve_league(league_text)
        if league is None:
            logger.warning(f"Unsupported league: {league_text!r}")
            return PositionOutcome.failed(
                OutcomeKind.UNSUPPORTED_LEAGUE,
                league=league_text,
                team=team_text,
                message=unsupported_league_message(),
            )

        def failure(kind: OutcomeKind, message: str) -> PositionOutcome:
            return PositionOutcome.failed(
                kind, league=league.display_name, team=team_text, message=message
            )

        not_found = failure(
            OutcomeKind.TEAM_NOT_FOUND, f"Team not found in {league.display_name}"
        )
        if not normalize_text(team_text):
            logger.warning(f"Blank team name given for {league.display_name}")
            return not_found

        logger.info(f"Looking up '{team_text}' in {league.display_name} ({league.source_url})")
        try:
            html = await self._fetch(league.source_url)
            document = parse_document(html)
            roster = extract_roster(document)
        except ScraperTimeoutError as e:
            logger.error(f"Timed out fetching {league.display_name} standings: {e}")
            return failure(OutcomeKind.UPSTREAM_TIMEOUT, TIMEOUT_MESSAGE)
        except ScraperError as e:
            logger.error(f"Error fetching {league.display_name} standings: {e}")
            return failure(OutcomeKind.UPSTREAM_ERROR, f"Error looking up team: {e}")
        except Exception as e:
            logger.exception(f"Unexpected error reading {league.display_name} standings: {e}")
            return failure(OutcomeKind.UPSTREAM_ERROR, f"Error looking up team: {e}")

        match = best_match(team_text, roster)
        if not match.matched:
            logger.warning(
                f"Team not found: {team_text!r} among {len(roster)} {league.display_name} teams "
                f"(best score {match.score:.2f})"
            )
            return not_found

        position = locate_row(document, match.best_candidate)
        if position is None:
            logger.error(
                f"Matched '{match.best_candidate}' but found no data row for it in {league.display_name}"
            )
            return failure(
                OutcomeKind.UPSTREAM_ERROR,
                f"Error looking up team: no table row for {match.best_candidate}",
            )

        logger.info(
            f"'{team_text}' -> '{match.best_candidate}' is #{position} in {league.display_name}"
        )
        return PositionOutcome.resolved(
            league=league.display_name,
            team=team_text,
            position=position,
            matched_team=match.best_candidate,
        )

    async def resolve_positions(self, league_text: str, *team_texts: str) -> List[PositionOutcome]:
        """Resolves several teams of one league concurrently, keeping input order."""
        return list(
            await asyncio.gather(
                *(self.resolve_position(league_text, team) for team in team_texts)
            )
        )
