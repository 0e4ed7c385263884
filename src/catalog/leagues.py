"""Static registry of the leagues whose standings can be scraped.

Resolution walks the entries in registration order and returns the first
one with an alias that contains, or is contained in, the user's text. There
is no scoring here, so when aliases overlap (both Ligue 1 and Ligue 2 answer
to "liga francesa") the earlier entry wins.
"""

from typing import Dict, List, Optional

from loguru import logger

from src.models.league import LeagueEntry
from src.normalization.matcher import is_contained
from src.normalization.normalizer import normalize_text

SOCCERSTATS_LATEST_URL = "https://www.soccerstats.com/latest.asp?league={slug}"
SOCCERSTATS_LEAGUEVIEW_URL = "https://www.soccerstats.com/leagueview.asp?league={slug}"


def _entry(key: str, aliases: List[str], url: str, display_name: str) -> LeagueEntry:
    return LeagueEntry(
        key=key, aliases=tuple(aliases), source_url=url, display_name=display_name
    )


_ENTRIES = [
    _entry(
        "laliga",
        ["laliga", "liga española", "liga espanola", "primera division", "liga santander"],
        SOCCERSTATS_LATEST_URL.format(slug="spain"),
        "LaLiga",
    ),
    _entry(
        "premier",
        ["premier", "premier league", "liga inglesa", "premier liga"],
        SOCCERSTATS_LATEST_URL.format(slug="england"),
        "Premier League",
    ),
    _entry(
        "serie a",
        ["serie a", "seria a", "liga italiana", "calcio"],
        SOCCERSTATS_LATEST_URL.format(slug="italy"),
        "Serie A",
    ),
    _entry(
        "bundesliga",
        ["bundesliga", "liga alemana", "bundes"],
        SOCCERSTATS_LATEST_URL.format(slug="germany"),
        "Bundesliga",
    ),
    _entry(
        "ligue 1",
        ["ligue 1", "liga francesa", "lig 1", "ligue one"],
        SOCCERSTATS_LATEST_URL.format(slug="france"),
        "Ligue 1",
    ),
    _entry(
        "ligue 2",
        ["ligue 2", "liga francesa", "lig 2", "ligue two"],
        SOCCERSTATS_LATEST_URL.format(slug="france2"),
        "Ligue 2",
    ),
    _entry(
        "primera a",
        ["primera a", "liga colombiana", "liga betplay"],
        SOCCERSTATS_LATEST_URL.format(slug="colombia"),
        "Primera A",
    ),
    _entry(
        "liga profesional",
        ["liga profesional", "liga argentina"],
        SOCCERSTATS_LATEST_URL.format(slug="argentina"),
        "Liga Profesional",
    ),
    _entry(
        "champions",
        ["champions league", "champion leeague", "liga de campeones"],
        SOCCERSTATS_LEAGUEVIEW_URL.format(slug="cleague"),
        "Champions League",
    ),
]

LEAGUES: Dict[str, LeagueEntry] = {entry.key: entry for entry in _ENTRIES}


def supported_league_names() -> List[str]:
    """Display names of every supported league, in catalog order."""
    return [entry.display_name for entry in LEAGUES.values()]


def resolve_league(text: Optional[str]) -> Optional[LeagueEntry]:
    """Maps free text such as "Liga Española" or "premier liga" onto a league."""
    normalized = normalize_text(text)
    if not normalized:
        # An empty string is contained in every alias; never guess a league.
        return None

    for entry in LEAGUES.values():
        for alias in entry.aliases:
            if is_contained(normalize_text(alias), normalized):
                logger.debug(f"League '{text}' resolved to {entry.display_name} via '{alias}'")
                return entry

    return None
