from typing import Dict, List

import pytest

LALIGA_TEAMS = [
    "Real Madrid",
    "Barcelona",
    "Atletico Madrid",
    "Athletic Bilbao",
    "Villarreal",
    "Real Betis",
]


def standings_table(teams: List[str], caption: str = "Standings") -> str:
    rows = "".join(
        f"<tr><td>{i}</td><td>{name}</td><td>{30 - i}</td></tr>"
        for i, name in enumerate(teams, start=1)
    )
    return (
        f"<table><tr><th>#</th><th>{caption}</th><th>Pts</th></tr>{rows}</table>"
    )


def standings_page(*tables: str) -> str:
    return "<html><body><h1>Latest standings</h1>" + "".join(tables) + "</body></html>"


class StubFetcher:
    """Serves canned HTML per URL and records every URL requested."""

    def __init__(self, pages: Dict[str, str] = None, error: Exception = None):
        self.pages = pages or {}
        self.error = error
        self.calls: List[str] = []

    async def __call__(self, url: str) -> str:
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return self.pages[url]


@pytest.fixture
def laliga_html():
    return standings_page(standings_table(LALIGA_TEAMS))


@pytest.fixture
def laliga_fetcher(laliga_html):
    return StubFetcher({"https://www.soccerstats.com/latest.asp?league=spain": laliga_html})
