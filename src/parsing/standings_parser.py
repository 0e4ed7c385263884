"""Parsing of league standings pages into team rosters and table positions (BeautifulSoup + lxml).

The team name is read from the second cell of each row. Positions are the
row's index within its own table, the header row being index 0, so the
first data row is position 1. Numbering is not carried across tables: pages
are assumed to render the league as a single table, and on a page with
several tables the first exact hit wins with its table-local index.
"""

from __future__ import annotations

from typing import List, Optional, Union

from bs4 import BeautifulSoup, Tag

TEAM_CELL_SELECTOR = "td:nth-child(2)"

Document = Union[str, BeautifulSoup]


def parse_document(html: Document) -> BeautifulSoup:
    if isinstance(html, BeautifulSoup):
        return html
    return BeautifulSoup(html, "lxml")


def team_cell_text(row: Tag) -> str:
    """Trimmed text of the row's second-column cell(s), or '' when it has none."""
    return "".join(td.get_text() for td in row.select(TEAM_CELL_SELECTOR)).strip()


def extract_roster(html: Document) -> List[str]:
    """Distinct team names found across every table, in document order."""
    soup = parse_document(html)
    roster: dict[str, None] = {}
    for table in soup.find_all("table"):
        for row in table.find_all("tr"):
            name = team_cell_text(row)
            if name:
                roster.setdefault(name, None)
    return list(roster)


def locate_row(html: Document, team_name: str) -> Optional[int]:
    """1-based position of the first row whose team cell equals ``team_name`` exactly."""
    soup = parse_document(html)
    for table in soup.find_all("table"):
        for index, row in enumerate(table.find_all("tr")):
            if index == 0:
                continue
            if team_cell_text(row) == team_name:
                return index
    return None
