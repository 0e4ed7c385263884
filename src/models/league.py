from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LeagueEntry(BaseModel):
    """A supported league: the names users call it by and where its table lives."""

    model_config = ConfigDict(frozen=True)

    key: str
    aliases: Tuple[str, ...] = Field(
        ..., description="Textual variants users may type, matched after normalization."
    )
    source_url: str = Field(..., description="Standings page scraped for positions.")
    display_name: str

    @field_validator("aliases")
    @classmethod
    def _require_alias(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        if not value:
            raise ValueError("a league needs at least one alias")
        return value
