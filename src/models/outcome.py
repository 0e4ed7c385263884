from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .enums import OutcomeKind


class MatchResult(BaseModel):
    """Best fuzzy candidate for a query, or none when nothing cleared the threshold."""

    model_config = ConfigDict(frozen=True)

    best_candidate: Optional[str] = None
    score: float = Field(0.0, ge=0, le=1)

    @property
    def matched(self) -> bool:
        return self.best_candidate is not None


class PositionOutcome(BaseModel):
    """Result of looking up one team's table position.

    Either ``kind`` is RESOLVED and ``position`` holds the 1-based row, or
    ``message`` holds a user-facing description of what went wrong.
    """

    model_config = ConfigDict(frozen=True)

    kind: OutcomeKind
    league: str
    team: str
    position: Optional[int] = Field(None, gt=0)
    message: Optional[str] = None
    matched_team: Optional[str] = None  # Roster name the team text resolved to

    @classmethod
    def resolved(
        cls, league: str, team: str, position: int, matched_team: str
    ) -> "PositionOutcome":
        return cls(
            kind=OutcomeKind.RESOLVED,
            league=league,
            team=team,
            position=position,
            matched_team=matched_team,
        )

    @classmethod
    def failed(
        cls, kind: OutcomeKind, league: str, team: str, message: str
    ) -> "PositionOutcome":
        return cls(kind=kind, league=league, team=team, message=message)

    @property
    def is_error(self) -> bool:
        return self.kind != OutcomeKind.RESOLVED

    @property
    def value(self) -> Union[int, str]:
        """The position, or the failure message."""
        if self.is_error:
            return self.message or self.kind.value
        return self.position


class MatchAnalysis(BaseModel):
    """A completed prediction for one fixture."""

    league: str
    home: PositionOutcome
    away: PositionOutcome
    prediction: str
    created_at: datetime = Field(default_factory=datetime.now)

    @computed_field  # type: ignore[misc]
    @property
    def description(self) -> str:
        return (
            f"{self.league}: {self.home.team} (#{self.home.position}) vs "
            f"{self.away.team} (#{self.away.position})"
        )


class PredictionDetails(BaseModel):
    liga: str
    equipo1: str
    equipo2: str


class PredictionRecord(BaseModel):
    """History entry as kept by the browser front end in local storage."""

    fecha: str
    contenido: str
    detalles: PredictionDetails

    @classmethod
    def from_analysis(cls, analysis: MatchAnalysis) -> "PredictionRecord":
        return cls(
            fecha=analysis.created_at.strftime("%d/%m/%Y, %H:%M:%S"),
            contenido=analysis.prediction,
            detalles=PredictionDetails(
                liga=analysis.league,
                equipo1=analysis.home.team,
                equipo2=analysis.away.team,
            ),
        )
