from enum import Enum


class OutcomeKind(str, Enum):
    RESOLVED = "RESOLVED"
    UNSUPPORTED_LEAGUE = "UNSUPPORTED_LEAGUE"
    TEAM_NOT_FOUND = "TEAM_NOT_FOUND"
    UPSTREAM_TIMEOUT = "UPSTREAM_TIMEOUT"  # Standings page exceeded its time budget
    UPSTREAM_ERROR = "UPSTREAM_ERROR"  # Any other fetch/parse failure
