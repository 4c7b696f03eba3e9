"""Standings entities and the football-data.org payload boundary."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from ..constants import TEAM_SEPARATOR
from ..errors import MalformedStandingsError


@dataclass(frozen=True)
class StandingEntry:
    """One team's line in the provider's standings table."""

    position: int
    short_name: str
    played: int
    points: int
    goal_difference: int
    team_id: int | None = None


@dataclass(frozen=True)
class CannRow:
    """A single point value of the Cann table and the teams sitting on it."""

    points: int
    teams: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def teams_description(self) -> str:
        return "".join(f"{TEAM_SEPARATOR}{team}" for team in self.teams)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "points": self.points,
            "teams": list(self.teams),
            "teams_description": self.teams_description,
        }


def _require_int(row: Dict[str, Any], key: str, index: int) -> int:
    value = row.get(key)
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedStandingsError(
            f"standings row {index}: '{key}' must be an integer, got {value!r}"
        )
    return value


def _parse_entry(row: Any, index: int) -> StandingEntry:
    if not isinstance(row, dict):
        raise MalformedStandingsError(f"standings row {index}: expected an object, got {type(row).__name__}")

    team = row.get("team")
    if not isinstance(team, dict):
        raise MalformedStandingsError(f"standings row {index}: 'team' must be an object")

    short_name = team.get("shortName")
    if not isinstance(short_name, str) or not short_name.strip():
        raise MalformedStandingsError(f"standings row {index}: 'team.shortName' must be a non-empty string")

    played = _require_int(row, "playedGames", index)
    if played < 0:
        raise MalformedStandingsError(f"standings row {index}: 'playedGames' must not be negative")

    return StandingEntry(
        position=_require_int(row, "position", index),
        short_name=short_name.strip(),
        played=played,
        points=_require_int(row, "points", index),
        goal_difference=_require_int(row, "goalDifference", index),
        team_id=_require_int(team, "id", index),
    )


def parse_standings(payload: Any) -> List[StandingEntry]:
    """
    Map a decoded ``competitions/<code>/standings`` response to entries.

    Only the first element of ``standings`` is read; for league competitions
    that is the TOTAL table, already sorted by descending points.

    Raises:
        MalformedStandingsError: when the payload does not match the schema.
    """
    if not isinstance(payload, dict):
        raise MalformedStandingsError("standings payload must be a JSON object")

    standings = payload.get("standings")
    if not isinstance(standings, list) or not standings:
        raise MalformedStandingsError("standings payload has no 'standings' list")

    first = standings[0]
    table = first.get("table") if isinstance(first, dict) else None
    if not isinstance(table, list):
        raise MalformedStandingsError("first standings element has no 'table' list")

    return [_parse_entry(row, index) for index, row in enumerate(table)]


def parse_standings_json(text: str | bytes) -> List[StandingEntry]:
    """Decode a raw response body and parse it with :func:`parse_standings`."""
    try:
        payload = json.loads(text)
    except (TypeError, ValueError) as exc:
        raise MalformedStandingsError(f"error unmarshalling standings json: {exc}") from exc
    return parse_standings(payload)
