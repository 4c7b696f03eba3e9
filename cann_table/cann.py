"""
Cann table generation.

A Cann table shows league positions with gaps to emphasise the points
differences between teams: one row per point value between the leader and
the bottom side, including values no team currently holds.
See https://en.wikipedia.org/wiki/Cann_table
"""
from __future__ import annotations

from typing import List, Sequence

from .constants import MAX_POINTS_SPREAD, TEAM_FORMAT
from .domain.standings import CannRow, StandingEntry
from .errors import EmptyStandingsError, UnorderedStandingsError


def format_team(entry: StandingEntry) -> str:
    """Render ``[position]name(played, +gd)`` for one team."""
    return TEAM_FORMAT.format(
        position=entry.position,
        short_name=entry.short_name,
        played=entry.played,
        goal_difference=entry.goal_difference,
    )


def generate_cann(entries: Sequence[StandingEntry]) -> List[CannRow]:
    """
    Bucket a points-ordered standings table into Cann table rows.

    The first and last entries set the point range, so ``entries`` must be
    sorted by descending points as football-data.org returns them. Rows run
    from the top points value down to the bottom one in steps of one.

    Raises:
        EmptyStandingsError: ``entries`` is empty.
        UnorderedStandingsError: a team's points lie outside the range set
            by the first and last entries, or the range is wider than
            MAX_POINTS_SPREAD.
    """
    if not entries:
        raise EmptyStandingsError("standings table contains no teams")

    max_points = entries[0].points
    min_points = entries[-1].points
    if max_points < min_points:
        raise UnorderedStandingsError(
            f"standings not sorted by points: first team has {max_points}, last team has {min_points}"
        )
    if max_points - min_points > MAX_POINTS_SPREAD:
        raise UnorderedStandingsError(
            f"points spread {min_points}-{max_points} exceeds {MAX_POINTS_SPREAD}"
        )

    buckets: List[List[str]] = [[] for _ in range(max_points - min_points + 1)]

    for entry in entries:
        index = max_points - entry.points
        if not 0 <= index < len(buckets):
            raise UnorderedStandingsError(
                f"{entry.short_name} has {entry.points} points, outside the range {min_points}-{max_points}"
            )
        buckets[index].append(format_team(entry))

    return [
        CannRow(points=max_points - offset, teams=tuple(teams))
        for offset, teams in enumerate(buckets)
    ]
