import json

import pytest

from cann_table.domain.standings import (
    CannRow,
    StandingEntry,
    parse_standings,
    parse_standings_json,
)
from cann_table.errors import MalformedStandingsError


def make_row(position=1, short_name="Arsenal", played=10, points=25, gd=12, team_id=57):
    return {
        "position": position,
        "team": {"id": team_id, "name": f"{short_name} FC", "shortName": short_name},
        "playedGames": played,
        "won": 8,
        "draw": 1,
        "lost": 1,
        "points": points,
        "goalDifference": gd,
    }


def make_payload(*rows):
    return {
        "competition": {"code": "PL"},
        "standings": [
            {"stage": "REGULAR_SEASON", "type": "TOTAL", "table": list(rows)},
            {"stage": "REGULAR_SEASON", "type": "HOME", "table": []},
        ],
    }


def test_parse_standings_maps_fields():
    payload = make_payload(make_row(), make_row(2, "Liverpool", 10, 25, 8, 64))

    entries = parse_standings(payload)

    assert entries == [
        StandingEntry(position=1, short_name="Arsenal", played=10, points=25, goal_difference=12, team_id=57),
        StandingEntry(position=2, short_name="Liverpool", played=10, points=25, goal_difference=8, team_id=64),
    ]


def test_parse_standings_reads_only_first_table():
    payload = make_payload(make_row())
    payload["standings"][1]["table"] = [make_row(9, "Other")]
    assert [e.short_name for e in parse_standings(payload)] == ["Arsenal"]


def test_parse_standings_empty_table_is_empty_list():
    assert parse_standings(make_payload()) == []


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {},
        {"standings": []},
        {"standings": "nope"},
        {"standings": [{"type": "TOTAL"}]},
        {"standings": [None]},
    ],
)
def test_parse_standings_rejects_bad_envelope(payload):
    with pytest.raises(MalformedStandingsError):
        parse_standings(payload)


@pytest.mark.parametrize(
    "mutate, field",
    [
        (lambda r: r.pop("points"), "points"),
        (lambda r: r.update(points="25"), "points"),
        (lambda r: r.update(goalDifference=None), "goalDifference"),
        (lambda r: r.update(position=True), "position"),
        (lambda r: r.update(playedGames=-1), "playedGames"),
        (lambda r: r["team"].update(shortName=""), "team.shortName"),
        (lambda r: r.update(team="Arsenal"), "team"),
    ],
)
def test_parse_standings_names_bad_field(mutate, field):
    row = make_row()
    mutate(row)
    with pytest.raises(MalformedStandingsError) as excinfo:
        parse_standings(make_payload(make_row(), row))
    message = str(excinfo.value)
    assert field in message
    assert "row 1" in message


def test_parse_standings_json_roundtrip():
    text = json.dumps(make_payload(make_row()))
    assert parse_standings_json(text)[0].short_name == "Arsenal"


def test_parse_standings_json_rejects_garbage():
    with pytest.raises(MalformedStandingsError):
        parse_standings_json("<html>Bad Gateway</html>")


def test_cann_row_description_and_dict():
    row = CannRow(points=22, teams=("[3]MCI(10, +15)",))
    assert row.teams_description == " - [3]MCI(10, +15)"
    assert row.to_dict() == {
        "points": 22,
        "teams": ["[3]MCI(10, +15)"],
        "teams_description": " - [3]MCI(10, +15)",
    }
    assert CannRow(points=21).teams_description == ""
