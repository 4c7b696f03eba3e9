"""Developer-only Cann table probe.

Fetches the live standings for one competition from football-data.org and
prints the Cann table to stdout, one line per points value.

Usage::

    python -m scripts.cann_probe PL
"""
from __future__ import annotations

import sys

from cann_table.cann import generate_cann
from cann_table.errors import APIError, CannTableError
from cann_table.football_data_api import get_standings
from cann_table.validators import validate_competition


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    if len(argv) > 1:
        print("Usage: python -m scripts.cann_probe [<competition_code>]", file=sys.stderr)
        return 2

    competition, warnings = validate_competition(argv[0] if argv else None)
    for warning in warnings:
        print(f"warning: {warning}", file=sys.stderr)

    try:
        rows = generate_cann(get_standings(competition))
    except (APIError, CannTableError) as exc:
        print(f"Unable to read current league standings {exc}", file=sys.stderr)
        return 1

    width = max(len(str(row.points)) for row in rows)
    for row in rows:
        print(f"{row.points:>{width}}{row.teams_description}")
    return 0


if __name__ == "__main__":  # pragma: no cover - manual execution.
    sys.exit(main())
