from typing import List, Optional, Tuple

from .config import setup_logger
from .constants import COMPETITION_NAMES, DEFAULT_COMPETITION

logger = setup_logger(__name__)

COMPETITION_ALIAS_MAPPING = {
    "EPL": "PL",
    "PREMIER_LEAGUE": "PL",
    "ENGLISH_PREMIER_LEAGUE": "PL",
    "CHAMPIONSHIP": "ELC",
    "LA_LIGA": "PD",
    "LALIGA": "PD",
    "BUNDESLIGA": "BL1",
    "SERIE_A": "SA",
    "SERIEA": "SA",
    "LIGUE_1": "FL1",
    "LIGUE1": "FL1",
    "EREDIVISIE": "DED",
    "PRIMEIRA_LIGA": "PPL",
}


class ValidationWarning(str):
    """Lightweight tag for soft validation warnings."""
    pass


def validate_competition(
    code: Optional[str], default: str = DEFAULT_COMPETITION
) -> Tuple[str, List[ValidationWarning]]:
    """Return (normalized_competition_code, warnings). Falls back to ``default`` on unknown/missing."""
    if not code:
        return default, []
    c = str(code).upper().strip()
    if c in COMPETITION_NAMES:
        return c, []
    alias_match = COMPETITION_ALIAS_MAPPING.get(c.replace(" ", "_"))
    if alias_match:
        return alias_match, []
    logger.warning("competition_unknown: %s -> %s", c, default)
    return default, [ValidationWarning(f"competition_unknown:{c}")]
