import os
from dotenv import load_dotenv

from .constants import COMPETITION_NAMES, DEFAULT_COMPETITION, FOOTBALL_DATA_BASE_URL

# Load .env from repo root (dotenv auto-walks up from CWD)
load_dotenv()


def _read_secret_file(path: str | None) -> str | None:
    if not path:
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read().strip() or None
    except OSError:
        return None


def get_api_token() -> str | None:
    """Return the football-data.org token, read fresh so rotated secrets apply."""
    return (
        os.getenv("API_TOKEN")
        or os.getenv("FOOTBALL_DATA_API_KEY")
        or _read_secret_file(os.getenv("API_TOKEN_FILE"))
    )


# --- football-data.org settings ---
FOOTBALL_DATA_BASE = os.getenv("FOOTBALL_DATA_BASE", FOOTBALL_DATA_BASE_URL).rstrip("/") + "/"

_competition = os.getenv("CANN_COMPETITION", DEFAULT_COMPETITION).strip().upper()
CANN_COMPETITION = _competition if _competition in COMPETITION_NAMES else DEFAULT_COMPETITION
