"""
football-data.org client
Fetches the current standings table for a competition (v4 API, X-Auth-Token auth)
"""

import re
from typing import Dict, List, Optional

import requests

from . import settings
from .config import API_TIMEOUT, setup_logger
from .constants import AUTH_HEADER, FOOTBALL_DATA_SOURCE
from .domain.standings import StandingEntry, parse_standings_json
from .errors import APIError

logger = setup_logger(__name__)

# One session per process so connections to football-data.org are reused
_SESSION = requests.Session()
_SESSION.headers.update({"Accept": "application/json"})


def sanitize_error_message(message):
    """
    Remove API tokens from error messages to prevent security leaks.
    Handles patterns: X-Auth-Token: XXX, token=XXX
    """
    if not message:
        return message

    sanitized = re.sub(r'X-Auth-Token[\'"]?[:\s]+[\'"]?[A-Za-z0-9._-]+', 'X-Auth-Token: ***', str(message))
    return re.sub(r'token=[A-Za-z0-9._-]+', 'token=***', sanitized)


def _auth_headers() -> Dict[str, str]:
    token = settings.get_api_token()
    if not token:
        raise APIError(
            FOOTBALL_DATA_SOURCE,
            "MISSING_TOKEN",
            "environment variable -API_TOKEN- can not be read",
        )
    return {AUTH_HEADER: token}


def fetch_standings_payload(competition: str) -> bytes:
    """
    Fetch the raw standings response body for a competition code (e.g. 'PL').

    The body is returned undecoded; decoding belongs to the standings parser.

    Raises:
        APIError: on missing credentials, transport failures or non-200 statuses.
    """
    url = f"{settings.FOOTBALL_DATA_BASE}competitions/{competition}/standings"
    headers = _auth_headers()

    logger.info("📊 Fetching %s standings from football-data.org", competition)
    try:
        response = _SESSION.get(url, headers=headers, timeout=API_TIMEOUT)
        response.raise_for_status()
    except requests.Timeout as exc:
        logger.error("❌ football-data.org timed out after %ss for %s", API_TIMEOUT, competition)
        raise APIError(
            FOOTBALL_DATA_SOURCE,
            "TIMEOUT",
            "football-data.org did not respond in time.",
        ) from exc
    except requests.HTTPError as exc:
        status = getattr(getattr(exc, "response", None), "status_code", None)
        logger.error("❌ football-data.org returned HTTP %s for %s", status, competition)
        if status == 429:
            raise APIError(
                FOOTBALL_DATA_SOURCE,
                "429",
                "football-data.org rate limited the request.",
                "rate_limited",
            ) from exc
        raise APIError(
            FOOTBALL_DATA_SOURCE,
            str(status) if status else "NETWORK_ERROR",
            f"response status not OK: {status}",
            sanitize_error_message(str(exc)),
        ) from exc
    except requests.RequestException as exc:
        error_msg = sanitize_error_message(str(exc))
        logger.error("❌ football-data.org connection error for %s: %s", competition, error_msg)
        raise APIError(
            FOOTBALL_DATA_SOURCE,
            "NETWORK_ERROR",
            "A network error occurred.",
            error_msg,
        ) from exc

    return response.content


def get_standings(competition: Optional[str] = None) -> List[StandingEntry]:
    """
    Fetch and parse the standings table, sorted by descending points.

    Raises:
        APIError: the request failed.
        MalformedStandingsError: the body is not JSON or not a standings table.
    """
    code = competition or settings.CANN_COMPETITION
    entries = parse_standings_json(fetch_standings_payload(code))
    logger.info("✅ Parsed %d standings rows for %s", len(entries), code)
    return entries
