from flask import Flask, render_template, request
from datetime import datetime, timezone
from typing import List

from .config import SERVER_HOST, SERVER_PORT, setup_logger
from .app_utils import make_ok, make_error
from .cann import generate_cann
from .constants import COMPETITION_NAMES, LOGGED_REQUEST_HEADERS
from .domain.standings import CannRow
from .errors import APIError, CannTableError
from .football_data_api import get_standings
from . import settings
from .validators import validate_competition

app = Flask(__name__)
app.config['TEMPLATES_AUTO_RELOAD'] = True

logger = setup_logger(__name__)


def _build_cann_rows(competition: str) -> List[CannRow]:
    """Fetch the competition standings and bucket them into Cann table rows."""
    return generate_cann(get_standings(competition))


def _requested_competition() -> str:
    competition, _warnings = validate_competition(
        request.args.get("competition"), default=settings.CANN_COMPETITION
    )
    return competition


@app.before_request
def _log_request() -> None:
    if request.path == "/favicon.ico":
        return

    logger.info("============ route = [%s] ============", request.full_path.rstrip("?"))
    for header in LOGGED_REQUEST_HEADERS:
        logger.info("%s: %s", header, request.headers.get(header))


@app.route("/")
def index():
    """Render the landing page"""
    return render_template("index.html", competitions=COMPETITION_NAMES)


@app.route("/health", methods=["GET"])
def health():
    return make_ok(
        {"ok": True, "ts": datetime.now(timezone.utc).isoformat()},
        "OK",
        status_code=200,
    )


@app.route("/cann", methods=["GET"])
def cann():
    """Fetch the standard table standings and render the Cann table"""
    competition = _requested_competition()
    try:
        rows = _build_cann_rows(competition)
    except (APIError, CannTableError) as exc:
        error_msg = f"Unable to read current league standings {exc}"
        logger.error("*********** FATAL ERROR *********** [%s]", error_msg)
        return error_msg, 500, {"Content-Type": "text/plain; charset=utf-8"}

    return render_template(
        "cann.html",
        rows=rows,
        competition=competition,
        competition_name=COMPETITION_NAMES.get(competition, competition),
    )


@app.route("/api/cann", methods=["GET"])
def cann_api():
    """Cann table rows as JSON"""
    competition = _requested_competition()
    try:
        rows = _build_cann_rows(competition)
    except APIError as exc:
        logger.error("cann_api: upstream failure for %s: %s", competition, exc)
        return make_error(exc, "Unable to read current league standings", status_code=502)
    except CannTableError as exc:
        logger.error("cann_api: standings unusable for %s: %s", competition, exc)
        return make_error(exc, "Unable to read current league standings", status_code=500)

    return make_ok(
        {
            "competition": competition,
            "rows": [row.to_dict() for row in rows],
        }
    )


def main() -> None:
    """Run the development server."""
    logger.info("Listening on port %d", SERVER_PORT)
    app.run(host=SERVER_HOST, port=SERVER_PORT)


if __name__ == "__main__":
    main()
