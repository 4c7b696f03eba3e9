"""Centralized configuration constants for the Cann table service."""

# football-data.org
FOOTBALL_DATA_BASE_URL = "https://api.football-data.org/v4/"
FOOTBALL_DATA_SOURCE = "football-data.org"
AUTH_HEADER = "X-Auth-Token"

# Competitions served by football-data.org's free tier
COMPETITION_NAMES = {
    "PL": "Premier League",
    "ELC": "Championship",
    "PD": "La Liga",
    "BL1": "Bundesliga",
    "SA": "Serie A",
    "FL1": "Ligue 1",
    "DED": "Eredivisie",
    "PPL": "Primeira Liga",
}
DEFAULT_COMPETITION = "PL"

# API Timeouts (seconds)
API_TIMEOUT_FOOTBALL_DATA = 15

# Upper bound on rows in one Cann table; real leagues span well under 200 points
MAX_POINTS_SPREAD = 500

# Cann table rendering
TEAM_FORMAT = "[{position}]{short_name}({played}, {goal_difference:+d})"
TEAM_SEPARATOR = " - "

# Development Server
DEV_SERVER_HOST = "0.0.0.0"  # Bind to all interfaces
DEV_SERVER_PORT = 8080

# Request headers worth logging per request (set by Cloudflare and browsers)
LOGGED_REQUEST_HEADERS = (
    "User-Agent",
    "Cf-Ipcountry",
    "Cf-Connecting-Ip",
    "Sec-Ch-Ua-Platform",
    "Sec-Ch-Ua",
)
