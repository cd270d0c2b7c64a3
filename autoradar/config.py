import os


def _env_float(name: str, default: str) -> float:
    return float(os.getenv(name, default))


REQUEST_TIMEOUT_SECONDS = _env_float("AUTORADAR_REQUEST_TIMEOUT_SECONDS", "15")
SEARCH_DEADLINE_SECONDS = _env_float("AUTORADAR_SEARCH_DEADLINE_SECONDS", "30")

DEFAULT_QUERY = os.getenv("AUTORADAR_DEFAULT_QUERY", "Civic")
DEFAULT_LOCATION = os.getenv("AUTORADAR_DEFAULT_LOCATION", "SP")

DEBUG_HTML_DIR = os.getenv("AUTORADAR_DEBUG_HTML_DIR") or None

LOG_LEVEL = os.getenv("AUTORADAR_LOG_LEVEL", "INFO").upper()

API_HOST = os.getenv("AUTORADAR_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("AUTORADAR_API_PORT", "8000"))
