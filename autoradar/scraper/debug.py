import logging
import re
import unicodedata
from pathlib import Path

from autoradar.config import DEBUG_HTML_DIR


logger = logging.getLogger(__name__)

_SLUG_RE = re.compile(r"[^a-z0-9]+")


def _slug(value: str) -> str:
    ascii_value = unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode("ascii")
    return _SLUG_RE.sub("_", ascii_value.lower()).strip("_") or "source"


def save_debug_html(source: str, html: str, status_code: int, *, directory: str | None = None) -> Path | None:
    directory = directory or DEBUG_HTML_DIR
    if not directory:
        return None

    path = Path(directory) / f"debug_{_slug(source)}_{status_code}.html"
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(html, encoding="utf-8")
    except OSError as exc:
        logger.warning("Failed to save debug html to %s: %s", path, exc)
        return None

    logger.debug("Saved raw html dump to %s", path)
    return path
