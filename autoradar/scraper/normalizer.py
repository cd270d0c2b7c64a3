import re


TITLE_PLACEHOLDER = "Título indisponível"
YEAR_UNKNOWN = 0
ODOMETER_UNKNOWN = 0
# Anything at or below this could just as well be a model year printed next to "km".
ODOMETER_FLOOR = 2030

SPACE_RE = re.compile(r"\s+")
NON_PRICE_RE = re.compile(r"[^0-9,]")
NON_DIGIT_RE = re.compile(r"\D")
YEAR_RE = re.compile(r"(?<!\d)((?:19|20)\d{2})(?!\d)")
KM_MARKER_RE = re.compile(r"km", re.IGNORECASE)
KM_VALUE_RE = re.compile(r"(?<![\d.,])(\d{1,3}(?:[.,\s]\d{3})+|\d+)\s*km", re.IGNORECASE)


def clean_text(value: str | None) -> str:
    if value is None:
        return ""
    return SPACE_RE.sub(" ", value.replace("\xa0", " ")).strip()


def parse_price(raw: str | None) -> float | None:
    if raw is None:
        return None
    cleaned = NON_PRICE_RE.sub("", raw)
    if not cleaned:
        return None
    try:
        return float(cleaned.replace(",", "."))
    except ValueError:
        return None


def sanitize_title(raw: str | None) -> str:
    if raw is None:
        return TITLE_PLACEHOLDER
    return clean_text(raw)


def extract_year(text: str | None) -> int:
    if not text:
        return YEAR_UNKNOWN
    match = YEAR_RE.search(text)
    if match is None:
        return YEAR_UNKNOWN
    return int(match.group(1))


def extract_odometer(text: str | None) -> int:
    if not text or not KM_MARKER_RE.search(text):
        return ODOMETER_UNKNOWN

    match = KM_VALUE_RE.search(text)
    digits = NON_DIGIT_RE.sub("", match.group(1) if match else text)
    if not digits:
        return ODOMETER_UNKNOWN

    value = int(digits)
    if value <= ODOMETER_FLOOR:
        return ODOMETER_UNKNOWN
    return value


def split_year_from_query(query: str) -> tuple[str, str | None]:
    match = YEAR_RE.search(query)
    if match is None:
        return clean_text(query), None
    clean_query = query[: match.start()] + " " + query[match.end():]
    return clean_text(clean_query), match.group(1)
