import pytest

from autoradar.scraper.normalizer import (
    ODOMETER_UNKNOWN,
    TITLE_PLACEHOLDER,
    YEAR_UNKNOWN,
    extract_odometer,
    extract_year,
    parse_price,
    sanitize_title,
    split_year_from_query,
)


def test_parse_price_brazilian_format() -> None:
    value = parse_price("R$ 85.000,00")
    assert value is not None
    assert 85_000 <= value <= 85_999
    assert value == 85_000.0


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("R$ 98.900", 98_900.0),
        ("USD 2000", 2_000.0),
        ("1.234,56", 1_234.56),
        ("  72 500 ", 72_500.0),
    ],
)
def test_parse_price_strips_noise(raw: str, expected: float) -> None:
    assert parse_price(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "   ", "Sob consulta", "R$ ,", "1,2,3"])
def test_parse_price_returns_none_when_unparseable(raw: str | None) -> None:
    assert parse_price(raw) is None


def test_parse_price_is_never_negative() -> None:
    assert parse_price("-R$ 10.000") == 10_000.0


def test_parse_price_is_pure() -> None:
    assert parse_price("R$ 55.000") == parse_price("R$ 55.000") == 55_000.0


def test_sanitize_title_collapses_whitespace() -> None:
    assert sanitize_title("  Civic   2019  ") == "Civic 2019"
    assert sanitize_title("Honda\n\tCivic\xa0EXL") == "Honda Civic EXL"


def test_sanitize_title_placeholder_for_none() -> None:
    assert sanitize_title(None) == TITLE_PLACEHOLDER


def test_sanitize_title_is_idempotent() -> None:
    raw = "   Honda    Civic   Touring   "
    once = sanitize_title(raw)
    assert sanitize_title(once) == once


def test_extract_year_takes_first_year_token() -> None:
    assert extract_year("2018 | 50.000 km") == 2018
    assert extract_year("Ano 2019/2020") == 2019


@pytest.mark.parametrize("text", [None, "", "no digits here", "120190 km", "1850"])
def test_extract_year_falls_back_to_sentinel(text: str | None) -> None:
    assert extract_year(text) == YEAR_UNKNOWN


def test_extract_odometer_reads_number_before_marker() -> None:
    assert extract_odometer("2018 54.321 Km") == 54_321
    assert extract_odometer("41.000km") == 41_000
    assert extract_odometer("120000 KM") == 120_000


def test_extract_odometer_requires_marker() -> None:
    assert extract_odometer("54.321") == ODOMETER_UNKNOWN
    assert extract_odometer(None) == ODOMETER_UNKNOWN


def test_extract_odometer_rejects_year_like_values() -> None:
    assert extract_odometer("2019 km") == ODOMETER_UNKNOWN
    assert extract_odometer("Ano 2020 - km não informado") == ODOMETER_UNKNOWN
    assert extract_odometer("0 Km") == ODOMETER_UNKNOWN


def test_split_year_from_query() -> None:
    assert split_year_from_query("Honda Civic 2020") == ("Honda Civic", "2020")
    assert split_year_from_query("Civic") == ("Civic", None)
    assert split_year_from_query("2015 Gol  G5") == ("Gol G5", "2015")
