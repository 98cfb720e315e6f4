from datetime import date

import pytest

from prodash import dates


def test_parse_iso_accepts_padded_dates() -> None:
    assert dates.parse_iso("2024-02-29") == date(2024, 2, 29)


@pytest.mark.parametrize("value", ["2024-2-3", "2023-02-29", "03/01/2024", "", "2024-01-01T00:00"])
def test_parse_iso_rejects_other_formats(value) -> None:
    with pytest.raises(ValueError):
        dates.parse_iso(value)


def test_is_iso_date_handles_none() -> None:
    assert dates.is_iso_date(None) is False
    assert dates.is_iso_date("2024-01-05") is True


def test_month_key() -> None:
    assert dates.month_key(date(2024, 7, 9)) == "2024-07"


def test_today_with_unknown_timezone_falls_back() -> None:
    assert dates.today("Not/AZone") == date.today()
