from datetime import date, datetime

import pytest

from readinglist.utils.dates import to_iso_date


def test_accepts_dates_datetimes_and_strings():
    assert to_iso_date(date(2024, 1, 5)) == "2024-01-05"
    assert to_iso_date(datetime(2024, 1, 5, 23, 59)) == "2024-01-05"
    assert to_iso_date(" 2024-01-05 ") == "2024-01-05"


def test_none_and_default():
    assert to_iso_date(None) is None
    assert to_iso_date(None, default_today=True) == date.today().isoformat()


@pytest.mark.parametrize("value", ["", "05/01/2024", "2024-13-01"])
def test_rejects_non_iso_strings(value):
    with pytest.raises(ValueError):
        to_iso_date(value)


def test_rejects_other_types():
    with pytest.raises(TypeError):
        to_iso_date(20240105)
