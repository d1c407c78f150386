from datetime import date

import pytest

from services.holidays import HOLIDAYS_2025, date_key, holiday_label


def test_holiday_lookup():
    assert holiday_label(date(2025, 5, 5)) == "こどもの日"
    assert holiday_label(date(2025, 5, 6)) is None
    assert holiday_label(date(2025, 1, 1)) == "元日"


def test_date_key_is_zero_padded():
    assert date_key(date(2025, 1, 3)) == "2025-01-03"
    assert date_key(date(812, 11, 23)) == "0812-11-23"


def test_holiday_table_is_read_only():
    with pytest.raises(TypeError):
        HOLIDAYS_2025["2025-05-06"] = "振替休日"  # type: ignore[index]
