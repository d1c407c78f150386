"""Japanese national holidays shown on the lesson calendar."""

from collections.abc import Mapping
from datetime import date
from types import MappingProxyType

HolidayTable = Mapping[str, str]

HOLIDAYS_2025: HolidayTable = MappingProxyType({
    "2025-01-01": "元日",
    "2025-01-13": "成人の日",
    "2025-02-11": "建国記念の日",
    "2025-02-23": "天皇誕生日",
    "2025-03-20": "春分の日",
    "2025-04-29": "昭和の日",
    "2025-05-03": "憲法記念日",
    "2025-05-04": "みどりの日",
    "2025-05-05": "こどもの日",
    "2025-07-21": "海の日",
    "2025-08-11": "山の日",
    "2025-09-15": "敬老の日",
    "2025-09-23": "秋分の日",
    "2025-10-13": "スポーツの日",
    "2025-11-03": "文化の日",
    "2025-11-23": "勤労感謝の日",
})


def date_key(d: date) -> str:
    """Return the zero-padded YYYY-MM-DD key built from local calendar fields."""
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def holiday_label(d: date, table: HolidayTable = HOLIDAYS_2025) -> str | None:
    """Return the holiday name for a date, or None."""
    return table.get(date_key(d))
