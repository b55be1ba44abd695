"""Calendar dates with day precision, as used for entity creation stamps."""

from __future__ import annotations

import re
from datetime import datetime, timedelta
from functools import total_ordering

_INTEGER_PATTERN = re.compile(r"\s*([+-]?\d+)")
_FORMAT = "%Y/%m/%d"


def _read_fields(text: str, count: int) -> list[int]:
    """Read whitespace-separated integers; after the first failure the rest are 0."""
    fields: list[int] = []
    pos = 0
    failed = False
    for _ in range(count):
        match = None if failed else _INTEGER_PATTERN.match(text, pos)
        if match is None:
            failed = True
            fields.append(0)
            continue
        fields.append(int(match.group(1)))
        pos = match.end()
    return fields


def _normalize(day: int, month_index: int, year: int) -> datetime:
    """Build a date the way mktime normalises out-of-range fields."""
    year += month_index // 12
    month_index %= 12
    if year < 1:
        raise ValueError(f"year {year} is out of range")
    first = datetime(year, month_index + 1, 1)
    return first + timedelta(days=day - 1)


@total_ordering
class Datetime:
    """A point in time compared and printed at day precision (YYYY/MM/DD)."""

    def __init__(self, text: str | None = None) -> None:
        if text is None or not 8 <= len(text) <= 10:
            self._moment = datetime.now()
            return
        day, month_index, year = _read_fields(text, 3)
        self._moment = _normalize(day, month_index, year)

    @property
    def moment(self) -> datetime:
        """The underlying local time."""
        return self._moment

    def __str__(self) -> str:
        return self._moment.strftime(_FORMAT)

    def __repr__(self) -> str:
        return f"Datetime({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Datetime):
            return NotImplemented
        return str(self) == str(other)

    def __lt__(self, other: Datetime) -> bool:
        return self.is_before(other)

    def __hash__(self) -> int:
        return hash(str(self))

    def is_before(self, other: Datetime) -> bool:
        """True when this date falls on an earlier day than ``other``."""
        if self == other:
            return False
        return self._moment < other._moment

    def is_after(self, other: Datetime) -> bool:
        """True when this date falls on a later day than ``other``."""
        if self == other:
            return False
        return self._moment > other._moment