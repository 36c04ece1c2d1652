from __future__ import annotations

from datetime import date, datetime

_DATE_FORMATS = ("%Y-%m-%d", "%Y/%m/%d")


def parse_training_date(value: str) -> date:
    """Parse a training date written as YYYY-MM-DD or YYYY/MM/DD.

    Raises ValueError when neither format matches.
    """

    text = (value or "").strip()
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise ValueError(f"Invalid training date: {value!r}")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
