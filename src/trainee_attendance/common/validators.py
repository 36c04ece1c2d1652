from __future__ import annotations

from typing import Optional


def exceeds_max_length(value: Optional[str], max_len: int) -> bool:
    return value is not None and len(value) > max_len


def exactly_one_present(first: object, second: object) -> bool:
    return (first is None) != (second is None)


def both_present(first: object, second: object) -> bool:
    return first is not None and second is not None
