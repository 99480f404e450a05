"""Small numeric helpers shared by the analytics builders."""
from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import Callable, Iterable, TypeVar

T = TypeVar('T')

SCORE_RANGE = (1, 10)
CONFIDENCE_RANGE = (1, 5)
PRODUCTIVITY_RANGE = (1, 5)


def clamp(value, low, high):
    """Clamp *value* into ``[low, high]``; ``None`` passes through."""
    if value is None:
        return None
    return max(low, min(high, value))


def clamp_score(value, bounds=SCORE_RANGE):
    return clamp(value, *bounds)


def non_negative(value) -> int:
    """Treat missing or negative minute counts as zero."""
    if not value or value < 0:
        return 0
    return int(value)


def mean(values: Iterable) -> float:
    """Arithmetic mean rounded to one decimal, ignoring ``None``; 0 if empty."""
    present = [v for v in values if v is not None]
    if not present:
        return 0.0
    return round(sum(present) / len(present), 1)


def percent(part: int, whole: int) -> float:
    """Percentage rounded to one decimal; 0 when *whole* is zero."""
    if whole <= 0:
        return 0.0
    return round(part / whole * 100, 1)


def whole_hours(minutes: int) -> int:
    return minutes // 60


def key_of(value) -> str:
    """Dictionary key for a grouping value (enum members use their value)."""
    if isinstance(value, Enum):
        return value.value
    return '' if value is None else str(value)


def count_by(items: Iterable[T], key: Callable[[T], object]) -> dict[str, int]:
    """Count *items* per key, keeping keys in first-seen order."""
    counter = Counter()
    for item in items:
        counter[key_of(key(item))] += 1
    return dict(counter)


def group_by(items: Iterable[T], key: Callable[[T], object]) -> dict[str, list[T]]:
    """Group *items* per key, keeping keys and members in first-seen order."""
    groups: dict[str, list[T]] = {}
    for item in items:
        groups.setdefault(key_of(key(item)), []).append(item)
    return groups
