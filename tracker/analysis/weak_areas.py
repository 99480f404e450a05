"""
Weak-area analytics.

Summarises unresolved weak areas, counts what was resolved in the current
calendar month and suggests which categories to focus on next. All date
arithmetic uses naive UTC datetimes.
"""
from __future__ import annotations

import logging
from collections import Counter
from datetime import datetime
from typing import Sequence

from .metrics import count_by, group_by
from .records import ProblemRecord, ProblemStatus, Severity, WeakAreaRecord
from .results import WeakAreaAnalytics, WeakAreaSummary

logger = logging.getLogger(__name__)

# DSA categories solved below this ratio are suggested as focus areas.
WEAK_CATEGORY_RATIO = 0.5
MAX_WEAK_CATEGORIES = 3


def days_between(start: datetime, end: datetime) -> int:
    """Whole days from *start* to *end*, never negative."""
    return max(0, (end - start).days)


def recommended_focus_areas(active: Sequence[WeakAreaRecord]) -> list[str]:
    """Categories of active High-severity weak areas, most frequent first."""
    counts = Counter(w.category for w in active if w.severity == Severity.HIGH)
    # sorted() is stable, so equal counts keep first-seen order
    return [category for category, _ in sorted(counts.items(), key=lambda kv: -kv[1])]


def weak_problem_categories(problems: Sequence[ProblemRecord]) -> list[str]:
    """First few problem categories where under half the problems are solved."""
    weak = []
    for category, members in group_by(problems, lambda p: p.category).items():
        solved = sum(1 for p in members if p.status == ProblemStatus.SOLVED)
        if solved / len(members) < WEAK_CATEGORY_RATIO:
            weak.append(category)
        if len(weak) == MAX_WEAK_CATEGORIES:
            break
    return weak


def _in_month(moment: datetime | None, now: datetime) -> bool:
    return moment is not None and (moment.year, moment.month) == (now.year, now.month)


def build_weak_area_analytics(
    weak_areas: Sequence[WeakAreaRecord],
    now: datetime,
    problems: Sequence[ProblemRecord] = (),
) -> WeakAreaAnalytics:
    active = [w for w in weak_areas if not w.is_resolved]
    resolved_this_month = sum(
        1 for w in weak_areas if w.is_resolved and _in_month(w.resolved_at, now)
    )
    logger.debug(
        f'Weak areas: {len(active)} active of {len(weak_areas)}, '
        f'{resolved_this_month} resolved this month'
    )

    return WeakAreaAnalytics(
        active_weak_areas=[
            WeakAreaSummary(
                area=w.area,
                category=w.category,
                severity=w.severity.value,
                days_identified=days_between(w.identified_at, now),
            )
            for w in active
        ],
        weak_areas_by_category=count_by(active, lambda w: w.category),
        resolved_this_month=resolved_this_month,
        recommended_focus_areas=recommended_focus_areas(active),
        weak_problem_categories=weak_problem_categories(problems),
    )
