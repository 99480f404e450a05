"""
Problem (DSA) analytics.

Breaks the problem log down by category, difficulty and status, rates each
category's strength from its success rate, and lists problems due for a
spaced-repetition review.
"""
from __future__ import annotations

from datetime import date
from typing import Sequence

from .metrics import count_by, group_by, mean, non_negative, percent
from .records import ProblemRecord, ProblemStatus
from .results import CategoryPerformance, DSAAnalytics, ReviewItem

# Success-rate cut points (percent) for the strength label.
STRONG_THRESHOLD = 70
AVERAGE_THRESHOLD = 40


def strength_level(success_rate: float) -> str:
    """Classify a category success rate as Strong, Average or Weak."""
    if success_rate >= STRONG_THRESHOLD:
        return 'Strong'
    if success_rate >= AVERAGE_THRESHOLD:
        return 'Average'
    return 'Weak'


def _is_solved(problem: ProblemRecord) -> bool:
    return problem.status == ProblemStatus.SOLVED


def category_performance(problems: Sequence[ProblemRecord]) -> list[CategoryPerformance]:
    """Per-category performance rows, weakest category first.

    Ties keep the order in which categories first appear.
    """
    rows = []
    for category, members in group_by(problems, lambda p: p.category).items():
        solved = sum(1 for p in members if _is_solved(p))
        rate = percent(solved, len(members))
        # label from the unrounded rate
        exact_rate = solved / len(members) * 100
        rows.append(CategoryPerformance(
            category=category,
            total_problems=len(members),
            solved=solved,
            success_rate=rate,
            average_time=mean(non_negative(p.minutes_spent) for p in members),
            strength_level=strength_level(exact_rate),
        ))
    rows.sort(key=lambda row: row.success_rate)
    return rows


def needs_review(problems: Sequence[ProblemRecord], today: date) -> list[ReviewItem]:
    """Problems flagged NeedsReview or whose review date has arrived.

    Ordered by review date with undated entries last.
    """
    due = [
        p for p in problems
        if p.status == ProblemStatus.NEEDS_REVIEW
        or (p.next_review_date is not None and p.next_review_date <= today)
    ]
    due.sort(key=lambda p: (p.next_review_date is None, p.next_review_date or today))
    return [
        ReviewItem(
            id=p.id,
            title=p.title,
            category=p.category,
            next_review_date=p.next_review_date,
        )
        for p in due
    ]


def build_dsa_analytics(problems: Sequence[ProblemRecord], today: date) -> DSAAnalytics:
    solved = [p for p in problems if _is_solved(p)]
    optimal = sum(1 for p in solved if p.solved_optimally)

    return DSAAnalytics(
        problems_by_category=count_by(problems, lambda p: p.category),
        problems_by_difficulty=count_by(problems, lambda p: p.difficulty),
        problems_by_status=count_by(problems, lambda p: p.status),
        category_performance=category_performance(problems),
        needs_review=needs_review(problems, today),
        average_time_per_problem=mean(non_negative(p.minutes_spent) for p in solved),
        optimal_solution_rate=percent(optimal, len(solved)),
    )
