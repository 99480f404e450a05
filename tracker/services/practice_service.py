"""Problem attempts and spaced-repetition review scheduling."""
from __future__ import annotations

import logging
from datetime import datetime, timedelta

from flask import current_app

from tracker.extensions import db
from tracker.models import DSAProblem

logger = logging.getLogger(__name__)

DEFAULT_REVIEW_INTERVALS = (1, 3, 7, 14, 30)


def next_review_date(attempt_count, solved_optimally, now=None, intervals=DEFAULT_REVIEW_INTERVALS):
    """Date of the next review for a problem after *attempt_count* attempts.

    The interval grows with each attempt and stays at the last step once the
    list is exhausted. A non-optimal solution is reviewed after half the
    interval (at least one day).
    """
    now = now or datetime.utcnow()
    index = max(0, min(attempt_count - 1, len(intervals) - 1))
    days = intervals[index]
    if not solved_optimally:
        days = max(1, days // 2)
    return (now + timedelta(days=days)).date()


class PracticeService:
    @staticmethod
    def record_attempt(problem: DSAProblem, minutes, solved_optimally, status, notes=None):
        """Record another attempt at *problem* and schedule its next review."""
        now = datetime.utcnow()
        intervals = current_app.config.get('REVIEW_INTERVALS') or DEFAULT_REVIEW_INTERVALS

        problem.attempt_count = (problem.attempt_count or 0) + 1
        problem.last_attempted_at = now
        problem.time_taken_minutes = minutes
        problem.solved_optimally = solved_optimally
        problem.status = status
        if notes:
            problem.notes = notes
        problem.next_review_date = next_review_date(
            problem.attempt_count, solved_optimally, now=now, intervals=intervals,
        )
        db.session.commit()

        logger.info(
            f'Recorded attempt #{problem.attempt_count} on problem {problem.id} '
            f'(status={status}, next review {problem.next_review_date})'
        )
        return problem
