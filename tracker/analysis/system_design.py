"""
System-design topic analytics.

Counts topics per category and status, measures per-category progress
(Understood or Mastered) and averages the self-assessed confidence.
"""
from __future__ import annotations

from typing import Sequence

from .metrics import CONFIDENCE_RANGE, clamp_score, count_by, group_by, mean, percent
from .records import TopicRecord, TopicStatus
from .results import SystemDesignAnalytics, TopicProgress

# Statuses that count towards a category's progress.
PROGRESS_STATUSES = (TopicStatus.UNDERSTOOD, TopicStatus.MASTERED)


def build_system_design_analytics(topics: Sequence[TopicRecord]) -> SystemDesignAnalytics:
    progress_rows = []
    for category, members in group_by(topics, lambda t: t.category).items():
        progressed = sum(1 for t in members if t.status in PROGRESS_STATUSES)
        progress_rows.append(TopicProgress(
            category=category,
            total=len(members),
            mastered=sum(1 for t in members if t.status == TopicStatus.MASTERED),
            progress=percent(progressed, len(members)),
        ))

    return SystemDesignAnalytics(
        topics_by_category=count_by(topics, lambda t: t.category),
        topics_by_status=count_by(topics, lambda t: t.status),
        topic_progress=progress_rows,
        average_confidence=mean(
            clamp_score(t.confidence_level, CONFIDENCE_RANGE) for t in topics
        ),
    )
