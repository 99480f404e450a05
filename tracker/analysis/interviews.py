"""
Mock-interview analytics.

Averages the four interview scores, builds a per-interview score series for
charting and collects the weaknesses noted across interviews.
"""
from __future__ import annotations

import re
from typing import Iterable, Sequence

from .metrics import clamp_score, group_by, mean, percent
from .records import InterviewRecord
from .results import InterviewAnalytics, ScoreTrend

# Sub-score averages below this are reported as score weaknesses.
WEAK_SCORE_THRESHOLD = 7

SCORE_LABELS = (
    ('communication_score', 'Communication'),
    ('problem_solving_score', 'Problem Solving'),
    ('technical_score', 'Technical Skills'),
)

_TAG_SPLIT_RE = re.compile(r'[,;\n]+')


def parse_weakness_tags(text: str | None) -> list[str]:
    """Split a free-text weaknesses field into trimmed tags.

    Tags are separated by commas, semicolons or newlines. Blank pieces are
    dropped.
    """
    if not text:
        return []
    return [tag.strip() for tag in _TAG_SPLIT_RE.split(text) if tag.strip()]


def common_weaknesses(interviews: Iterable[InterviewRecord]) -> list[str]:
    """Distinct weakness tags across interviews, compared case-insensitively.

    The first spelling seen wins and first-seen order is kept.
    """
    seen = set()
    tags = []
    for interview in interviews:
        for tag in parse_weakness_tags(interview.weaknesses):
            folded = tag.casefold()
            if folded not in seen:
                seen.add(folded)
                tags.append(tag)
    return tags


def score_weaknesses(interviews: Sequence[InterviewRecord]) -> list[str]:
    """Labels for sub-scores whose average falls below the threshold."""
    if not interviews:
        return []
    labels = []
    for attr, label in SCORE_LABELS:
        values = [clamp_score(getattr(i, attr)) for i in interviews]
        if any(v is not None for v in values) and mean(values) < WEAK_SCORE_THRESHOLD:
            labels.append(label)
    return labels


def score_trends(interviews: Iterable[InterviewRecord]) -> list[ScoreTrend]:
    ordered = sorted(interviews, key=lambda i: i.date)
    return [
        ScoreTrend(
            date=i.date,
            score=float(clamp_score(i.overall_score) or 0),
            type=i.type,
        )
        for i in ordered
    ]


def build_interview_analytics(interviews: Sequence[InterviewRecord]) -> InterviewAnalytics:
    by_type = group_by(interviews, lambda i: i.type)
    passed = sum(1 for i in interviews if i.passed)

    def average(attr):
        return mean(clamp_score(getattr(i, attr)) for i in interviews)

    return InterviewAnalytics(
        average_scores_by_type={
            type_: mean(clamp_score(i.overall_score) for i in members)
            for type_, members in by_type.items()
        },
        score_trends=score_trends(interviews),
        overall_pass_rate=percent(passed, len(interviews)),
        average_communication_score=average('communication_score'),
        average_problem_solving_score=average('problem_solving_score'),
        average_technical_score=average('technical_score'),
        common_weaknesses=common_weaknesses(interviews),
        score_weaknesses=score_weaknesses(interviews),
    )
