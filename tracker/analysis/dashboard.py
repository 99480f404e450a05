"""Top-level dashboard rollup across every record kind."""
from __future__ import annotations

from typing import Sequence

from .metrics import mean, non_negative, percent, whole_hours, clamp_score
from .records import (
    InterviewRecord,
    ProblemRecord,
    ProblemStatus,
    StudySessionRecord,
    TopicRecord,
    TopicStatus,
    WeakAreaRecord,
)
from .results import DashboardStats


def build_dashboard_stats(
    problems: Sequence[ProblemRecord] = (),
    topics: Sequence[TopicRecord] = (),
    interviews: Sequence[InterviewRecord] = (),
    weak_areas: Sequence[WeakAreaRecord] = (),
    sessions: Sequence[StudySessionRecord] = (),
) -> DashboardStats:
    """Summarise all collections into a single :class:`DashboardStats`.

    Study hours are floored to whole hours. Percentages are 0 when the
    underlying collection is empty.
    """
    solved = sum(1 for p in problems if p.status == ProblemStatus.SOLVED)
    mastered = sum(1 for t in topics if t.status == TopicStatus.MASTERED)
    passed = sum(1 for i in interviews if i.passed)
    active = sum(1 for w in weak_areas if not w.is_resolved)
    minutes = sum(non_negative(s.duration_minutes) for s in sessions)

    return DashboardStats(
        total_problems=len(problems),
        solved_problems=solved,
        total_topics=len(topics),
        mastered_topics=mastered,
        total_interviews=len(interviews),
        passed_interviews=passed,
        active_weak_areas=active,
        total_study_hours=whole_hours(minutes),
        average_interview_score=mean(clamp_score(i.overall_score) for i in interviews),
        dsa_completion_rate=percent(solved, len(problems)),
        system_design_progress=percent(mastered, len(topics)),
    )
