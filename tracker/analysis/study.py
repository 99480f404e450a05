"""
Study-session analytics.

Hours are whole hours (minutes floored to 60). "This week" is the ISO week
containing *today* and "this month" its calendar month.
"""
from __future__ import annotations

from collections import defaultdict
from datetime import date, datetime
from typing import Sequence

from .metrics import (
    PRODUCTIVITY_RANGE,
    clamp_score,
    group_by,
    mean,
    non_negative,
    whole_hours,
)
from .records import StudySessionRecord
from .results import DailyStudy, StudyAnalytics


def _session_day(session: StudySessionRecord) -> date:
    moment = session.date
    return moment.date() if isinstance(moment, datetime) else moment


def _same_iso_week(day: date, today: date) -> bool:
    return day.isocalendar()[:2] == today.isocalendar()[:2]


def _same_month(day: date, today: date) -> bool:
    return (day.year, day.month) == (today.year, today.month)


def daily_study_data(sessions: Sequence[StudySessionRecord]) -> list[DailyStudy]:
    """One row per study day with total minutes and the dominant type.

    The dominant type is the one with most minutes that day; on a tie the
    type seen first wins.
    """
    rows = []
    for day_key, members in group_by(sessions, lambda s: _session_day(s).isoformat()).items():
        per_type = defaultdict(int)
        for s in members:
            per_type[s.type] += non_negative(s.duration_minutes)
        dominant = max(per_type.items(), key=lambda kv: kv[1])[0]
        rows.append(DailyStudy(
            date=_session_day(members[0]),
            minutes=sum(per_type.values()),
            type=dominant,
        ))
    rows.sort(key=lambda row: row.date)
    return rows


def build_study_analytics(sessions: Sequence[StudySessionRecord], today: date) -> StudyAnalytics:
    week_minutes = 0
    month_minutes = 0
    for s in sessions:
        day = _session_day(s)
        minutes = non_negative(s.duration_minutes)
        if _same_iso_week(day, today):
            week_minutes += minutes
        if _same_month(day, today):
            month_minutes += minutes

    return StudyAnalytics(
        total_hours_this_week=whole_hours(week_minutes),
        total_hours_this_month=whole_hours(month_minutes),
        hours_by_type={
            type_: whole_hours(sum(non_negative(s.duration_minutes) for s in members))
            for type_, members in group_by(sessions, lambda s: s.type).items()
        },
        daily_study_data=daily_study_data(sessions),
        average_productivity=mean(
            clamp_score(s.productivity_score, PRODUCTIVITY_RANGE) for s in sessions
        ),
    )
