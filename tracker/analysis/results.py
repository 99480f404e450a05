"""Output types returned by the analytics builders."""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import date, datetime
from enum import Enum


def _jsonable(value):
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, dict):
        return {_jsonable(k): _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    if hasattr(value, 'to_dict'):
        return value.to_dict()
    return value


class _Result:
    def to_dict(self) -> dict:
        """Plain dict with dates as ISO strings and enums as their values."""
        return {f.name: _jsonable(getattr(self, f.name)) for f in fields(self)}


@dataclass(frozen=True)
class DashboardStats(_Result):
    total_problems: int = 0
    solved_problems: int = 0
    total_topics: int = 0
    mastered_topics: int = 0
    total_interviews: int = 0
    passed_interviews: int = 0
    active_weak_areas: int = 0
    total_study_hours: int = 0
    average_interview_score: float = 0.0
    dsa_completion_rate: float = 0.0
    system_design_progress: float = 0.0


@dataclass(frozen=True)
class CategoryPerformance(_Result):
    category: str
    total_problems: int
    solved: int
    success_rate: float
    average_time: float
    strength_level: str


@dataclass(frozen=True)
class ReviewItem(_Result):
    id: int
    title: str
    category: str
    next_review_date: date | None


@dataclass(frozen=True)
class DSAAnalytics(_Result):
    problems_by_category: dict = field(default_factory=dict)
    problems_by_difficulty: dict = field(default_factory=dict)
    problems_by_status: dict = field(default_factory=dict)
    category_performance: list = field(default_factory=list)
    needs_review: list = field(default_factory=list)
    average_time_per_problem: float = 0.0
    optimal_solution_rate: float = 0.0


@dataclass(frozen=True)
class TopicProgress(_Result):
    category: str
    total: int
    mastered: int
    progress: float


@dataclass(frozen=True)
class SystemDesignAnalytics(_Result):
    topics_by_category: dict = field(default_factory=dict)
    topics_by_status: dict = field(default_factory=dict)
    topic_progress: list = field(default_factory=list)
    average_confidence: float = 0.0


@dataclass(frozen=True)
class ScoreTrend(_Result):
    date: datetime
    score: float
    type: str


@dataclass(frozen=True)
class InterviewAnalytics(_Result):
    average_scores_by_type: dict = field(default_factory=dict)
    score_trends: list = field(default_factory=list)
    overall_pass_rate: float = 0.0
    average_communication_score: float = 0.0
    average_problem_solving_score: float = 0.0
    average_technical_score: float = 0.0
    common_weaknesses: list = field(default_factory=list)
    score_weaknesses: list = field(default_factory=list)


@dataclass(frozen=True)
class WeakAreaSummary(_Result):
    area: str
    category: str
    severity: str
    days_identified: int


@dataclass(frozen=True)
class WeakAreaAnalytics(_Result):
    active_weak_areas: list = field(default_factory=list)
    weak_areas_by_category: dict = field(default_factory=dict)
    resolved_this_month: int = 0
    recommended_focus_areas: list = field(default_factory=list)
    weak_problem_categories: list = field(default_factory=list)


@dataclass(frozen=True)
class DailyStudy(_Result):
    date: date
    minutes: int
    type: str


@dataclass(frozen=True)
class StudyAnalytics(_Result):
    total_hours_this_week: int = 0
    total_hours_this_month: int = 0
    hours_by_type: dict = field(default_factory=dict)
    daily_study_data: list = field(default_factory=list)
    average_productivity: float = 0.0
