"""
Immutable record types the analytics functions operate on.

The snapshot loader converts ORM rows into these frozen dataclasses, parsing
enum-like string columns into closed ``str`` enums on the way. Analysis code
only ever sees these records, never the database session.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum


class Difficulty(str, Enum):
    EASY = 'Easy'
    MEDIUM = 'Medium'
    HARD = 'Hard'


class ProblemStatus(str, Enum):
    NOT_STARTED = 'NotStarted'
    IN_PROGRESS = 'InProgress'
    SOLVED = 'Solved'
    NEEDS_REVIEW = 'NeedsReview'


class TopicStatus(str, Enum):
    NOT_STARTED = 'NotStarted'
    LEARNING = 'Learning'
    UNDERSTOOD = 'Understood'
    MASTERED = 'Mastered'


class Severity(str, Enum):
    LOW = 'Low'
    MEDIUM = 'Medium'
    HIGH = 'High'


@dataclass(frozen=True)
class ProblemRecord:
    id: int
    title: str
    category: str
    difficulty: Difficulty
    status: ProblemStatus
    minutes_spent: int = 0
    solved_optimally: bool = False
    next_review_date: date | None = None


@dataclass(frozen=True)
class TopicRecord:
    id: int
    title: str
    category: str
    status: TopicStatus
    confidence_level: int | None = None


@dataclass(frozen=True)
class InterviewRecord:
    id: int
    type: str
    date: datetime
    passed: bool = False
    overall_score: int | None = None
    communication_score: int | None = None
    problem_solving_score: int | None = None
    technical_score: int | None = None
    weaknesses: str | None = None


@dataclass(frozen=True)
class WeakAreaRecord:
    id: int
    area: str
    category: str
    severity: Severity
    is_resolved: bool
    identified_at: datetime
    resolved_at: datetime | None = None


@dataclass(frozen=True)
class StudySessionRecord:
    id: int
    type: str
    duration_minutes: int
    date: datetime
    topic: str = ''
    productivity_score: int | None = None


@dataclass(frozen=True)
class TrackerSnapshot:
    """Point-in-time copy of every record collection."""

    problems: tuple[ProblemRecord, ...] = field(default_factory=tuple)
    topics: tuple[TopicRecord, ...] = field(default_factory=tuple)
    interviews: tuple[InterviewRecord, ...] = field(default_factory=tuple)
    weak_areas: tuple[WeakAreaRecord, ...] = field(default_factory=tuple)
    sessions: tuple[StudySessionRecord, ...] = field(default_factory=tuple)
