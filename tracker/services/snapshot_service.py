"""
Read-only data access for the analytics layer.

Loads ORM rows and converts them into frozen records. Enum-like string
columns are parsed here, so a stored value outside its enum raises
``ValueError`` at this boundary instead of leaking into the aggregation code.
"""
from __future__ import annotations

import logging

from tracker.analysis.records import (
    Difficulty,
    InterviewRecord,
    ProblemRecord,
    ProblemStatus,
    Severity,
    StudySessionRecord,
    TopicRecord,
    TopicStatus,
    TrackerSnapshot,
    WeakAreaRecord,
)
from tracker.models import (
    DSAProblem,
    MockInterview,
    StudySession,
    SystemDesignTopic,
    WeakArea,
)

logger = logging.getLogger(__name__)


def problem_record(p: DSAProblem) -> ProblemRecord:
    return ProblemRecord(
        id=p.id,
        title=p.title or '',
        category=p.category or '',
        difficulty=Difficulty(p.difficulty),
        status=ProblemStatus(p.status),
        minutes_spent=p.time_taken_minutes or 0,
        solved_optimally=bool(p.solved_optimally),
        next_review_date=p.next_review_date,
    )


def topic_record(t: SystemDesignTopic) -> TopicRecord:
    return TopicRecord(
        id=t.id,
        title=t.title or '',
        category=t.category or '',
        status=TopicStatus(t.status),
        confidence_level=t.confidence_level,
    )


def interview_record(i: MockInterview) -> InterviewRecord:
    return InterviewRecord(
        id=i.id,
        type=i.type or '',
        date=i.interview_date,
        passed=bool(i.passed),
        overall_score=i.overall_score,
        communication_score=i.communication_score,
        problem_solving_score=i.problem_solving_score,
        technical_score=i.technical_score,
        weaknesses=i.areas_to_improve,
    )


def weak_area_record(w: WeakArea) -> WeakAreaRecord:
    return WeakAreaRecord(
        id=w.id,
        area=w.area or '',
        category=w.category or '',
        severity=Severity(w.severity),
        is_resolved=bool(w.is_resolved),
        identified_at=w.identified_at,
        resolved_at=w.resolved_at,
    )


def study_session_record(s: StudySession) -> StudySessionRecord:
    return StudySessionRecord(
        id=s.id,
        type=s.type or '',
        topic=s.topic or '',
        duration_minutes=s.duration_minutes or 0,
        productivity_score=s.productivity_score,
        date=s.session_date,
    )


class SnapshotService:
    """Builds immutable snapshots of the stored records."""

    @staticmethod
    def problems() -> tuple[ProblemRecord, ...]:
        return tuple(problem_record(p) for p in DSAProblem.query.order_by(DSAProblem.id).all())

    @staticmethod
    def topics() -> tuple[TopicRecord, ...]:
        rows = SystemDesignTopic.query.order_by(SystemDesignTopic.id).all()
        return tuple(topic_record(t) for t in rows)

    @staticmethod
    def interviews() -> tuple[InterviewRecord, ...]:
        rows = MockInterview.query.order_by(
            MockInterview.interview_date, MockInterview.id
        ).all()
        return tuple(interview_record(i) for i in rows)

    @staticmethod
    def weak_areas() -> tuple[WeakAreaRecord, ...]:
        return tuple(weak_area_record(w) for w in WeakArea.query.order_by(WeakArea.id).all())

    @staticmethod
    def sessions() -> tuple[StudySessionRecord, ...]:
        rows = StudySession.query.order_by(StudySession.session_date, StudySession.id).all()
        return tuple(study_session_record(s) for s in rows)

    @classmethod
    def load(cls) -> TrackerSnapshot:
        """Snapshot of every collection."""
        snapshot = TrackerSnapshot(
            problems=cls.problems(),
            topics=cls.topics(),
            interviews=cls.interviews(),
            weak_areas=cls.weak_areas(),
            sessions=cls.sessions(),
        )
        logger.debug(
            f'Loaded snapshot: {len(snapshot.problems)} problems, '
            f'{len(snapshot.topics)} topics, {len(snapshot.interviews)} interviews, '
            f'{len(snapshot.weak_areas)} weak areas, {len(snapshot.sessions)} sessions'
        )
        return snapshot
