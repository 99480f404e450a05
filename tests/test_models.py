"""Tests for the database models: defaults, constraints, and computed properties."""

from datetime import datetime

import pytest
from sqlalchemy.exc import IntegrityError

from tracker.extensions import db
from tracker.models import (
    DSAProblem,
    MockInterview,
    StudySession,
    SystemDesignTopic,
    WeakArea,
)


# ──────────────────────────────────────────────
# DSAProblem model
# ──────────────────────────────────────────────

class TestDSAProblem:
    def test_defaults(self, app, db):
        problem = DSAProblem(title='Two Sum', difficulty='Easy')
        db.session.add(problem)
        db.session.commit()

        assert problem.status == 'NotStarted'
        assert problem.attempt_count == 1
        assert problem.is_favorite is False
        assert problem.created_at is not None
        assert problem.next_review_date is None

    def test_title_required(self, app, db):
        db.session.add(DSAProblem(difficulty='Easy'))
        with pytest.raises(IntegrityError):
            db.session.commit()

    def test_tags_roundtrip(self, app, db):
        problem = DSAProblem(title='LRU Cache', difficulty='Medium')
        problem.tags = ['design', 'hash-map']
        db.session.add(problem)
        db.session.commit()

        loaded = db.session.get(DSAProblem, problem.id)
        assert loaded.tags == ['design', 'hash-map']

    def test_tags_empty_and_malformed(self, app, db):
        problem = DSAProblem(title='X', difficulty='Easy')
        assert problem.tags == []
        problem.tags = []
        assert problem.tags_json is None
        problem.tags_json = '{broken'
        assert problem.tags == []

    def test_repr(self, app, db):
        problem = DSAProblem(title='Two Sum', difficulty='Easy', status='Solved')
        db.session.add(problem)
        db.session.commit()
        assert repr(problem) == f"<DSAProblem {problem.id} 'Two Sum' status=Solved>"


# ──────────────────────────────────────────────
# SystemDesignTopic model
# ──────────────────────────────────────────────

class TestSystemDesignTopic:
    def test_defaults(self, app, db):
        topic = SystemDesignTopic(title='Load Balancing', category='Networking')
        db.session.add(topic)
        db.session.commit()

        assert topic.status == 'NotStarted'
        assert topic.confidence_level == 1
        assert topic.tags == []
        assert topic.last_reviewed_at is None


# ──────────────────────────────────────────────
# MockInterview model
# ──────────────────────────────────────────────

class TestMockInterview:
    def test_create(self, app, db):
        interview = MockInterview(
            type='Behavioral', interview_date=datetime(2024, 5, 1),
            overall_score=7, communication_score=8,
            problem_solving_score=6, technical_score=7,
        )
        db.session.add(interview)
        db.session.commit()

        assert interview.passed is False
        assert interview.company == ''
        assert 'passed=False' in repr(interview)


# ──────────────────────────────────────────────
# WeakArea model
# ──────────────────────────────────────────────

class TestWeakArea:
    def test_defaults(self, app, db):
        weak_area = WeakArea(area='Dynamic Programming', category='DSA')
        db.session.add(weak_area)
        db.session.commit()

        assert weak_area.severity == 'Medium'
        assert weak_area.is_resolved is False
        assert weak_area.identified_at is not None
        assert weak_area.resolved_at is None

    def test_resolve(self, app, db):
        weak_area = WeakArea(area='Graphs', category='DSA', severity='High')
        when = datetime(2024, 5, 20, 9, 30)
        weak_area.resolve(when)

        assert weak_area.is_resolved is True
        assert weak_area.resolved_at == when

    def test_resolve_defaults_to_now(self, app, db):
        weak_area = WeakArea(area='Graphs', category='DSA')
        before = datetime.utcnow()
        weak_area.resolve()
        assert weak_area.resolved_at >= before


# ──────────────────────────────────────────────
# StudySession model
# ──────────────────────────────────────────────

class TestStudySession:
    def test_defaults(self, app, db):
        session = StudySession(type='DSA', duration_minutes=45)
        db.session.add(session)
        db.session.commit()

        assert session.productivity_score == 3
        assert session.topic == ''
        assert session.session_date is not None
        assert repr(session) == f"<StudySession {session.id} type='DSA' minutes=45>"
