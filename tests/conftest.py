"""Shared test fixtures for the interview tracker test suite."""

from datetime import date, datetime, timedelta

import pytest

from tracker import create_app
from tracker.extensions import db as _db
from tracker.models import (
    DSAProblem,
    MockInterview,
    StudySession,
    SystemDesignTopic,
    WeakArea,
)


@pytest.fixture()
def app():
    """Create a Flask application configured for testing."""
    application = create_app('testing')
    yield application


@pytest.fixture()
def db(app):
    """Provide a clean database for each test."""
    with app.app_context():
        _db.create_all()
        yield _db
        _db.session.remove()
        _db.drop_all()


@pytest.fixture()
def client(app, db):
    """Provide a Flask test client."""
    return app.test_client()


@pytest.fixture()
def sample_data(app, db):
    """Create a small set of records across every collection.

    Returns a dict of plain IDs (not model objects) so they survive
    across Flask request context boundaries without DetachedInstanceError.
    """
    now = datetime.utcnow()
    today = now.date()

    two_sum = DSAProblem(
        title='Two Sum', category='Array', difficulty='Easy',
        status='Solved', time_taken_minutes=20, solved_optimally=True,
    )
    three_sum = DSAProblem(
        title='3Sum', category='Array', difficulty='Medium',
        status='InProgress', time_taken_minutes=45,
        next_review_date=today - timedelta(days=1),
    )
    invert_tree = DSAProblem(
        title='Invert Binary Tree', category='Tree', difficulty='Easy',
        status='Solved', time_taken_minutes=10, solved_optimally=False,
    )
    _db.session.add_all([two_sum, three_sum, invert_tree])

    caching = SystemDesignTopic(
        title='Caching', category='Storage', status='Mastered', confidence_level=5,
    )
    sharding = SystemDesignTopic(
        title='Sharding', category='Storage', status='Learning', confidence_level=2,
    )
    _db.session.add_all([caching, sharding])

    passed_interview = MockInterview(
        type='DSA', company='Acme', interview_date=now - timedelta(days=10),
        overall_score=8, communication_score=8, problem_solving_score=8,
        technical_score=8, passed=True, areas_to_improve='edge cases',
    )
    failed_interview = MockInterview(
        type='DSA', company='Globex', interview_date=now - timedelta(days=3),
        overall_score=4, communication_score=6, problem_solving_score=4,
        technical_score=5, passed=False, areas_to_improve='Edge cases, pacing',
    )
    _db.session.add_all([passed_interview, failed_interview])

    graphs = WeakArea(
        area='Graphs', category='DSA', severity='High',
        identified_at=now - timedelta(days=5),
    )
    estimation = WeakArea(
        area='Estimation', category='SystemDesign', severity='Low',
        identified_at=now - timedelta(days=30),
        is_resolved=True, resolved_at=now,
    )
    _db.session.add_all([graphs, estimation])

    morning = StudySession(
        type='DSA', topic='Arrays', duration_minutes=90,
        productivity_score=4, session_date=now,
    )
    evening = StudySession(
        type='SystemDesign', topic='Caching', duration_minutes=30,
        productivity_score=2, session_date=now,
    )
    _db.session.add_all([morning, evening])
    _db.session.commit()

    return {
        'two_sum_id': two_sum.id,
        'three_sum_id': three_sum.id,
        'invert_tree_id': invert_tree.id,
        'caching_id': caching.id,
        'sharding_id': sharding.id,
        'passed_interview_id': passed_interview.id,
        'failed_interview_id': failed_interview.id,
        'graphs_id': graphs.id,
        'estimation_id': estimation.id,
        'morning_id': morning.id,
        'evening_id': evening.id,
        'today': today,
    }


@pytest.fixture()
def day():
    """A fixed Wednesday used by the pure analysis tests."""
    return date(2024, 5, 15)
