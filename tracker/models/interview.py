from datetime import datetime

from tracker.extensions import db


class MockInterview(db.Model):
    """A mock interview with 1-10 scores per dimension."""

    __tablename__ = 'mock_interview'

    id = db.Column(db.Integer, primary_key=True)
    type = db.Column(db.String(50), nullable=False, default='', index=True)  # DSA | SystemDesign | Behavioral
    company = db.Column(db.String(200), nullable=False, default='')
    interview_date = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    duration_minutes = db.Column(db.Integer, nullable=False, default=0)
    overall_score = db.Column(db.Integer, nullable=False, default=1)
    communication_score = db.Column(db.Integer, nullable=False, default=1)
    problem_solving_score = db.Column(db.Integer, nullable=False, default=1)
    technical_score = db.Column(db.Integer, nullable=False, default=1)
    feedback = db.Column(db.Text, nullable=True)
    strengths = db.Column(db.Text, nullable=True)
    areas_to_improve = db.Column(db.Text, nullable=True)  # comma/newline separated
    questions_asked = db.Column(db.Text, nullable=True)
    passed = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def __repr__(self) -> str:
        return (
            f'<MockInterview {self.id} type={self.type!r} '
            f'score={self.overall_score} passed={self.passed}>'
        )
