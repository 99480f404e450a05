from datetime import datetime

from tracker.extensions import db


class StudySession(db.Model):
    """A block of study time."""

    __tablename__ = 'study_session'

    id = db.Column(db.Integer, primary_key=True)
    type = db.Column(db.String(50), nullable=False, default='', index=True)
    topic = db.Column(db.String(200), nullable=False, default='')
    duration_minutes = db.Column(db.Integer, nullable=False, default=0)
    productivity_score = db.Column(db.Integer, nullable=False, default=3)  # 1-5
    notes = db.Column(db.Text, nullable=True)
    session_date = db.Column(
        db.DateTime, nullable=False, default=datetime.utcnow, index=True
    )

    def __repr__(self) -> str:
        return (
            f'<StudySession {self.id} type={self.type!r} '
            f'minutes={self.duration_minutes}>'
        )
