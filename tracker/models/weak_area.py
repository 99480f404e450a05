from datetime import datetime

from tracker.extensions import db


class WeakArea(db.Model):
    """A skill gap the user is working on."""

    __tablename__ = 'weak_area'

    id = db.Column(db.Integer, primary_key=True)
    area = db.Column(db.String(200), nullable=False)
    category = db.Column(db.String(100), nullable=False, default='', index=True)
    severity = db.Column(db.String(10), nullable=False, default='Medium')  # Low | Medium | High
    description = db.Column(db.Text, nullable=True)
    improvement_plan = db.Column(db.Text, nullable=True)
    is_resolved = db.Column(db.Boolean, nullable=False, default=False, index=True)
    identified_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    resolved_at = db.Column(db.DateTime, nullable=True)

    def resolve(self, when=None):
        """Mark as resolved. Caller must commit the session."""
        self.is_resolved = True
        self.resolved_at = when or datetime.utcnow()

    def __repr__(self) -> str:
        return (
            f'<WeakArea {self.id} {self.area!r} severity={self.severity} '
            f'resolved={self.is_resolved}>'
        )
