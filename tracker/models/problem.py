import json
from datetime import datetime

from tracker.extensions import db


class DSAProblem(db.Model):
    """A coding problem the user is practising."""

    __tablename__ = 'dsa_problem'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    category = db.Column(db.String(100), nullable=False, default='', index=True)
    difficulty = db.Column(db.String(20), nullable=False, default='Medium')
    platform = db.Column(db.String(50), nullable=False, default='')
    problem_url = db.Column(db.String(500), nullable=True)
    status = db.Column(
        db.String(20), nullable=False, default='NotStarted', index=True
    )  # NotStarted | InProgress | Solved | NeedsReview
    time_taken_minutes = db.Column(db.Integer, nullable=False, default=0)
    solved_optimally = db.Column(db.Boolean, nullable=False, default=False)
    notes = db.Column(db.Text, nullable=True)
    solution_approach = db.Column(db.Text, nullable=True)
    time_complexity = db.Column(db.String(50), nullable=True)
    space_complexity = db.Column(db.String(50), nullable=True)
    attempt_count = db.Column(db.Integer, nullable=False, default=1)
    tags_json = db.Column(db.Text, nullable=True)  # JSON list of strings
    is_favorite = db.Column(db.Boolean, nullable=False, default=False)
    leetcode_number = db.Column(db.Integer, nullable=True)
    next_review_date = db.Column(db.Date, nullable=True)
    last_attempted_at = db.Column(db.DateTime, nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    @property
    def tags(self):
        """Parse tags_json into a list."""
        if not self.tags_json:
            return []
        try:
            return json.loads(self.tags_json)
        except (json.JSONDecodeError, TypeError):
            return []

    @tags.setter
    def tags(self, value):
        self.tags_json = json.dumps(list(value), ensure_ascii=False) if value else None

    def __repr__(self) -> str:
        return f'<DSAProblem {self.id} {self.title!r} status={self.status}>'
