import json
from datetime import datetime

from tracker.extensions import db


class SystemDesignTopic(db.Model):
    """A system-design topic with a self-assessed confidence level."""

    __tablename__ = 'system_design_topic'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    category = db.Column(db.String(100), nullable=False, default='', index=True)
    difficulty = db.Column(db.String(20), nullable=False, default='')
    status = db.Column(
        db.String(20), nullable=False, default='NotStarted'
    )  # NotStarted | Learning | Understood | Mastered
    confidence_level = db.Column(db.Integer, nullable=False, default=1)  # 1-5
    notes = db.Column(db.Text, nullable=True)
    key_concepts = db.Column(db.Text, nullable=True)
    resources = db.Column(db.Text, nullable=True)
    tags_json = db.Column(db.Text, nullable=True)
    is_favorite = db.Column(db.Boolean, nullable=False, default=False)
    last_reviewed_at = db.Column(db.DateTime, nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    @property
    def tags(self):
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
        return f'<SystemDesignTopic {self.id} {self.title!r} status={self.status}>'
