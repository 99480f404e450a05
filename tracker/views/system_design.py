from datetime import datetime

from flask import Blueprint, jsonify, request
from sqlalchemy import func

from tracker.analysis.records import TopicStatus
from tracker.extensions import db
from tracker.models import SystemDesignTopic
from tracker.services.validation import (
    apply_payload,
    boolean,
    choice,
    integer,
    string_list,
    text,
)
from tracker.views.crud import delete, iso, json_body, not_found, query_flag, save

system_design_bp = Blueprint('system_design', __name__, url_prefix='/api/system-design')

TOPIC_FIELDS = {
    'title': (text(200, required=True), True),
    'category': (text(100, default=''), False),
    'difficulty': (text(20, default=''), False),
    'status': (choice(TopicStatus), False),
    'confidence_level': (integer(1, 5), False),
    'notes': (text(), False),
    'key_concepts': (text(), False),
    'resources': (text(), False),
    'tags': (string_list(), False),
    'is_favorite': (boolean(), False),
}

REVIEW_FIELDS = {
    'confidence_level': (integer(1, 5), True),
    'status': (choice(TopicStatus), False),
    'notes': (text(), False),
}


def topic_to_dict(t):
    return {
        'id': t.id,
        'title': t.title,
        'category': t.category,
        'difficulty': t.difficulty,
        'status': t.status,
        'confidence_level': t.confidence_level,
        'notes': t.notes,
        'key_concepts': t.key_concepts,
        'resources': t.resources,
        'tags': t.tags,
        'is_favorite': t.is_favorite,
        'last_reviewed_at': iso(t.last_reviewed_at),
        'created_at': iso(t.created_at),
    }


def _get_topic(topic_id):
    return db.session.get(SystemDesignTopic, topic_id)


@system_design_bp.route('/')
def list_topics():
    query = SystemDesignTopic.query
    category = request.args.get('category', '')
    status = request.args.get('status', '')
    favorite = query_flag('favorite')

    if category:
        query = query.filter_by(category=category)
    if status:
        query = query.filter_by(status=status)
    if favorite is not None:
        query = query.filter_by(is_favorite=favorite)

    topics = query.order_by(
        SystemDesignTopic.is_favorite.desc(),
        func.coalesce(
            SystemDesignTopic.last_reviewed_at, SystemDesignTopic.created_at
        ).desc(),
    ).all()
    return jsonify([topic_to_dict(t) for t in topics])


@system_design_bp.route('/<int:topic_id>')
def get_topic(topic_id):
    topic = _get_topic(topic_id)
    if not topic:
        return not_found('Topic', topic_id)
    return jsonify(topic_to_dict(topic))


@system_design_bp.route('/', methods=['POST'])
def create_topic():
    topic = apply_payload(SystemDesignTopic(), json_body(), TOPIC_FIELDS)
    topic.created_at = datetime.utcnow()
    save(topic)
    return jsonify(topic_to_dict(topic)), 201


@system_design_bp.route('/<int:topic_id>', methods=['PUT'])
def update_topic(topic_id):
    topic = _get_topic(topic_id)
    if not topic:
        return not_found('Topic', topic_id)
    apply_payload(topic, json_body(), TOPIC_FIELDS, partial=True)
    topic.last_reviewed_at = datetime.utcnow()
    save(topic)
    return jsonify(topic_to_dict(topic))


@system_design_bp.route('/<int:topic_id>', methods=['DELETE'])
def delete_topic(topic_id):
    topic = _get_topic(topic_id)
    if not topic:
        return not_found('Topic', topic_id)
    return delete(topic)


@system_design_bp.route('/<int:topic_id>/review', methods=['POST'])
def record_review(topic_id):
    """Record a review session: new confidence level, status and notes."""
    topic = _get_topic(topic_id)
    if not topic:
        return not_found('Topic', topic_id)

    data = json_body()
    apply_payload(topic, data, REVIEW_FIELDS)
    if 'status' not in data:
        topic.status = TopicStatus.LEARNING.value
    topic.last_reviewed_at = datetime.utcnow()
    save(topic)
    return jsonify(topic_to_dict(topic))


@system_design_bp.route('/<int:topic_id>/favorite', methods=['POST'])
def toggle_favorite(topic_id):
    topic = _get_topic(topic_id)
    if not topic:
        return not_found('Topic', topic_id)
    topic.is_favorite = not topic.is_favorite
    save(topic)
    return jsonify(topic_to_dict(topic))


@system_design_bp.route('/categories')
def categories():
    rows = (
        db.session.query(SystemDesignTopic.category)
        .distinct()
        .order_by(SystemDesignTopic.category)
        .all()
    )
    return jsonify([r[0] for r in rows])


@system_design_bp.route('/favorites')
def favorites():
    topics = (
        SystemDesignTopic.query.filter_by(is_favorite=True)
        .order_by(SystemDesignTopic.category, SystemDesignTopic.title)
        .all()
    )
    return jsonify([topic_to_dict(t) for t in topics])
