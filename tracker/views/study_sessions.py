from datetime import datetime

from flask import Blueprint, jsonify, request

from tracker.extensions import db
from tracker.models import StudySession
from tracker.services.validation import (
    ValidationError,
    apply_payload,
    integer,
    iso_datetime,
    text,
)
from tracker.views.crud import delete, iso, json_body, not_found, save

study_sessions_bp = Blueprint(
    'study_sessions', __name__, url_prefix='/api/study-sessions'
)

SESSION_FIELDS = {
    'type': (text(50, required=True), True),
    'topic': (text(200, default=''), False),
    'duration_minutes': (integer(low=0), True),
    'productivity_score': (integer(1, 5), False),
    'notes': (text(), False),
    'session_date': (iso_datetime(), False),
}

# an existing session keeps a date, so null is rejected on update
SESSION_UPDATE_FIELDS = {
    **SESSION_FIELDS,
    'session_date': (iso_datetime(required=True), False),
}

_parse_bound = iso_datetime()


def session_to_dict(s):
    return {
        'id': s.id,
        'type': s.type,
        'topic': s.topic,
        'duration_minutes': s.duration_minutes,
        'productivity_score': s.productivity_score,
        'notes': s.notes,
        'session_date': iso(s.session_date),
    }


@study_sessions_bp.route('/')
def list_sessions():
    query = StudySession.query
    type_ = request.args.get('type', '')
    try:
        start = _parse_bound('from', request.args.get('from'))
        end = _parse_bound('to', request.args.get('to'))
    except ValidationError as e:
        return jsonify({'error': str(e)}), 400

    if type_:
        query = query.filter_by(type=type_)
    if start:
        query = query.filter(StudySession.session_date >= start)
    if end:
        query = query.filter(StudySession.session_date <= end)

    sessions = query.order_by(StudySession.session_date.desc()).all()
    return jsonify([session_to_dict(s) for s in sessions])


@study_sessions_bp.route('/<int:session_id>')
def get_session(session_id):
    session = db.session.get(StudySession, session_id)
    if not session:
        return not_found('Study session', session_id)
    return jsonify(session_to_dict(session))


@study_sessions_bp.route('/', methods=['POST'])
def create_session():
    session = apply_payload(StudySession(), json_body(), SESSION_FIELDS)
    if session.session_date is None:
        session.session_date = datetime.utcnow()
    save(session)
    return jsonify(session_to_dict(session)), 201


@study_sessions_bp.route('/<int:session_id>', methods=['PUT'])
def update_session(session_id):
    session = db.session.get(StudySession, session_id)
    if not session:
        return not_found('Study session', session_id)
    apply_payload(session, json_body(), SESSION_UPDATE_FIELDS, partial=True)
    save(session)
    return jsonify(session_to_dict(session))


@study_sessions_bp.route('/<int:session_id>', methods=['DELETE'])
def delete_session(session_id):
    session = db.session.get(StudySession, session_id)
    if not session:
        return not_found('Study session', session_id)
    return delete(session)
