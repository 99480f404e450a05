from flask import Blueprint, jsonify, request

from tracker.extensions import db
from tracker.models import MockInterview
from tracker.services.interview_service import InterviewService
from tracker.services.validation import (
    apply_payload,
    boolean,
    integer,
    iso_datetime,
    text,
)
from tracker.views.crud import delete, iso, json_body, not_found, save
from tracker.views.weak_areas import weak_area_to_dict

interviews_bp = Blueprint('interviews', __name__, url_prefix='/api/interviews')

INTERVIEW_FIELDS = {
    'type': (text(50, required=True), True),
    'company': (text(200, default=''), False),
    'interview_date': (iso_datetime(required=True), True),
    'duration_minutes': (integer(low=0), False),
    'overall_score': (integer(1, 10), True),
    'communication_score': (integer(1, 10), True),
    'problem_solving_score': (integer(1, 10), True),
    'technical_score': (integer(1, 10), True),
    'feedback': (text(), False),
    'strengths': (text(), False),
    'areas_to_improve': (text(), False),
    'questions_asked': (text(), False),
    'passed': (boolean(), False),
}


def interview_to_dict(i):
    return {
        'id': i.id,
        'type': i.type,
        'company': i.company,
        'interview_date': iso(i.interview_date),
        'duration_minutes': i.duration_minutes,
        'overall_score': i.overall_score,
        'communication_score': i.communication_score,
        'problem_solving_score': i.problem_solving_score,
        'technical_score': i.technical_score,
        'feedback': i.feedback,
        'strengths': i.strengths,
        'areas_to_improve': i.areas_to_improve,
        'questions_asked': i.questions_asked,
        'passed': i.passed,
        'created_at': iso(i.created_at),
    }


@interviews_bp.route('/')
def list_interviews():
    query = MockInterview.query
    type_ = request.args.get('type', '')
    company = request.args.get('company', '')

    if type_:
        query = query.filter_by(type=type_)
    if company:
        query = query.filter(MockInterview.company.contains(company))

    interviews = query.order_by(MockInterview.interview_date.desc()).all()
    return jsonify([interview_to_dict(i) for i in interviews])


@interviews_bp.route('/<int:interview_id>')
def get_interview(interview_id):
    interview = db.session.get(MockInterview, interview_id)
    if not interview:
        return not_found('Interview', interview_id)
    return jsonify(interview_to_dict(interview))


@interviews_bp.route('/', methods=['POST'])
def create_interview():
    """Create an interview; low sub-scores open weak areas automatically."""
    interview = apply_payload(MockInterview(), json_body(), INTERVIEW_FIELDS)
    created = InterviewService.create(interview)
    payload = interview_to_dict(interview)
    payload['created_weak_areas'] = [weak_area_to_dict(w) for w in created]
    return jsonify(payload), 201


@interviews_bp.route('/<int:interview_id>', methods=['PUT'])
def update_interview(interview_id):
    interview = db.session.get(MockInterview, interview_id)
    if not interview:
        return not_found('Interview', interview_id)
    apply_payload(interview, json_body(), INTERVIEW_FIELDS, partial=True)
    save(interview)
    return jsonify(interview_to_dict(interview))


@interviews_bp.route('/<int:interview_id>', methods=['DELETE'])
def delete_interview(interview_id):
    interview = db.session.get(MockInterview, interview_id)
    if not interview:
        return not_found('Interview', interview_id)
    return delete(interview)
