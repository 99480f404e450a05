from datetime import datetime

from flask import Blueprint, jsonify, request
from sqlalchemy import and_, func, or_

from tracker.analysis.records import Difficulty, ProblemStatus
from tracker.extensions import db
from tracker.models import DSAProblem
from tracker.services.practice_service import PracticeService
from tracker.services.validation import (
    apply_payload,
    boolean,
    choice,
    integer,
    iso_date,
    optional_integer,
    string_list,
    text,
)
from tracker.views.crud import delete, iso, json_body, not_found, query_flag, save

dsa_bp = Blueprint('dsa', __name__, url_prefix='/api/dsa')

# attribute -> (parser, required on create)
PROBLEM_FIELDS = {
    'title': (text(200, required=True), True),
    'category': (text(100, default=''), False),
    'difficulty': (choice(Difficulty), True),
    'platform': (text(50, default=''), False),
    'problem_url': (text(500), False),
    'status': (choice(ProblemStatus), False),
    'time_taken_minutes': (integer(low=0), False),
    'solved_optimally': (boolean(), False),
    'notes': (text(), False),
    'solution_approach': (text(), False),
    'time_complexity': (text(50), False),
    'space_complexity': (text(50), False),
    'tags': (string_list(), False),
    'is_favorite': (boolean(), False),
    'leetcode_number': (optional_integer(low=1), False),
    'next_review_date': (iso_date(), False),
}

ATTEMPT_FIELDS = {
    'time_taken_minutes': (integer(low=0), True),
    'solved_optimally': (boolean(), False),
    'status': (choice(ProblemStatus), False),
    'notes': (text(), False),
}


def problem_to_dict(p):
    return {
        'id': p.id,
        'title': p.title,
        'category': p.category,
        'difficulty': p.difficulty,
        'platform': p.platform,
        'problem_url': p.problem_url,
        'status': p.status,
        'time_taken_minutes': p.time_taken_minutes,
        'solved_optimally': p.solved_optimally,
        'notes': p.notes,
        'solution_approach': p.solution_approach,
        'time_complexity': p.time_complexity,
        'space_complexity': p.space_complexity,
        'attempt_count': p.attempt_count,
        'tags': p.tags,
        'is_favorite': p.is_favorite,
        'leetcode_number': p.leetcode_number,
        'next_review_date': iso(p.next_review_date),
        'last_attempted_at': iso(p.last_attempted_at),
        'created_at': iso(p.created_at),
    }


@dsa_bp.route('/')
def list_problems():
    query = DSAProblem.query
    category = request.args.get('category', '')
    difficulty = request.args.get('difficulty', '')
    status = request.args.get('status', '')
    favorite = query_flag('favorite')

    if category:
        query = query.filter_by(category=category)
    if difficulty:
        query = query.filter_by(difficulty=difficulty)
    if status:
        query = query.filter_by(status=status)
    if favorite is not None:
        query = query.filter_by(is_favorite=favorite)

    problems = query.order_by(
        DSAProblem.is_favorite.desc(),
        func.coalesce(DSAProblem.last_attempted_at, DSAProblem.created_at).desc(),
    ).all()
    return jsonify([problem_to_dict(p) for p in problems])


@dsa_bp.route('/<int:problem_id>')
def get_problem(problem_id):
    problem = db.session.get(DSAProblem, problem_id)
    if not problem:
        return not_found('Problem', problem_id)
    return jsonify(problem_to_dict(problem))


@dsa_bp.route('/', methods=['POST'])
def create_problem():
    problem = apply_payload(DSAProblem(), json_body(), PROBLEM_FIELDS)
    problem.created_at = datetime.utcnow()
    save(problem)
    return jsonify(problem_to_dict(problem)), 201


@dsa_bp.route('/<int:problem_id>', methods=['PUT'])
def update_problem(problem_id):
    problem = db.session.get(DSAProblem, problem_id)
    if not problem:
        return not_found('Problem', problem_id)
    apply_payload(problem, json_body(), PROBLEM_FIELDS, partial=True)
    problem.last_attempted_at = datetime.utcnow()
    save(problem)
    return jsonify(problem_to_dict(problem))


@dsa_bp.route('/<int:problem_id>', methods=['DELETE'])
def delete_problem(problem_id):
    problem = db.session.get(DSAProblem, problem_id)
    if not problem:
        return not_found('Problem', problem_id)
    return delete(problem)


class _Attempt:
    """Defaults for fields omitted from an attempt payload."""

    solved_optimally = False
    status = ProblemStatus.SOLVED.value
    notes = None


@dsa_bp.route('/<int:problem_id>/attempt', methods=['POST'])
def record_attempt(problem_id):
    """Record an attempt and reschedule the problem's review."""
    problem = db.session.get(DSAProblem, problem_id)
    if not problem:
        return not_found('Problem', problem_id)

    attempt = apply_payload(_Attempt(), json_body(), ATTEMPT_FIELDS)
    PracticeService.record_attempt(
        problem,
        minutes=attempt.time_taken_minutes,
        solved_optimally=attempt.solved_optimally,
        status=attempt.status,
        notes=attempt.notes,
    )
    return jsonify(problem_to_dict(problem))


@dsa_bp.route('/<int:problem_id>/favorite', methods=['POST'])
def toggle_favorite(problem_id):
    problem = db.session.get(DSAProblem, problem_id)
    if not problem:
        return not_found('Problem', problem_id)
    problem.is_favorite = not problem.is_favorite
    save(problem)
    return jsonify(problem_to_dict(problem))


@dsa_bp.route('/categories')
def categories():
    rows = (
        db.session.query(DSAProblem.category)
        .distinct()
        .order_by(DSAProblem.category)
        .all()
    )
    return jsonify([r[0] for r in rows])


@dsa_bp.route('/needs-review')
def needs_review():
    """Problems flagged NeedsReview or whose review date has arrived.

    Matches the analytics list: dated entries first, undated last.
    """
    today = datetime.utcnow().date()
    problems = (
        DSAProblem.query.filter(or_(
            DSAProblem.status == ProblemStatus.NEEDS_REVIEW.value,
            and_(
                DSAProblem.next_review_date.isnot(None),
                DSAProblem.next_review_date <= today,
            ),
        ))
        .order_by(
            DSAProblem.next_review_date.is_(None),
            DSAProblem.next_review_date,
            DSAProblem.id,
        )
        .all()
    )
    return jsonify([problem_to_dict(p) for p in problems])


@dsa_bp.route('/favorites')
def favorites():
    problems = (
        DSAProblem.query.filter_by(is_favorite=True)
        .order_by(DSAProblem.category, DSAProblem.title)
        .all()
    )
    return jsonify([problem_to_dict(p) for p in problems])
