import logging
from datetime import datetime

from flask import Blueprint, jsonify
from sqlalchemy import case

from tracker.analysis.records import Severity
from tracker.extensions import db
from tracker.models import WeakArea
from tracker.services.validation import apply_payload, boolean, choice, text
from tracker.views.crud import delete, iso, json_body, not_found, query_flag, save

logger = logging.getLogger(__name__)

weak_areas_bp = Blueprint('weak_areas', __name__, url_prefix='/api/weak-areas')

WEAK_AREA_FIELDS = {
    'area': (text(200, required=True), True),
    'category': (text(100, default=''), False),
    'severity': (choice(Severity), False),
    'description': (text(), False),
    'improvement_plan': (text(), False),
    'is_resolved': (boolean(), False),
}

# High first, then Medium, then Low
_SEVERITY_RANK = case(
    (WeakArea.severity == Severity.HIGH.value, 0),
    (WeakArea.severity == Severity.MEDIUM.value, 1),
    else_=2,
)


def weak_area_to_dict(w):
    return {
        'id': w.id,
        'area': w.area,
        'category': w.category,
        'severity': w.severity,
        'description': w.description,
        'improvement_plan': w.improvement_plan,
        'is_resolved': w.is_resolved,
        'identified_at': iso(w.identified_at),
        'resolved_at': iso(w.resolved_at),
    }


@weak_areas_bp.route('/')
def list_weak_areas():
    query = WeakArea.query
    resolved = query_flag('resolved')
    if resolved is not None:
        query = query.filter_by(is_resolved=resolved)

    weak_areas = query.order_by(_SEVERITY_RANK, WeakArea.identified_at.desc()).all()
    return jsonify([weak_area_to_dict(w) for w in weak_areas])


@weak_areas_bp.route('/<int:weak_area_id>')
def get_weak_area(weak_area_id):
    weak_area = db.session.get(WeakArea, weak_area_id)
    if not weak_area:
        return not_found('Weak area', weak_area_id)
    return jsonify(weak_area_to_dict(weak_area))


@weak_areas_bp.route('/', methods=['POST'])
def create_weak_area():
    weak_area = apply_payload(WeakArea(), json_body(), WEAK_AREA_FIELDS)
    weak_area.identified_at = datetime.utcnow()
    if weak_area.is_resolved:
        weak_area.resolve()
    save(weak_area)
    return jsonify(weak_area_to_dict(weak_area)), 201


@weak_areas_bp.route('/<int:weak_area_id>', methods=['PUT'])
def update_weak_area(weak_area_id):
    weak_area = db.session.get(WeakArea, weak_area_id)
    if not weak_area:
        return not_found('Weak area', weak_area_id)
    apply_payload(weak_area, json_body(), WEAK_AREA_FIELDS, partial=True)
    if weak_area.is_resolved and weak_area.resolved_at is None:
        weak_area.resolve()
    elif not weak_area.is_resolved:
        weak_area.resolved_at = None
    save(weak_area)
    return jsonify(weak_area_to_dict(weak_area))


@weak_areas_bp.route('/<int:weak_area_id>/resolve', methods=['POST'])
def resolve_weak_area(weak_area_id):
    weak_area = db.session.get(WeakArea, weak_area_id)
    if not weak_area:
        return not_found('Weak area', weak_area_id)
    weak_area.resolve()
    save(weak_area)
    logger.info(f'Resolved weak area {weak_area.id} ({weak_area.area!r})')
    return jsonify(weak_area_to_dict(weak_area))


@weak_areas_bp.route('/<int:weak_area_id>', methods=['DELETE'])
def delete_weak_area(weak_area_id):
    weak_area = db.session.get(WeakArea, weak_area_id)
    if not weak_area:
        return not_found('Weak area', weak_area_id)
    return delete(weak_area)
