"""Helpers shared by the JSON CRUD blueprints."""
from flask import jsonify, request

from tracker.extensions import db


def json_body():
    """The request's JSON body, or an empty dict when missing or malformed."""
    return request.get_json(silent=True) or {}


def not_found(kind, item_id):
    return jsonify({'error': f'{kind} {item_id} not found'}), 404


def iso(value):
    return value.isoformat() if value else None


def save(obj):
    """Add *obj* to the session and commit."""
    db.session.add(obj)
    db.session.commit()
    return obj


def delete(obj):
    db.session.delete(obj)
    db.session.commit()
    return '', 204


def query_flag(name):
    """Parse an optional boolean query parameter ('true'/'false')."""
    raw = request.args.get(name)
    if raw is None or raw == '':
        return None
    return raw.lower() in ('true', '1', 'yes')
