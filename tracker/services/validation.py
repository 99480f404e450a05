"""
JSON payload parsing for the CRUD endpoints.

Each model declares a field table: a mapping from attribute name to a parser
that turns the raw JSON value into the stored value or raises
:class:`ValidationError`. Enum-like columns are checked against the closed
enums in :mod:`tracker.analysis.records`, so only well-formed values reach
the database.
"""
from __future__ import annotations

from datetime import date, datetime, timezone


class ValidationError(ValueError):
    """Raised when a request payload contains an invalid value."""

    def __init__(self, field, message):
        self.field = field
        self.message = message
        super().__init__(f'{field}: {message}')


def text(max_length=None, required=False, default=None):
    def parse(field, value):
        if value is None:
            if required:
                raise ValidationError(field, 'is required')
            return default
        if not isinstance(value, str):
            raise ValidationError(field, 'must be a string')
        value = value.strip()
        if required and not value:
            raise ValidationError(field, 'must not be empty')
        if max_length and len(value) > max_length:
            raise ValidationError(field, f'must be at most {max_length} characters')
        return value
    return parse


def integer(low=None, high=None):
    def parse(field, value):
        if isinstance(value, bool) or value is None:
            raise ValidationError(field, 'must be an integer')
        try:
            value = int(value)
        except (TypeError, ValueError):
            raise ValidationError(field, 'must be an integer')
        if low is not None and value < low:
            raise ValidationError(field, f'must be >= {low}')
        if high is not None and value > high:
            raise ValidationError(field, f'must be <= {high}')
        return value
    return parse


def optional_integer(low=None, high=None):
    inner = integer(low, high)

    def parse(field, value):
        return None if value is None else inner(field, value)
    return parse


def boolean():
    def parse(field, value):
        if not isinstance(value, bool):
            raise ValidationError(field, 'must be true or false')
        return value
    return parse


def choice(enum_cls):
    allowed = [member.value for member in enum_cls]

    def parse(field, value):
        try:
            return enum_cls(value).value
        except ValueError:
            raise ValidationError(field, f'must be one of {", ".join(allowed)}')
    return parse


def iso_date():
    def parse(field, value):
        if value is None:
            return None
        try:
            return date.fromisoformat(str(value)[:10])
        except ValueError:
            raise ValidationError(field, 'must be an ISO date (YYYY-MM-DD)')
    return parse


def iso_datetime(required=False):
    def parse(field, value):
        if value is None:
            if required:
                raise ValidationError(field, 'is required')
            return None
        try:
            parsed = datetime.fromisoformat(str(value).replace('Z', '+00:00'))
        except ValueError:
            raise ValidationError(field, 'must be an ISO datetime')
        if parsed.tzinfo is not None:
            # stored as naive UTC
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
        return parsed
    return parse


def string_list():
    def parse(field, value):
        if value is None:
            return []
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ValidationError(field, 'must be a list of strings')
        return value
    return parse


def apply_payload(obj, data, fields, partial=False):
    """Validate *data* against *fields* and set the parsed values on *obj*.

    With ``partial=False`` every field marked required in *fields* must be
    present. Unknown keys are ignored.

    Raises:
        ValidationError: on the first invalid field.
    """
    if not isinstance(data, dict):
        raise ValidationError('body', 'must be a JSON object')
    for name, (parser, required) in fields.items():
        if name not in data:
            if required and not partial:
                raise ValidationError(name, 'is required')
            continue
        setattr(obj, name, parser(name, data[name]))
    return obj
