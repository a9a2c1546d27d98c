from collections.abc import Mapping

from flask import request


def request_data():
    """Return the JSON object or form fields of the request, or None for a non-object JSON body."""
    if request.is_json:
        data = request.get_json(silent=True)
        return data if isinstance(data, Mapping) else None
    return request.form


def parse_id(value):
    # JSON floats and booleans are not ids, even though int() would take them.
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        value = value.strip()
        if value.isascii() and value.isdigit():
            return int(value)
    return None


def bad_request(message):
    return {"ok": False, "error": message}, 400


def text_field(data, name):
    value = data.get(name)
    return value.strip() if isinstance(value, str) else ""
