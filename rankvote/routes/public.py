from flask import jsonify, session

from rankvote.routes.forms import bad_request, parse_id, request_data
from rankvote.services import roster
from rankvote.services.voting import get_user_vote, has_voted, submit_vote, voting_is_open

CHOICE_FIELDS = ("first", "second", "third")


def _guest_dict(guest):
    return {"id": guest.id, "name": guest.name}


def _parse_choices(data):
    choices = tuple(parse_id(data.get(field)) for field in CHOICE_FIELDS)
    if None in choices:
        return None
    return choices


def _invalid_code():
    return {"ok": False, "error": "Invalid access code."}, 404


def _active_guest(code):
    guest = roster.get_guest_by_code(code)
    if guest is None or not guest.is_active:
        return None
    return guest


def register_public_routes(app):
    @app.route("/")
    def index():
        return jsonify({"ok": True, "voting_open": voting_is_open()})

    @app.route("/join", methods=["POST"])
    def join():
        data = request_data()
        if data is None:
            return bad_request("Request body must be a JSON object.")

        guest = _active_guest(data.get("code"))
        if guest is None:
            return _invalid_code()

        session["guest_id"] = guest.id
        session["guest_code"] = guest.code
        return jsonify({"ok": True, "guest": _guest_dict(guest)})

    @app.route("/leave")
    def leave():
        session.pop("guest_id", None)
        session.pop("guest_code", None)
        return jsonify({"ok": True})

    @app.route("/vote/<code>")
    def ballot_page(code):
        guest = _active_guest(code)
        if guest is None:
            return _invalid_code()

        current = get_user_vote(guest.id)
        candidates = [
            _guest_dict(candidate)
            for candidate in roster.get_all_active_guests()
            if candidate.id != guest.id
        ]

        return jsonify(
            {
                "ok": True,
                "guest": _guest_dict(guest),
                "voting_open": voting_is_open(),
                "has_voted": has_voted(guest.id),
                "ballot": [_guest_dict(choice) for choice in current] if current else None,
                "candidates": candidates,
            }
        )

    @app.route("/vote/<code>", methods=["POST"])
    def cast_ballot(code):
        guest = roster.get_guest_by_code(code)
        if guest is None:
            return _invalid_code()

        data = request_data()
        if data is None:
            return bad_request("Request body must be a JSON object.")

        choices = _parse_choices(data)
        if choices is None:
            return bad_request("Three ranked choices are required.")

        submit_vote(guest.id, *choices)
        return jsonify({"ok": True})
