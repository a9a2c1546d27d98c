from flask import jsonify
from flask_login import login_required

from rankvote.models import Guest
from rankvote.routes.forms import bad_request, request_data, text_field
from rankvote.services import roster
from rankvote.services.voting import (
    close_voting,
    get_rcv_result,
    get_voting_stats,
    get_voting_status,
    open_voting,
    reset_votes,
)


def _isoformat(value):
    return value.isoformat() if value else None


def _status_dict():
    status = get_voting_status()
    return {
        "is_open": bool(status and status.is_open),
        "opened_at": _isoformat(status.opened_at) if status else None,
        "closed_at": _isoformat(status.closed_at) if status else None,
    }


def _result_dict(result):
    names = {guest.id: guest.name for guest in Guest.query.all()}
    payload = result.to_dict()
    payload["winner_name"] = names.get(result.winner_id)
    for round_payload in payload["rounds"]:
        for tally in round_payload["tallies"]:
            tally["name"] = names.get(tally["candidate_id"])
    return payload


def _guest_row(guest):
    return {
        "id": guest.id,
        "name": guest.name,
        "code": guest.code,
        "is_active": guest.is_active,
        "registered_at": _isoformat(guest.registered_at),
    }


def register_admin_routes(app):
    @app.route("/admin/voting")
    @login_required
    def voting_status():
        return jsonify({"ok": True, "status": _status_dict()})

    @app.route("/admin/voting/open", methods=["POST"])
    @login_required
    def open_voting_route():
        open_voting()
        return jsonify({"ok": True, "status": _status_dict()})

    @app.route("/admin/voting/close", methods=["POST"])
    @login_required
    def close_voting_route():
        result = close_voting()
        return jsonify({"ok": True, "status": _status_dict(), "result": _result_dict(result)})

    @app.route("/admin/voting/results")
    @login_required
    def voting_results():
        result = get_rcv_result()
        return jsonify({"ok": True, "result": _result_dict(result)})

    @app.route("/admin/voting/stats")
    @login_required
    def voting_stats():
        ballots_cast, active_guests = get_voting_stats()
        return jsonify(
            {"ok": True, "ballots_cast": ballots_cast, "active_guests": active_guests}
        )

    @app.route("/admin/voting/reset", methods=["POST"])
    @login_required
    def reset_voting():
        deleted = reset_votes()
        return jsonify({"ok": True, "deleted": deleted})

    @app.route("/admin/guests")
    @login_required
    def list_guests():
        guests = Guest.query.order_by(Guest.id).all()
        return jsonify({"ok": True, "guests": [_guest_row(guest) for guest in guests]})

    @app.route("/admin/guests", methods=["POST"])
    @login_required
    def create_guest():
        data = request_data()
        if data is None:
            return bad_request("Request body must be a JSON object.")

        name = text_field(data, "name")
        if not name:
            return bad_request("Guest name is required.")

        guest = roster.register_guest(name)
        return {"ok": True, "guest": _guest_row(guest)}, 201

    @app.route("/admin/guests/<int:guest_id>/deactivate", methods=["POST"])
    @login_required
    def deactivate_guest(guest_id):
        guest = Guest.query.get_or_404(guest_id)
        roster.deactivate_guest(guest)
        return jsonify({"ok": True, "guest": _guest_row(guest)})

    @app.route("/admin/guests/<int:guest_id>/reactivate", methods=["POST"])
    @login_required
    def reactivate_guest(guest_id):
        guest = Guest.query.get_or_404(guest_id)
        roster.reactivate_guest(guest)
        return jsonify({"ok": True, "guest": _guest_row(guest)})
