"""Guest roster: who may vote and who may be voted for.

Every active guest is both a voter and a candidate. Deactivating a guest does
not touch any ballot they already cast.
"""
from datetime import datetime, timezone

from flask import current_app

from rankvote.extensions import db
from rankvote.models import Guest
from rankvote.services.security import generate_guest_code


def utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


def is_active_guest(guest_id):
    return (
        db.session.query(Guest.id)
        .filter_by(id=guest_id, is_active=True)
        .first()
        is not None
    )


def get_all_active_guests():
    return Guest.query.filter_by(is_active=True).order_by(Guest.id).all()


def get_active_guest_ids():
    rows = (
        db.session.query(Guest.id)
        .filter_by(is_active=True)
        .order_by(Guest.id)
        .all()
    )
    return [row.id for row in rows]


def count_active_guests():
    return Guest.query.filter_by(is_active=True).count()


def get_guest_by_code(code):
    code = (code or "").strip().upper()
    if not code:
        return None
    return Guest.query.filter_by(code=code).first()


def _unused_code():
    code = generate_guest_code()
    while Guest.query.filter_by(code=code).first() is not None:
        code = generate_guest_code()
    return code


def register_guest(name):
    guest = Guest(
        name=name,
        code=_unused_code(),
        is_active=True,
        registered_at=utcnow(),
    )
    db.session.add(guest)
    db.session.commit()
    current_app.logger.info("Registered guest %s (%s)", guest.id, guest.name)
    return guest


def deactivate_guest(guest):
    guest.is_active = False
    db.session.commit()
    current_app.logger.info("Deactivated guest %s", guest.id)
    return guest


def reactivate_guest(guest):
    guest.is_active = True
    guest.registered_at = utcnow()
    db.session.commit()
    current_app.logger.info("Reactivated guest %s", guest.id)
    return guest
