from rankvote.extensions import db
from rankvote.models import VotingStatus
from rankvote.services.roster import utcnow


def _status_query(lock):
    query = VotingStatus.query
    if lock:
        # Row lock held until the caller's transaction ends; populate_existing
        # replaces any copy already sitting in the session.
        query = query.with_for_update().populate_existing()
    return query


def init_voting_status(lock=False):
    """Insert the singleton closed window row if the table is empty."""
    status = _status_query(lock).first()
    if status is None:
        status = VotingStatus(is_open=False, opened_at=None, closed_at=None)
        db.session.add(status)
        db.session.flush()
    return status


def get_voting_status(lock=False):
    return _status_query(lock).first()


def voting_is_open(lock=False):
    status = get_voting_status(lock=lock)
    return bool(status and status.is_open)


def mark_open(status):
    status.is_open = True
    status.opened_at = utcnow()
    status.closed_at = None


def mark_closed(status):
    status.is_open = False
    status.closed_at = utcnow()
