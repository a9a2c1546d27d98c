"""Ballot intake and tabulation over the guest roster and the votes table.

Ballot writes and the close-then-count sequence share one in-process lock and
each runs in a single session transaction that starts with a locking read of
the voting_status row. The row lock serialises workers in other processes on
databases that support SELECT ... FOR UPDATE, so a close always counts exactly
the ballots committed before it and no ballot lands after it.
"""
import threading

from flask import current_app

from rankvote.extensions import db
from rankvote.models import Guest, Vote
from rankvote.services import roster
from rankvote.services.voting.ballot import Ballot, validate_ballot
from rankvote.services.voting.errors import VotingError, VotingOpen
from rankvote.services.voting.rcv import compute_rcv
from rankvote.services.voting.window import (
    init_voting_status,
    mark_closed,
    mark_open,
    voting_is_open,
)

_write_lock = threading.Lock()


def _fresh_transaction():
    # Ends whatever transaction the caller opened with earlier reads, so the
    # locking read below starts a new snapshot.
    db.session.commit()


def open_voting():
    with _write_lock:
        try:
            _fresh_transaction()
            mark_open(init_voting_status(lock=True))
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
    current_app.logger.info("Voting opened")


def close_voting():
    with _write_lock:
        try:
            _fresh_transaction()
            mark_closed(init_voting_status(lock=True))
            db.session.flush()
            result = get_rcv_result()
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
    current_app.logger.info(
        "Voting closed after %d round(s); winner: %s",
        len(result.rounds),
        result.winner_id,
    )
    return result


def submit_vote(voter_id, first, second, third):
    with _write_lock:
        try:
            _fresh_transaction()
            validate_ballot(
                voter_id,
                (first, second, third),
                is_open=voting_is_open(lock=True),
                is_eligible=roster.is_active_guest,
            )

            Vote.query.filter_by(voter_id=voter_id).delete(synchronize_session=False)
            db.session.add(
                Vote(
                    voter_id=voter_id,
                    first_choice_id=first,
                    second_choice_id=second,
                    third_choice_id=third,
                    submitted_at=roster.utcnow(),
                )
            )
            db.session.commit()
        except VotingError as exc:
            db.session.rollback()
            current_app.logger.warning(
                "Rejected ballot from voter %s: %s", voter_id, exc.code
            )
            raise
        except Exception:
            db.session.rollback()
            raise
    current_app.logger.info("Recorded ballot for voter %s", voter_id)


def has_voted(voter_id):
    return Vote.query.filter_by(voter_id=voter_id).count() > 0


def get_user_vote(voter_id):
    """Return the voter's (first, second, third) guests, or None if they have not voted."""
    vote = Vote.query.filter_by(voter_id=voter_id).first()
    if vote is None:
        return None
    return (
        db.session.get(Guest, vote.first_choice_id),
        db.session.get(Guest, vote.second_choice_id),
        db.session.get(Guest, vote.third_choice_id),
    )


def get_all_votes():
    return Vote.query.order_by(Vote.id).all()


def reset_votes():
    with _write_lock:
        try:
            _fresh_transaction()
            init_voting_status(lock=True)
            deleted = Vote.query.delete(synchronize_session=False)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
    current_app.logger.info("Cleared %d ballot(s)", deleted)
    return deleted


def get_rcv_result():
    if voting_is_open():
        raise VotingOpen()

    ballots = [Ballot.from_vote(vote) for vote in get_all_votes()]
    candidates = roster.get_active_guest_ids()
    return compute_rcv(ballots, candidates)


def get_voting_stats():
    """Return (ballots cast, active guests)."""
    return Vote.query.count(), roster.count_active_guests()
