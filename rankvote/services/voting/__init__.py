from rankvote.services.voting.ballot import Ballot, validate_ballot
from rankvote.services.voting.election import (
    close_voting,
    get_all_votes,
    get_rcv_result,
    get_user_vote,
    get_voting_stats,
    has_voted,
    open_voting,
    reset_votes,
    submit_vote,
)
from rankvote.services.voting.errors import (
    DuplicateChoice,
    NotFound,
    SelfVote,
    VotingClosed,
    VotingError,
    VotingOpen,
)
from rankvote.services.voting.rcv import RcvResult, RcvRound, compute_rcv
from rankvote.services.voting.window import (
    get_voting_status,
    init_voting_status,
    voting_is_open,
)

__all__ = [
    "Ballot",
    "validate_ballot",
    "RcvResult",
    "RcvRound",
    "compute_rcv",
    "VotingError",
    "VotingClosed",
    "VotingOpen",
    "SelfVote",
    "DuplicateChoice",
    "NotFound",
    "init_voting_status",
    "get_voting_status",
    "voting_is_open",
    "open_voting",
    "close_voting",
    "submit_vote",
    "has_voted",
    "get_user_vote",
    "get_all_votes",
    "reset_votes",
    "get_rcv_result",
    "get_voting_stats",
]
