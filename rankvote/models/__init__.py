from rankvote.models.guest import Guest
from rankvote.models.user import User
from rankvote.models.vote import Vote
from rankvote.models.voting_status import VotingStatus

__all__ = [
    "User",
    "Guest",
    "Vote",
    "VotingStatus",
]
