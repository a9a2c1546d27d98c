class VotingError(Exception):
    """Base class for ballot and tabulation rejections.

    Every subclass carries a stable ``code`` that callers can branch on and
    the HTTP status the JSON error handler answers with.
    """

    code = "voting_error"
    status_code = 400
    default_message = "Voting request rejected."

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    def to_dict(self):
        return {"ok": False, "error": self.message, "code": self.code}


class VotingClosed(VotingError):
    code = "voting_closed"
    status_code = 409
    default_message = "Voting is not open."


class VotingOpen(VotingError):
    code = "voting_open"
    status_code = 409
    default_message = "Results are unavailable while voting is still open."


class SelfVote(VotingError):
    code = "self_vote"
    default_message = "You cannot vote for yourself."


class DuplicateChoice(VotingError):
    code = "duplicate_choice"
    default_message = "Choices must be unique."


class NotFound(VotingError):
    code = "not_found"
    status_code = 404
    default_message = "Guest is not on the active roster."
