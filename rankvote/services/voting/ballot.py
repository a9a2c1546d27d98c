from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional, Tuple

from rankvote.services.voting.errors import (
    DuplicateChoice,
    NotFound,
    SelfVote,
    VotingClosed,
)


@dataclass(frozen=True)
class Ballot:
    """Immutable snapshot of one voter's ranked choices."""

    voter_id: int
    first_choice_id: int
    second_choice_id: int
    third_choice_id: int
    submitted_at: Optional[datetime] = None

    @property
    def choices(self) -> Tuple[int, int, int]:
        return (self.first_choice_id, self.second_choice_id, self.third_choice_id)

    @classmethod
    def from_vote(cls, vote):
        return cls(
            voter_id=vote.voter_id,
            first_choice_id=vote.first_choice_id,
            second_choice_id=vote.second_choice_id,
            third_choice_id=vote.third_choice_id,
            submitted_at=vote.submitted_at,
        )


def validate_ballot(
    voter_id: int,
    choices: Tuple[int, int, int],
    is_open: bool,
    is_eligible: Callable[[int], bool],
) -> None:
    """Raise the first rule a proposed ballot breaks; return None if it is valid.

    The window is checked before the roster so a closed window always wins,
    and the voter is checked before any of the choices.
    """
    if not is_open:
        raise VotingClosed()

    if not is_eligible(voter_id):
        raise NotFound(f"Voter {voter_id} is not an active guest.")

    if voter_id in choices:
        raise SelfVote()

    if len(set(choices)) != len(choices):
        raise DuplicateChoice()

    for choice_id in choices:
        if not is_eligible(choice_id):
            raise NotFound(f"Candidate {choice_id} is not an active guest.")
