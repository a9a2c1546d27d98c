import math
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class RcvRound:
    round_number: int
    tallies: List[Tuple[int, int]]
    eliminated: List[int] = field(default_factory=list)
    winner: Optional[int] = None

    def to_dict(self):
        return {
            "round_number": self.round_number,
            "tallies": [
                {"candidate_id": candidate_id, "count": count}
                for candidate_id, count in self.tallies
            ],
            "eliminated": list(self.eliminated),
            "winner": self.winner,
        }


@dataclass(frozen=True)
class RcvResult:
    winner_id: Optional[int]
    rounds: List[RcvRound]

    def to_dict(self):
        return {
            "winner_id": self.winner_id,
            "rounds": [round_.to_dict() for round_ in self.rounds],
        }


def majority_threshold(total_ballots):
    if total_ballots <= 0:
        return 0
    return max(1, math.ceil(total_ballots * 0.5))


def _top_active_choice(ballot, active):
    for candidate_id in ballot.choices:
        if candidate_id in active:
            return candidate_id
    return None


def compute_rcv(ballots: Iterable, candidates: Sequence[int]) -> RcvResult:
    """Run instant-runoff elimination over a frozen set of ballots.

    Each round counts every active ballot for its highest-ranked choice that
    is still in the race. A candidate wins when it reaches the majority of the
    ballots still in the pool and is strictly ahead of the runner-up. Otherwise
    every candidate tied on the lowest tally is eliminated at once, and ballots
    with no remaining choice are dropped from the pool. When the last
    candidates are eliminated together the result has no winner.
    """
    if not candidates:
        return RcvResult(winner_id=None, rounds=[])

    active = set(candidates)
    active_ballots = list(ballots)
    rounds = []
    round_number = 1

    while active:
        counts = {candidate_id: 0 for candidate_id in active}
        for ballot in active_ballots:
            choice = _top_active_choice(ballot, active)
            if choice is not None:
                counts[choice] += 1

        tallies = sorted(counts.items(), key=lambda item: (-item[1], item[0]))

        # Threshold is taken against the pool at the start of the round, so it
        # shrinks as exhausted ballots drop out.
        threshold = majority_threshold(len(active_ballots))
        top_id, top_count = tallies[0]
        is_clear_top = len(tallies) < 2 or tallies[1][1] < top_count

        if top_count >= threshold and is_clear_top:
            rounds.append(
                RcvRound(round_number=round_number, tallies=tallies, winner=top_id)
            )
            return RcvResult(winner_id=top_id, rounds=rounds)

        min_count = tallies[-1][1]
        eliminated = [
            candidate_id for candidate_id, count in tallies if count == min_count
        ]
        active.difference_update(eliminated)
        rounds.append(
            RcvRound(round_number=round_number, tallies=tallies, eliminated=eliminated)
        )

        active_ballots = [
            ballot
            for ballot in active_ballots
            if any(candidate_id in active for candidate_id in ballot.choices)
        ]
        round_number += 1

    return RcvResult(winner_id=None, rounds=rounds)
