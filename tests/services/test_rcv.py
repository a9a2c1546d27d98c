from rankvote.services.voting import Ballot, compute_rcv
from rankvote.services.voting.rcv import majority_threshold


def make_ballots(*rows):
    """Build ballots from (count, first, second, third) rows, numbering voters from 100."""
    ballots = []
    voter_id = 100
    for count, first, second, third in rows:
        for _ in range(count):
            ballots.append(Ballot(voter_id, first, second, third))
            voter_id += 1
    return ballots


def test_no_candidates_yields_no_rounds():
    result = compute_rcv(make_ballots((3, 1, 2, 3)), [])
    assert result.winner_id is None
    assert result.rounds == []


def test_majority_in_first_round():
    result = compute_rcv(make_ballots((3, 1, 2, 3)), [1, 2, 3])

    assert result.winner_id == 1
    assert len(result.rounds) == 1
    assert result.rounds[0].tallies == [(1, 3), (2, 0), (3, 0)]
    assert result.rounds[0].eliminated == []
    assert result.rounds[0].winner == 1


def test_majority_in_second_round_after_transfer():
    ballots = make_ballots(
        (4, 1, 2, 3),
        (2, 2, 1, 3),
        (2, 3, 2, 1),
        (1, 4, 1, 3),
    )
    result = compute_rcv(ballots, [1, 2, 3, 4])

    assert result.winner_id == 1
    assert len(result.rounds) == 2
    assert result.rounds[0].tallies == [(1, 4), (2, 2), (3, 2), (4, 1)]
    assert result.rounds[0].eliminated == [4]
    assert result.rounds[0].winner is None
    assert result.rounds[1].tallies == [(1, 5), (2, 2), (3, 2)]
    assert result.rounds[1].eliminated == []
    assert result.rounds[1].winner == 1


def test_third_round_comeback():
    ballots = make_ballots(
        (4, 1, 2, 3),
        (2, 2, 1, 3),
        (2, 3, 2, 1),
        (1, 4, 2, 3),
    )
    result = compute_rcv(ballots, [1, 2, 3, 4])

    assert result.winner_id == 2
    assert len(result.rounds) == 3
    assert result.rounds[0].tallies == [(1, 4), (2, 2), (3, 2), (4, 1)]
    assert result.rounds[0].eliminated == [4]
    assert result.rounds[1].tallies == [(1, 4), (2, 3), (3, 2)]
    assert result.rounds[1].eliminated == [3]
    assert result.rounds[1].winner is None
    assert result.rounds[2].tallies == [(2, 5), (1, 4)]
    assert result.rounds[2].eliminated == []
    assert result.rounds[2].winner == 2


def test_lowest_tied_candidates_are_eliminated_together():
    ballots = make_ballots(
        (2, 1, 2, 3),
        (1, 2, 3, 1),
        (1, 3, 2, 1),
        (1, 4, 2, 3),
    )
    result = compute_rcv(ballots, [1, 2, 3, 4])

    assert result.winner_id == 1
    assert len(result.rounds) == 2
    assert result.rounds[0].tallies == [(1, 2), (2, 1), (3, 1), (4, 1)]
    assert result.rounds[0].eliminated == [2, 3, 4]
    assert result.rounds[0].winner is None
    # The ballot ranking 4, 2, 3 is exhausted and leaves the pool.
    assert result.rounds[1].tallies == [(1, 4)]
    assert result.rounds[1].eliminated == []
    assert result.rounds[1].winner == 1


def test_full_tie_in_first_round_has_no_winner():
    ballots = make_ballots(
        (2, 1, 2, 3),
        (2, 2, 3, 4),
        (2, 3, 4, 1),
        (2, 4, 1, 2),
    )
    result = compute_rcv(ballots, [1, 2, 3, 4])

    assert result.winner_id is None
    assert len(result.rounds) == 1
    assert result.rounds[0].tallies == [(1, 2), (2, 2), (3, 2), (4, 2)]
    assert result.rounds[0].eliminated == [1, 2, 3, 4]
    assert result.rounds[0].winner is None


def test_tie_after_several_rounds_has_no_winner():
    ballots = make_ballots(
        (2, 1, 2, 3),
        (2, 2, 3, 4),
        (2, 3, 4, 5),
        (2, 4, 5, 6),
        (1, 5, 1, 2),
        (1, 6, 2, 1),
    )
    result = compute_rcv(ballots, [1, 2, 3, 4, 5, 6])

    assert result.winner_id is None
    assert len(result.rounds) == 3
    assert result.rounds[0].tallies == [(1, 2), (2, 2), (3, 2), (4, 2), (5, 1), (6, 1)]
    assert result.rounds[0].eliminated == [5, 6]
    assert result.rounds[1].tallies == [(1, 3), (2, 3), (3, 2), (4, 2)]
    assert result.rounds[1].eliminated == [3, 4]
    assert result.rounds[2].tallies == [(1, 3), (2, 3)]
    assert result.rounds[2].eliminated == [1, 2]


def test_threshold_follows_shrinking_ballot_pool():
    # Ballots ranking 7 and 8 never reach an eligible candidate once 3 is gone,
    # so the pool drops from 9 to 7 and 4 votes become a majority.
    ballots = make_ballots(
        (4, 1, 7, 8),
        (3, 2, 7, 8),
        (2, 3, 7, 8),
    )
    result = compute_rcv(ballots, [1, 2, 3])

    assert result.winner_id == 1
    assert len(result.rounds) == 2
    assert result.rounds[0].eliminated == [3]
    assert result.rounds[1].tallies == [(1, 4), (2, 3)]
    assert result.rounds[1].winner == 1


def test_ballots_skip_choices_that_are_not_candidates():
    ballots = make_ballots((2, 9, 2, 1), (1, 1, 9, 2))
    result = compute_rcv(ballots, [1, 2])

    assert result.rounds[0].tallies == [(2, 2), (1, 1)]
    assert result.winner_id == 2


def test_lone_candidate_wins_without_ballots():
    result = compute_rcv([], [7])

    assert result.winner_id == 7
    assert len(result.rounds) == 1
    assert result.rounds[0].tallies == [(7, 0)]


def test_several_candidates_without_ballots_all_fall_together():
    result = compute_rcv([], [3, 1, 2])

    assert result.winner_id is None
    assert len(result.rounds) == 1
    assert result.rounds[0].tallies == [(1, 0), (2, 0), (3, 0)]
    assert result.rounds[0].eliminated == [1, 2, 3]


def test_round_numbers_are_sequential_and_field_shrinks():
    ballots = make_ballots(
        (3, 1, 2, 3),
        (3, 2, 3, 4),
        (2, 3, 4, 5),
        (1, 4, 5, 6),
        (1, 6, 5, 4),
    )
    result = compute_rcv(ballots, [1, 2, 3, 4, 5, 6])

    assert result.rounds
    for index, round_ in enumerate(result.rounds):
        assert round_.round_number == index + 1

    sizes = [len(round_.tallies) for round_ in result.rounds]
    for round_, size, next_size in zip(result.rounds, sizes, sizes[1:]):
        assert round_.winner is None
        assert next_size == size - len(round_.eliminated)
        assert next_size < size


def test_majority_threshold():
    assert majority_threshold(0) == 0
    assert majority_threshold(1) == 1
    assert majority_threshold(6) == 3
    assert majority_threshold(9) == 5


def test_result_serialises_to_plain_data():
    result = compute_rcv(make_ballots((2, 1, 2, 3), (1, 2, 1, 3)), [1, 2])

    assert result.to_dict() == {
        "winner_id": 1,
        "rounds": [
            {
                "round_number": 1,
                "tallies": [
                    {"candidate_id": 1, "count": 2},
                    {"candidate_id": 2, "count": 1},
                ],
                "eliminated": [],
                "winner": 1,
            }
        ],
    }
