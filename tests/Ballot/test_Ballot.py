import pytest

from rcv_ranker.ballot import Ballot, DuplicateRankError, Preference


def test_remove_candidate(uniform_preferences):

    b = Ballot(uniform_preferences[0])
    b.remove_candidate("banana")

    assert b.preferences == [Preference("apple", 1), Preference("carrot", 2), Preference("date", 3)]


param_dicts = [
    ({
        'input': ['A', 'B', 'C', 'D', 'E'],
        'remove': 'A',
        'expected': {'B': 1, 'C': 2, 'D': 3, 'E': 4}
    }),
    ({
        'input': ['A', 'B', 'C', 'D', 'E'],
        'remove': 'C',
        'expected': {'A': 1, 'B': 2, 'D': 3, 'E': 4}
    }),
    ({
        'input': ['A', 'B', 'C', 'D', 'E'],
        'remove': 'E',
        'expected': {'A': 1, 'B': 2, 'C': 3, 'D': 4}
    }),
    ({
        'input': ['A', 'B'],
        'remove': 'Z',
        'expected': {'A': 1, 'B': 2}
    }),
    ({
        'input': ['A'],
        'remove': 'A',
        'expected': {}
    }),
]


@pytest.mark.parametrize("param_dict", param_dicts)
def test_remove_candidate_compacts_ranks(param_dict):

    b = Ballot.from_ranking(param_dict['input'])
    b.remove_candidate(param_dict['remove'])

    computed = {p.candidate: p.rank for p in b.preferences}
    assert computed == param_dict['expected']
    assert sorted(computed.values()) == list(range(1, len(computed) + 1))


def test_remove_candidate_with_unsorted_preferences():

    b = Ballot([("C", 3), ("A", 1), ("D", 4), ("B", 2)])
    b.remove_candidate("B")

    assert b.preferences == [Preference("C", 2), Preference("A", 1), Preference("D", 3)]
    assert b.ranking == ["A", "C", "D"]


def test_add_preference():

    b = Ballot()
    b.add_preference("A", 2)
    b.add_preference("B", 1)

    assert len(b) == 2
    assert b.ranking == ["B", "A"]
    assert b.candidate_at(1) == "B"
    assert b.candidate_at(3) is None
    assert b.candidates == {"A", "B"}


def test_add_preference_duplicate_rank_leaves_ballot_unchanged():

    b = Ballot.from_ranking(["A", "B"])

    with pytest.raises(DuplicateRankError):
        b.add_preference("C", 2)

    assert b.ranking == ["A", "B"]
    assert len(b) == 2


def test_copy_is_independent():

    b = Ballot.from_ranking(["A", "B", "C"])
    c = b.copy()

    assert b == c

    c.remove_candidate("A")
    assert b.ranking == ["A", "B", "C"]
    assert c.ranking == ["B", "C"]
    assert b.candidate_at(1) == "A"


def test_copy_then_same_eliminations_match():

    b = Ballot.from_ranking(["A", "B", "C", "D", "E"])
    c = b.copy()

    for candidate in ["C", "A", "Z", "E"]:
        b.remove_candidate(candidate)
        c.remove_candidate(candidate)

    assert b == c
    assert b.preferences == c.preferences == [Preference("B", 1), Preference("D", 2)]


def test_exhausted_ballot_is_falsy():

    b = Ballot.from_ranking(["A"])
    assert b

    b.remove_candidate("A")
    assert not b
    assert b.ranking == []


param_dicts = [
    ({
        'input': Preference("A", 1),
        'expected': Preference("A", 1)
    }),
    ({
        'input': {"candidate": "A", "rank": 2},
        'expected': Preference("A", 2)
    }),
    ({
        'input': ("B", 3),
        'expected': Preference("B", 3)
    }),
]


@pytest.mark.parametrize("param_dict", param_dicts)
def test_preference_coerce(param_dict):

    computed = Preference.coerce(param_dict['input'])
    assert computed == param_dict['expected']
    assert computed is not param_dict['input']


def test_constructor_does_not_share_input_preferences():

    p = Preference("A", 1)
    b = Ballot([p, Preference("B", 2)])
    b.remove_candidate("Z")
    b.remove_candidate("A")

    assert p.rank == 1
    assert b.preferences == [Preference("B", 1)]
