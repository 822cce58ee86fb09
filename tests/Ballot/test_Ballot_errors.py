import pytest

from rcv_ranker.ballot import Ballot, DuplicateRankError, Preference

params = [
    (TypeError, "A", 1.5),
    (TypeError, "A", "1"),
    (TypeError, "A", True),
    (TypeError, "A", None),
    (TypeError, 1, 1),
    (TypeError, None, 1),
    (ValueError, "A", 0),
    (ValueError, "A", -1),
]


@pytest.mark.parametrize("error_type, candidate, rank", params)
def test_add_preference_errors(error_type, candidate, rank):

    b = Ballot()
    with pytest.raises(error_type):
        b.add_preference(candidate, rank)
    assert len(b) == 0


def test_duplicate_rank_is_value_error():

    assert issubclass(DuplicateRankError, ValueError)


def test_constructor_duplicate_rank():

    with pytest.raises(DuplicateRankError):
        Ballot([("A", 1), ("B", 1)])


params = [
    (TypeError, "A"),
    (TypeError, 1),
    (TypeError, ("A", 1, 2)),
    (TypeError, ["A", 1]),
]


@pytest.mark.parametrize("error_type, input", params)
def test_preference_coerce_errors(error_type, input):

    with pytest.raises(error_type):
        Preference.coerce(input)
