import pytest


def _preferences(*candidate_ranks):
    return [{"candidate": candidate, "rank": rank} for candidate, rank in candidate_ranks]


# fruit ballots, every ballot ranks all four candidates
UNIFORM_PREFERENCES = [
    _preferences(("apple", 1), ("banana", 2), ("carrot", 3), ("date", 4)),
    _preferences(("apple", 1), ("banana", 2), ("carrot", 3), ("date", 4)),
    _preferences(("apple", 1), ("banana", 2), ("carrot", 3), ("date", 4)),
    _preferences(("apple", 2), ("banana", 1), ("carrot", 3), ("date", 4)),
    _preferences(("apple", 2), ("banana", 1), ("carrot", 3), ("date", 4)),
    _preferences(("apple", 2), ("banana", 1), ("carrot", 3), ("date", 4)),
    _preferences(("apple", 2), ("banana", 1), ("carrot", 3), ("date", 4)),
    _preferences(("apple", 2), ("banana", 1), ("carrot", 3), ("date", 4)),
    _preferences(("apple", 1), ("banana", 2), ("carrot", 3), ("date", 4)),
    _preferences(("apple", 1), ("banana", 2), ("carrot", 3), ("date", 4)),
    _preferences(("apple", 3), ("banana", 2), ("carrot", 1), ("date", 4)),
    _preferences(("apple", 1), ("banana", 2), ("carrot", 3), ("date", 4)),
]

# ballots of varying length, some candidates ranked by only a few voters
NON_UNIFORM_PREFERENCES = [
    _preferences(("apple", 1), ("banana", 2), ("carrot", 3), ("date", 4)),
    _preferences(("apple", 1), ("banana", 2), ("date", 3), ("elderberry", 4), ("fig", 5)),
    _preferences(("apple", 5), ("banana", 2), ("carrot", 3), ("date", 4), ("elderberry", 1)),
    _preferences(("apple", 2), ("banana", 1), ("carrot", 3), ("date", 4)),
    _preferences(("apple", 3), ("carrot", 1), ("date", 2)),
    _preferences(("apple", 2), ("banana", 1), ("carrot", 3), ("date", 4)),
    _preferences(("apple", 2), ("banana", 1)),
    _preferences(("apple", 2), ("banana", 1), ("carrot", 3), ("date", 4)),
    _preferences(("banana", 1), ("carrot", 2), ("date", 3)),
    _preferences(("apple", 1)),
    _preferences(("apple", 3), ("banana", 2), ("carrot", 1), ("date", 4), ("elderberry", 5)),
    _preferences(("apple", 1), ("banana", 2), ("carrot", 3), ("date", 4)),
]


@pytest.fixture
def uniform_preferences():
    return [[dict(p) for p in ballot] for ballot in UNIFORM_PREFERENCES]


@pytest.fixture
def non_uniform_preferences():
    return [[dict(p) for p in ballot] for ballot in NON_UNIFORM_PREFERENCES]
