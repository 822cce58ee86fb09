"""
Round driver. Runs successive rounds of elimination to find the winner and re-runs
the count on a shrinking candidate set to find each lower place.
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Dict, List, Optional

import logging

from dataclasses import dataclass, field

if TYPE_CHECKING:
    from rcv_ranker.election import Election

logger = logging.getLogger(__name__)


@dataclass
class RoundResult:
    """First preference tally of one round and what was decided from it."""
    round_number: int
    counts: Dict[str, int]
    active_ballots: int
    eliminated: List[str] = field(default_factory=list)
    winners: List[str] = field(default_factory=list)


def compute_winner(election: Election, rounds: Optional[List[RoundResult]] = None) -> List[str]:
    """Run rounds of elimination until a winner, or a set of tied winners, is found.

    Each round works on a copy of the previous round's ballots, `election` itself is never
    modified. The losers chosen by :meth:`Election.next_round` on one round are eliminated
    from the copy used for the next.

    :param election: election to count
    :type election: Election
    :param rounds: If a list is passed, a :class:`RoundResult` is appended to it for every round. Defaults to None
    :type rounds: Optional[List[RoundResult]], optional
    :return: winning candidates sorted by name. Empty if the election has no candidates.
    :rtype: List[str]
    """
    round_number = len(rounds) + 1 if rounds is not None else None

    if election.have_winner():
        winners = election.winners()
        logger.debug("winner(s) found: %s", winners)
        if rounds is not None:
            rounds.append(RoundResult(round_number, election.count_preference(1), len(election.ballots),
                                      winners=winners))
        return winners

    next_election = election.copy()
    losers = election.next_round()
    logger.debug("no winner, eliminating %s", losers)

    if rounds is not None:
        rounds.append(RoundResult(round_number, election.count_preference(1), len(election.ballots),
                                  eliminated=losers))

    for loser in losers:
        next_election.eliminate_candidate(loser)

    return compute_winner(next_election, rounds)


def nth_place(election: Election, n: int) -> List[str]:
    """Return the candidate(s) placed `n`-th. The winners of each place are removed from a
    copy of the ballots and the count is re-run to find the next place.

    :param election: election to count
    :type election: Election
    :param n: place to return, 1 for the winner(s)
    :type n: int
    :raises ValueError: if n is less than 1.
    :return: candidates in `n`-th place sorted by name, empty once all candidates have been placed.
    :rtype: List[str]
    """
    if n < 1:
        raise ValueError(f"place must be 1 or greater, got {n}")

    if n == 1:
        return compute_winner(election)

    next_election = election.copy()
    for winner in compute_winner(next_election):
        next_election.eliminate_candidate(winner)

    return nth_place(next_election, n - 1)


def placements(election: Election) -> List[List[str]]:
    """Return every place in order, [1st place candidates, 2nd place candidates, ...]."""
    places = []
    place = nth_place(election, 1)
    while place:
        places.append(place)
        place = nth_place(election, len(places) + 1)
    return places


class ElectionRounds:
    """Round driver methods mixed into :class:`rcv_ranker.election.Election`."""

    def get_winner(self) -> List[str]:
        return compute_winner(self)

    def get_nth_candidate(self, n: int) -> List[str]:
        return nth_place(self, n)

    def get_placements(self) -> List[List[str]]:
        return placements(self)

    def get_rounds(self) -> List[RoundResult]:
        """Tally and outcome of each round leading to the winner."""
        rounds = []
        compute_winner(self, rounds)
        return rounds
