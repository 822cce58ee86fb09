"""
Contains the Election class.
Defines the counting, tie-break and elimination steps of a single round and adds in
the round driver from rounds.py and the table methods from tables.py.
"""
from __future__ import annotations
from typing import Iterable, List, Set

import logging

from rcv_ranker.ballot import Ballot
from rcv_ranker.package_types import Counts, PreferenceLike
from rcv_ranker.rounds import ElectionRounds
from rcv_ranker.tables import ElectionTables

logger = logging.getLogger(__name__)


class DegenerateElectionError(RuntimeError):
    """Raised when a vote fraction is requested from an election with no ballots."""


class Election(ElectionRounds, ElectionTables):
    """
    Working set of ballots and active candidates for one round of an instant-runoff count.
    Rounds are never run in place: the round driver builds a fresh Election from copied
    ballots for every round, so an Election passed in by a caller is left untouched.
    """

    def __init__(self, exact_max_rank: bool = True) -> None:
        """Constructor

        :param exact_max_rank: If True, `max_rank` is recomputed as the longest remaining ballot after each elimination. If False, it is decremented by one per elimination instead. Defaults to True
        :type exact_max_rank: bool, optional
        """
        self.exact_max_rank = exact_max_rank

        self.ballots: List[Ballot] = []
        self.candidates: Set[str] = set()
        self.max_rank = 0

    def copy(self) -> Election:
        """Make a copy containing copies of every ballot, with the same options.

        :rtype: Election
        """
        election = Election(exact_max_rank=self.exact_max_rank)
        for ballot in self.ballots:
            election.add_ballot(ballot.copy())
        return election

    def add_ballot(self, ballot: Ballot) -> None:
        """Add a ballot to the election. The election takes ownership of the ballot,
        pass a copy if the caller keeps using it. Empty ballots are exhausted from the start and are not kept.

        :param ballot: ballot to add
        :type ballot: Ballot
        """
        if not ballot:
            return
        self.ballots.append(ballot)
        self.candidates.update(ballot.candidates)
        self.max_rank = max(self.max_rank, len(ballot))

    def add_preferences(self, preferences: Iterable[PreferenceLike]) -> None:
        """Build a ballot from a list of preferences and add it to the election.

        :param preferences: preferences in any form accepted by :meth:`Preference.coerce`
        :type preferences: Iterable[PreferenceLike]
        """
        self.add_ballot(Ballot(preferences))

    def add_rankings(self, rankings: Iterable[Iterable[str]]) -> None:
        """Add one ballot per ranking. Each ranking lists candidates most preferred first.

        :param rankings: iterable of ordered candidate lists, such as the "ranks" list returned by a parser.
        :type rankings: Iterable[Iterable[str]]
        """
        for ranking in rankings:
            self.add_ballot(Ballot.from_ranking(ranking))

    def count_preference(self, rank: int) -> Counts:
        """Count, for every active candidate, the ballots that give that candidate exactly `rank`.
        Candidates without any such ballot are included with a count of zero.

        :param rank: rank to count
        :type rank: int
        :rtype: Dict[str, int]
        """
        counts = {candidate: 0 for candidate in self.candidates}
        for ballot in self.ballots:
            candidate = ballot.candidate_at(rank)
            if candidate is not None:
                counts[candidate] += 1
        return counts

    @staticmethod
    def least_votes(counts: Counts) -> List[str]:
        """Return all candidates with the lowest count, sorted by name."""
        if not counts:
            return []
        least = min(counts.values())
        return sorted(candidate for candidate, count in counts.items() if count == least)

    @staticmethod
    def most_votes(counts: Counts) -> List[str]:
        """Return all candidates with the highest count, sorted by name."""
        if not counts:
            return []
        most = max(counts.values())
        return sorted(candidate for candidate, count in counts.items() if count == most)

    def next_round(self) -> List[str]:
        """Determine which candidates to eliminate this round.

        Starts from the candidates with the fewest first preferences. While more than one is
        tied, each deeper rank up to `max_rank` narrows the tied set to those that also hold
        the fewest preferences at that rank. A rank whose fewest-preference candidates are
        all outside the tied set leaves it unchanged. Candidates still tied after the last
        rank are all eliminated together.

        :return: candidates to eliminate, sorted by name.
        :rtype: List[str]
        """
        tied = self.least_votes(self.count_preference(1))

        rank = 2
        while len(tied) > 1 and rank <= self.max_rank:
            rank_least = set(self.least_votes(self.count_preference(rank)))
            narrowed = [candidate for candidate in tied if candidate in rank_least]
            if narrowed:
                tied = narrowed
            rank += 1

        return tied

    def eliminate_candidate(self, candidate: str) -> None:
        """Remove a candidate from the election. Lower preferences on each ballot move up
        one rank and ballots left with no preferences are dropped as exhausted.

        :param candidate: candidate to eliminate
        :type candidate: str
        """
        self.candidates.discard(candidate)

        for ballot in self.ballots:
            ballot.remove_candidate(candidate)

        n_before = len(self.ballots)
        self.ballots = [ballot for ballot in self.ballots if ballot]
        if len(self.ballots) != n_before:
            logger.debug("eliminating %s exhausted %d ballot(s)", candidate, n_before - len(self.ballots))

        if self.exact_max_rank:
            self.max_rank = max((len(ballot) for ballot in self.ballots), default=0)
        else:
            self.max_rank = max(self.max_rank - 1, 0)

    def have_winner(self) -> bool:
        """Check if the count is over. That is when the leading candidate holds more than half
        the remaining ballots, when every remaining candidate has the same number of first
        preferences, or when no candidates remain.

        :rtype: bool
        """
        if not self.candidates:
            return True

        counts = self.count_preference(1)
        leaders = self.most_votes(counts)

        if counts[leaders[0]] * 2 > len(self.ballots):
            return True
        return len(leaders) == len(self.candidates)

    def winners(self) -> List[str]:
        """Return the candidates with the most first preferences, sorted by name. Only
        meaningful once :meth:`have_winner` is True.

        :rtype: List[str]
        """
        return self.most_votes(self.count_preference(1))

    def vote_share(self, candidate: str, rank: int = 1) -> float:
        """Fraction of remaining ballots that give `candidate` exactly `rank`.

        :raises DegenerateElectionError: if the election has no ballots.
        :rtype: float
        """
        if not self.ballots:
            raise DegenerateElectionError("cannot compute a vote share over zero ballots")
        return self.count_preference(rank).get(candidate, 0) / len(self.ballots)

    def __repr__(self) -> str:
        return f"Election(ballots={len(self.ballots)}, candidates={sorted(self.candidates)!r})"


def from_rankings(rankings: Iterable[Iterable[str]], exact_max_rank: bool = True) -> Election:
    """Convenience constructor, builds an Election from ordered candidate lists."""
    election = Election(exact_max_rank=exact_max_rank)
    election.add_rankings(rankings)
    return election


def from_parsed(ballot_dict: dict, exact_max_rank: bool = True) -> Election:
    """Build an Election from the dict of lists returned by a parser function."""
    if "ranks" not in ballot_dict:
        raise RuntimeError('Parsed ballots do not contain field "ranks"')
    return from_rankings(ballot_dict["ranks"], exact_max_rank=exact_max_rank)
