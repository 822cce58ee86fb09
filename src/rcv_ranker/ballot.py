"""
Contains Preference and Ballot classes
"""

from __future__ import annotations
from typing import Iterable, List, Mapping, Optional, Set

from dataclasses import dataclass

from rcv_ranker.package_types import PreferenceLike


class DuplicateRankError(ValueError):
    """Raised when a ballot already holds a preference at the requested rank."""


@dataclass
class Preference:
    """A single (candidate, rank) pair on a ballot. Rank 1 is most preferred."""

    candidate: str
    rank: int

    @staticmethod
    def coerce(preference: PreferenceLike) -> Preference:
        """Convert a Preference, a mapping with "candidate" and "rank" keys, or a
        (candidate, rank) pair into a new Preference object.

        :param preference: raw preference
        :type preference: PreferenceLike
        :raises TypeError: if the value is not one of the accepted forms.
        :return: New Preference, never the object passed in.
        :rtype: Preference
        """
        if isinstance(preference, Preference):
            return Preference(preference.candidate, preference.rank)
        if isinstance(preference, Mapping):
            return Preference(preference["candidate"], preference["rank"])
        if isinstance(preference, tuple) and len(preference) == 2:
            return Preference(*preference)
        raise TypeError(f"cannot interpret {preference!r} as a preference")


class Ballot:
    """One voter's ranked preferences."""

    @staticmethod
    def from_ranking(candidates: Iterable[str]) -> Ballot:
        """Build a ballot from candidates listed in order of preference.

        :param candidates: candidate names, most preferred first.
        :type candidates: Iterable[str]
        :rtype: Ballot
        """
        return Ballot([(candidate, rank) for rank, candidate in enumerate(candidates, start=1)])

    def __init__(self, preferences: Optional[Iterable[PreferenceLike]] = None) -> None:
        """Constructor

        :param preferences: Preferences to add, in any of the forms accepted by :meth:`Preference.coerce`. Defaults to None (empty ballot).
        :type preferences: Optional[Iterable[PreferenceLike]], optional
        """
        self._preferences: List[Preference] = []
        if preferences:
            for preference in preferences:
                preference = Preference.coerce(preference)
                self.add_preference(preference.candidate, preference.rank)

    def add_preference(self, candidate: str, rank: int) -> None:
        """Append a preference to the ballot.

        :param candidate: candidate name
        :type candidate: str
        :param rank: rank given to the candidate, starting at 1
        :type rank: int
        :raises TypeError: if candidate is not a string or rank is not an integer.
        :raises ValueError: if rank is less than 1.
        :raises DuplicateRankError: if another preference already holds this rank.
        """
        if not isinstance(candidate, str):
            raise TypeError(f"candidate must be a string, got {type(candidate).__name__}")
        if isinstance(rank, bool) or not isinstance(rank, int):
            raise TypeError(f"rank must be an integer, got {type(rank).__name__}")
        if rank < 1:
            raise ValueError(f"rank must be 1 or greater, got {rank}")

        for preference in self._preferences:
            if preference.rank == rank:
                raise DuplicateRankError(
                    f"rank {rank} already given to {preference.candidate!r}, cannot also give it to {candidate!r}"
                )

        self._preferences.append(Preference(candidate, rank))

    def remove_candidate(self, candidate: str) -> None:
        """Remove a candidate from the ballot and move every lower preference up by one rank,
        so that ranks stay dense from 1. Does nothing if the candidate is not ranked.

        :param candidate: candidate to remove
        :type candidate: str
        """
        removed_rank = None
        kept = []
        for preference in self._preferences:
            if preference.candidate == candidate:
                removed_rank = preference.rank
            else:
                kept.append(preference)

        if removed_rank is None:
            return

        for preference in kept:
            if preference.rank > removed_rank:
                preference.rank -= 1
        self._preferences = kept

    def copy(self) -> Ballot:
        """Make a copy.

        :return: Returns a copy of Ballot object that shares no preference objects with the original.
        :rtype: Ballot
        """
        return Ballot(self._preferences)

    def candidate_at(self, rank: int) -> Optional[str]:
        """Return the candidate ranked at `rank`, or None if no candidate holds that rank."""
        for preference in self._preferences:
            if preference.rank == rank:
                return preference.candidate
        return None

    @property
    def preferences(self) -> List[Preference]:
        return list(self._preferences)

    @property
    def ranking(self) -> List[str]:
        """Candidates ordered from most to least preferred."""
        return [p.candidate for p in sorted(self._preferences, key=lambda p: p.rank)]

    @property
    def candidates(self) -> Set[str]:
        return {p.candidate for p in self._preferences}

    def __len__(self) -> int:
        return len(self._preferences)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ballot):
            return NotImplemented
        return sorted((p.rank, p.candidate) for p in self._preferences) == \
            sorted((p.rank, p.candidate) for p in other._preferences)

    def __repr__(self) -> str:
        return f"Ballot({self.ranking!r})"
