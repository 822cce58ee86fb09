"""
Instant-runoff (ranked-choice) election counting.
"""

from rcv_ranker.ballot import Ballot, DuplicateRankError, Preference
from rcv_ranker.election import DegenerateElectionError, Election
from rcv_ranker.rounds import RoundResult

__version__ = "0.1.0"
