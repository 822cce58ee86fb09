"""Contains ElectionTables class which is added into Election.
"""

from typing import Dict, List

import pandas as pd

from rcv_ranker.rounds import RoundResult
from rcv_ranker.util import NAN


class ElectionTables:
    """Extra reporting methods added into Election class"""

    @staticmethod
    def _round_transfers(rounds: List[RoundResult]) -> List[Dict[str, int]]:
        """Change in each candidate's count between a round and the next, with an
        "exhaust" entry for ballots that ran out of preferences. Transfers out of the final round are
        all zero.
        """
        transfers = []
        for rnd, next_rnd in zip(rounds, rounds[1:]):
            transfer = {cand: next_rnd.counts.get(cand, 0) - count for cand, count in rnd.counts.items()}
            transfer["exhaust"] = rnd.active_ballots - next_rnd.active_ballots
            transfers.append(transfer)

        if rounds:
            final_transfer = {cand: 0 for cand in rounds[-1].counts}
            final_transfer["exhaust"] = 0
            transfers.append(final_transfer)

        return transfers

    @staticmethod
    def _candidate_order(rounds: List[RoundResult]) -> List[str]:
        """Winners first, then candidates still standing in the final round by final count,
        then eliminated candidates in reverse order of elimination.
        """
        if not rounds:
            return []

        first_counts = rounds[0].counts
        final = rounds[-1]

        round_eliminated = {}
        for rnd in rounds:
            for cand in rnd.eliminated:
                round_eliminated[cand] = rnd.round_number

        standing = sorted(
            (cand for cand in final.counts if cand not in final.winners),
            key=lambda cand: (-final.counts[cand], cand),
        )
        eliminated = sorted(
            round_eliminated,
            key=lambda cand: (-round_eliminated[cand], -first_counts.get(cand, 0), cand),
        )
        return list(final.winners) + standing + eliminated

    def get_round_by_round_table(self) -> pd.DataFrame:
        """Create a table containing round by round details for the count leading to the winner.

        One row per candidate, plus an "exhaust" row holding the cumulative number of exhausted
        ballots and a "colsum" row. For each round there are count, active percent and transfer columns.
        Counts of candidates no longer standing are left empty.

        :return: round by round table
        :rtype: pd.DataFrame
        """
        rounds = self.get_rounds()
        transfers = self._round_transfers(rounds)

        row_names = self._candidate_order(rounds) + ["exhaust"]
        rcv_df = pd.DataFrame({"candidate": row_names + ["colsum"]}, index=row_names + ["colsum"])

        initial_ballots = rounds[0].active_ballots if rounds else 0

        for rnd, rnd_transfer in zip(rounds, transfers):

            rnd_count_col = f"r{rnd.round_number}_count"
            rnd_percent_col = f"r{rnd.round_number}_active_percent"
            rnd_transfer_col = f"r{rnd.round_number}_transfer"

            for cand, count in rnd.counts.items():
                rcv_df.loc[cand, rnd_count_col] = count
                rcv_df.loc[cand, rnd_percent_col] = 100 * count / rnd.active_ballots if rnd.active_ballots else NAN
                rcv_df.loc[cand, rnd_transfer_col] = rnd_transfer[cand]

            rcv_df.loc["exhaust", rnd_count_col] = initial_ballots - rnd.active_ballots
            rcv_df.loc["exhaust", rnd_percent_col] = 0
            rcv_df.loc["exhaust", rnd_transfer_col] = rnd_transfer["exhaust"]

            # sum round columns
            for col in [rnd_count_col, rnd_percent_col, rnd_transfer_col]:
                rcv_df.loc["colsum", col] = rcv_df.loc[row_names, col].astype(float).sum()

        numeric_cols = [col for col in rcv_df.columns if col != "candidate"]
        rcv_df[numeric_cols] = rcv_df[numeric_cols].astype(float).round(3)

        # remove rownames
        return rcv_df.reset_index(drop=True)

    def get_round_by_round_dict(self) -> Dict:
        """Create a dictionary of round by round results, ready to be dumped to json.

        :return: Dictionary containing election round by round details
        :rtype: Dict
        """
        rounds = self.get_rounds()
        transfers = self._round_transfers(rounds)

        json_dict = {
            "config": {
                "exact_max_rank": self.exact_max_rank,
                "initial_ballots": rounds[0].active_ballots if rounds else 0,
            },
            "results": [],
        }

        for rnd, rnd_transfer in zip(rounds, transfers):

            tally_results = [{"elected": cand, "transfers": {}} for cand in rnd.winners]
            for cand in rnd.eliminated:
                # eliminations in one round share a single combined transfer
                round_transfer = {key: val for key, val in rnd_transfer.items() if val > 0}
                if "exhaust" in round_transfer:
                    round_transfer["exhausted"] = round_transfer.pop("exhaust")
                tally_results.append({"eliminated": cand, "transfers": round_transfer})

            json_dict["results"].append(
                {
                    "round": rnd.round_number,
                    "tally": {cand: count for cand, count in sorted(rnd.counts.items()) if count > 0},
                    "activeBallots": rnd.active_ballots,
                    "tallyResults": tally_results,
                }
            )

        return json_dict

    def get_placement_table(self) -> pd.DataFrame:
        """Create a table with one row per placed candidate. Tied candidates share a place.

        :return: table with "place" and "candidate" columns
        :rtype: pd.DataFrame
        """
        rows = [
            {"place": place, "candidate": cand}
            for place, cands in enumerate(self.get_placements(), start=1)
            for cand in cands
        ]
        return pd.DataFrame(rows, columns=["place", "candidate"])
