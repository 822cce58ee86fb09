"""
Contains ballot file parser functions.

Every parser takes a path and returns a dictionary of lists. The "ranks" entry holds
one list per ballot with candidate names ordered from most to least preferred, ready
for :meth:`rcv_ranker.election.Election.add_rankings`. Any other columns in the file
are passed through under their own names.
"""

from typing import Dict, List

import os
import pathlib

import pandas as pd

import rcv_ranker.util as util
from rcv_ranker.ballot import Ballot
from rcv_ranker.package_types import Path, ParserDict

# cell values that do not name a candidate, compared lowercase
NON_CANDIDATE_MARKS = {"", "nan", "none", "skipped", "under", "undervote", "over", "overvote"}


def add_parser(new_parsers: ParserDict) -> None:
    """Add custom parser functions to the module parser dictionary.

    :param new_parsers: A dictionary containing parser functions, with their names as keys.
    :type new_parsers: Dict
    """
    parser_dict.update(new_parsers)


def get_parser_dict() -> ParserDict:
    """Returns the module parser dictionary. Including both package parsers and
    custom parsers added with :func:`add_parser`.

    :return: A dictionary of parser functions. Keys are parser name strings.
    :rtype: Dict
    """
    return parser_dict


def _read_candidate_codes(codes_path: pathlib.Path) -> Dict[str, str]:
    cand_codes = pd.read_csv(codes_path, encoding="utf8", dtype=str)
    if "code" not in cand_codes.columns or "candidate" not in cand_codes.columns:
        raise RuntimeError(f'{codes_path} must contain "code" and "candidate" columns')
    return {code.strip(): cand.strip() for code, cand in zip(cand_codes["code"], cand_codes["candidate"])}


def rank_column_csv(cvr_path: Path) -> Dict[str, List]:
    """Reads ballot ranking information stored in csv format.
    One ballot per row, with ranking columns appearing in order and named with the word "rank"
    (e.x. "rank1", "rank2", etc). Blank, skipped and overvoted cells are dropped and a candidate
    ranked more than once keeps only their highest ranking.

    :param cvr_path: The path to the ballot file. If a file called "candidate_codes.csv" exists in the same directory, it will be read and columns named "code" and "candidate" will be used to replace candidate codes with candidate names during readin.
    :type cvr_path: Union[str, pathlib.Path]
    :raises RuntimeError: Error raised if the file has no rank columns.
    :return: A dictionary of lists containing all columns in the file. Rank columns are combined into per-ballot lists and stored with the key 'ranks'.
    :rtype: Dict[str, List]
    """

    cvr_path = pathlib.Path(cvr_path)
    df = pd.read_csv(cvr_path, encoding="utf8", dtype=str, keep_default_na=False)

    # find rank columns
    rank_col = [col for col in df.columns if "rank" in col.lower()]
    if not rank_col:
        raise RuntimeError(f'no columns named with "rank" found in {cvr_path}')

    df[rank_col] = df[rank_col].apply(lambda col: col.str.strip())

    # if candidate codes file exist, swap in names
    candidate_codes_fpath = cvr_path.parent / "candidate_codes.csv"
    if os.path.isfile(candidate_codes_fpath):
        cand_codes_dict = _read_candidate_codes(candidate_codes_fpath)
        df[rank_col] = df[rank_col].replace({col: cand_codes_dict for col in rank_col})

    # pull out rank lists
    rank_lists = [list(row) for row in df[rank_col].itertuples(index=False, name=None)]
    ranks = [
        util.remove_dup([mark for mark in marks if mark.lower() not in NON_CANDIDATE_MARKS])
        for marks in rank_lists
    ]

    # assemble dict
    dct = {"ranks": ranks}

    # add in non-rank columns
    for col in df.columns:
        if col not in rank_col:
            dct[col] = df[col].tolist()

    return dct


def candidate_column_csv(cvr_path: Path) -> Dict[str, List]:
    """
    Reads ballot ranking information stored in csv file called "cvr.csv".
    Candidate column names. One ballot per row, with ranks given to candidates in cell rows.

    Candidate columns are identified by reading a "candidate_codes.csv" file, if present. Columns present in the file that are not listed in the candidate codes are parsed as auxillary ballot information (precinct ID, etc). Without a codes file every column is a candidate column.

    :param cvr_path: The path to the directory containing the ballot and candidate codes files.
    :type cvr_path: Union[str, pathlib.Path]
    :raises DuplicateRankError: Error raised if a row gives the same rank to two candidates.
    :return: A dictionary of lists containing all columns in the file. Rankings are stored with the key 'ranks'.
    :rtype: Dict[str, List]
    """

    cvr_path = pathlib.Path(cvr_path)

    cvr = pd.read_csv(cvr_path / "cvr.csv", encoding="utf8", dtype=str, keep_default_na=False)

    candidate_codes_fpath = cvr_path / "candidate_codes.csv"
    if os.path.isfile(candidate_codes_fpath):
        candidate_dict = _read_candidate_codes(candidate_codes_fpath)
    else:
        candidate_dict = {col: col for col in cvr.columns}

    missing = [code for code in candidate_dict if code not in cvr.columns]
    if missing:
        raise RuntimeError(f"candidate codes {missing} not found in columns of {cvr_path / 'cvr.csv'}")

    ballots = []
    for _, row in cvr.iterrows():
        # Ballot rejects repeated ranks, its ranking closes any gaps
        ballot = Ballot([
            (candidate_dict[code], int(float(row[code])))
            for code in candidate_dict
            if row[code].strip().lower() not in NON_CANDIDATE_MARKS
        ])
        ballots.append(ballot.ranking)

    ballot_dict = {"ranks": ballots}
    for col in cvr.columns:
        if col not in candidate_dict:
            ballot_dict[col] = cvr[col].tolist()

    return ballot_dict


parser_dict = {
    "rank_column_csv": rank_column_csv,
    "candidate_column_csv": candidate_column_csv,
}
