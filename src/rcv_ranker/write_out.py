"""
Functions that write election results under an output directory. Each writer creates
its own sub-directory and names the file after `uid`.
"""
import json
import pathlib

from rcv_ranker.election import Election
from rcv_ranker.package_types import Path
import rcv_ranker.util as util


def write_placements(election: Election, save_dir: Path, uid: str) -> pathlib.Path:
    """Write the placement table to '{save_dir}/placements/{uid}.csv'

    :param election: counted election
    :type election: Election
    :param save_dir: Directory path to write tables to
    :type save_dir: Union[str, pathlib.Path]
    :param uid: file name stem
    :type uid: str
    :return: path of the written file
    :rtype: pathlib.Path
    """
    save_path = util.verifyDir(pathlib.Path(save_dir) / "placements")
    out_path = save_path / f"{uid}.csv"
    election.get_placement_table().to_csv(out_path, index=False)
    return out_path


def write_round_by_round_table(election: Election, save_dir: Path, uid: str) -> pathlib.Path:
    """Write the round by round table to '{save_dir}/round_by_round_table/{uid}.csv'"""
    save_path = util.verifyDir(pathlib.Path(save_dir) / "round_by_round_table")
    out_path = save_path / f"{uid}.csv"
    election.get_round_by_round_table().to_csv(out_path, index=False)
    return out_path


def write_round_by_round_json(election: Election, save_dir: Path, uid: str) -> pathlib.Path:
    """Write the round by round dictionary to '{save_dir}/round_by_round_json/{uid}.json'"""
    save_path = util.verifyDir(pathlib.Path(save_dir) / "round_by_round_json")
    out_path = save_path / f"{uid}.json"
    with open(out_path, "w") as outfile:
        json.dump(election.get_round_by_round_dict(), outfile, indent=2)
    return out_path
