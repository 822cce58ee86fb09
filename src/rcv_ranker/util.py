import os
import pathlib

from rcv_ranker.package_types import Path

###############################################################
# constants

NAN = float("nan")

########################
# helper funcs


def verifyDir(dir_path: Path, make_if_missing: bool = True, error_msg_tail: str = "is not an existing folder") -> pathlib.Path:
    """
    Check that a directory exists and if missing, either error or create it.

    :param dir_path: directory path to verify
    :param make_if_missing: if True, create directory (and parents) if missing
    :param error_msg_tail: if make_if_missing is False and directory missing,
     raise with this error message after the dir_path.
    :return: the directory as a pathlib.Path
    """
    dir_path = pathlib.Path(dir_path)
    if os.path.isdir(dir_path) is False:
        if make_if_missing:
            dir_path.mkdir(parents=True)
        else:
            raise RuntimeError(f"{dir_path} {error_msg_tail}")
    return dir_path


def remove_dup(lst):
    # keeps first occurrence of each item, order preserved
    seen = set()
    return [i for i in lst if not (i in seen or seen.add(i))]
