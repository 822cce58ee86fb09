import pathlib

from typing import (Callable, Dict, List, Mapping, Tuple, Union)

# used in parser function
Path = Union[str, pathlib.Path]

# candidate name -> vote count
Counts = Dict[str, int]

# accepted raw preference forms, see Preference.coerce
PreferenceLike = Union["Preference", Mapping, Tuple[str, int]]

# ballot information in dict-of-list form
BallotDictOfLists = Dict[str, List]

# returned from parser module, get_parser_dict
ParserDict = Dict[str, Callable[[Path], BallotDictOfLists]]
