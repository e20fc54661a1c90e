"""
Read and write ballots to files.

Elections are stored in .phragmen.yaml files, for example::

    description: three voters, two seats
    ballots:
    - {voter: A, budget: 10, approved: [X, Y]}
    - {voter: B, budget: 20, approved: [X, Z]}
    - {voter: C, budget: 30, approved: [Y, Z]}
    num_to_elect: 2
    result: [Z, Y]

Only `ballots` is mandatory. `result` holds the expected elected candidates (in election
order) and is used to store test instances.
"""

import os
import ruamel.yaml
from phragmen import misc


#: Valid keys for .phragmen.yaml files.
PHRAGMEN_YAML_VALID_KEYS = [
    "ballots",
    "num_to_elect",
    "result",
    "description",
]

#: Valid keys of a single ballot in a .phragmen.yaml file.
BALLOT_VALID_KEYS = ["voter", "budget", "approved"]


class MalformattedFileException(Exception):
    """Malformatted .phragmen.yaml file."""


def get_file_names(dir_name, filename_extensions=None):
    """
    List all file names in a directory that fit the specified filename extensions.

    .. important::

        Not recursive, i.e., does not look into sub-directories!

    Parameters
    ----------
        dir_name : str
            Path of directory to be searched for files.

        filename_extensions : list of str, optional
            File names must have one of these extensions.

    Returns
    -------
        list of str
            List of file names contained in the directory.
    """
    files = []
    for _, _, filenames in os.walk(dir_name):
        files = filenames
        break  # do not consider sub-directories
    if len(files) == 0:
        raise FileNotFoundError(f"No files found in {dir_name}")
    if filename_extensions:
        files = [
            f for f in files if any(f.endswith(extension) for extension in filename_extensions)
        ]
    return sorted(files)


def _yaml_flow_style_list(x):
    yamllist = ruamel.yaml.comments.CommentedSeq(x)
    yamllist.fa.set_flow_style()
    return yamllist


def _yaml_flow_style_map(x):
    yamlmap = ruamel.yaml.comments.CommentedMap(x)
    yamlmap.fa.set_flow_style()
    return yamlmap


def _read_ballot(filename, entry):
    if not isinstance(entry, dict):
        raise MalformattedFileException(f"{filename}: ballot {entry} is not a mapping.")
    for key in entry.keys():
        if key not in BALLOT_VALID_KEYS:
            raise MalformattedFileException(f'{filename}: ballot key "{key}" is not valid.')
    for key in BALLOT_VALID_KEYS:
        if key not in entry.keys():
            raise MalformattedFileException(f'{filename}: ballot {entry} lacks key "{key}".')
    approved = entry["approved"]
    if approved is None:
        approved = []
    if not isinstance(approved, list):
        raise MalformattedFileException(
            f"{filename}: approved candidates of voter {entry['voter']} are not a list."
        )
    return str(entry["voter"]), entry["budget"], [str(cand_id) for cand_id in approved]


def read_phragmen_yaml_file(filename):
    """
    Read contents of a .phragmen.yaml file.

    Parameters
    ----------
        filename : str
            File name of the .phragmen.yaml file.

    Returns
    -------
        ballots : list of tuple
            Ballots of the form `(voter_id, budget, approved_candidate_ids)`.

        num_to_elect : int or None
            The number of seats.

        data : dict
            The YAML data from `filename`.
    """
    yaml = ruamel.yaml.YAML(typ="safe", pure=True)
    with open(filename) as inputfile:
        data = yaml.load(inputfile)
    if not isinstance(data, dict) or "ballots" not in data.keys():
        raise MalformattedFileException(f"{filename} does not contain ballots.")
    for key in data.keys():
        if key not in PHRAGMEN_YAML_VALID_KEYS:
            raise MalformattedFileException(f'Key "{key}" is not valid (undefined).')

    if data["ballots"] is not None and not isinstance(data["ballots"], list):
        raise MalformattedFileException(f"{filename}: ballots are not a list.")
    ballots = [_read_ballot(filename, entry) for entry in data["ballots"] or []]

    num_to_elect = data.get("num_to_elect")
    if num_to_elect is not None:
        if not misc.is_index(num_to_elect):
            raise MalformattedFileException(
                f"{filename}: num_to_elect ({num_to_elect}) is not a non-negative integer."
            )
        num_to_elect = int(num_to_elect)

    if "result" in data.keys() and data["result"] is not None:
        data["result"] = [str(cand_id) for cand_id in data["result"]]

    return ballots, num_to_elect, data


def write_phragmen_yaml_file(
    filename, ballots, num_to_elect=None, result=None, description=None
):
    """
    Write ballots (and optionally the number of seats and expected result) to a yaml file.

    Parameters
    ----------
        filename : str
            File name of the .phragmen.yaml file.

        ballots : iterable of tuple
            Ballots of the form `(voter_id, budget, approved_candidate_ids)`.

        num_to_elect : int, optional
            The number of seats.

        result : list of str or phragmen.result.ElectionResult, optional
            The elected candidates, in election order.

        description : str, optional
            An optional description of the data.
    """
    data = {}
    if description is not None:
        data["description"] = description
    data["ballots"] = [
        _yaml_flow_style_map(
            {
                "voter": voter_id,
                "budget": budget,
                "approved": _yaml_flow_style_list(list(approved)),
            }
        )
        for voter_id, budget, approved in ballots
    ]
    if num_to_elect is not None:
        data["num_to_elect"] = num_to_elect
    if result is not None:
        if hasattr(result, "elected_ids"):
            result = result.elected_ids
        data["result"] = _yaml_flow_style_list(list(result))

    yaml = ruamel.yaml.YAML()
    yaml.width = 120
    with open(filename, "w") as outfile:
        yaml.dump(data, outfile)


def read_phragmen_yaml_files_from_dir(dir_name):
    """
    Read all .phragmen.yaml files in a given directory.

    Parameters
    ----------
        dir_name : str
            Path of the directory to be searched.

    Returns
    -------
        dict
            Dictionary with file names as keys and `(ballots, num_to_elect, data)` as values.
    """
    files = get_file_names(dir_name, filename_extensions=[".phragmen.yaml"])
    return {f: read_phragmen_yaml_file(os.path.join(dir_name, f)) for f in files}
