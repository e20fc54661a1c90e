"""
Unit tests for phragmen/fileio.py.
"""

import pytest
import os
from fractions import Fraction

from phragmen import fileio
from phragmen.seqphragmen import compute_seqphragmen

CURRDIR = os.path.dirname(os.path.abspath(__file__))
DATA_DIR = os.path.join(CURRDIR, "data")
DATA_FAIL_DIR = os.path.join(CURRDIR, "data-fail")


def test_read_default_file(default_ballots):
    ballots, num_to_elect, data = fileio.read_phragmen_yaml_file(
        os.path.join(DATA_DIR, "default.phragmen.yaml")
    )
    assert ballots == default_ballots
    assert num_to_elect == 2
    assert data["result"] == ["Z", "Y"]
    assert data["description"] == "default example, Z is elected first"


def test_ids_are_strings():
    ballots, num_to_elect, data = fileio.read_phragmen_yaml_file(
        os.path.join(DATA_DIR, "no-seats.phragmen.yaml")
    )
    assert ballots == [("1", 4, ["2", "3"])]
    assert num_to_elect is None
    assert "result" not in data


def test_read_files_from_dir():
    instances = fileio.read_phragmen_yaml_files_from_dir(DATA_DIR)
    assert sorted(instances.keys()) == [
        "all-seats.phragmen.yaml",
        "default.phragmen.yaml",
        "no-seats.phragmen.yaml",
        "party-list.phragmen.yaml",
        "tie.phragmen.yaml",
    ]
    for filename, (ballots, num_to_elect, data) in instances.items():
        assert isinstance(filename, str)
        assert len(ballots) > 0


@pytest.mark.parametrize(
    "filename",
    fileio.get_file_names(DATA_DIR, filename_extensions=[".phragmen.yaml"]),
)
@pytest.mark.parametrize("algorithm", ["float-fractions", "standard-fractions"])
def test_stored_results(filename, algorithm):
    ballots, num_to_elect, data = fileio.read_phragmen_yaml_file(os.path.join(DATA_DIR, filename))
    if num_to_elect is None:
        pytest.skip("no number of seats given")
    result = compute_seqphragmen(ballots, num_to_elect, algorithm=algorithm)
    assert result.elected_ids == data["result"]


@pytest.mark.parametrize(
    "filename",
    fileio.get_file_names(DATA_FAIL_DIR, filename_extensions=[".phragmen.yaml"]),
)
def test_malformatted_files(filename):
    with pytest.raises(fileio.MalformattedFileException):
        fileio.read_phragmen_yaml_file(os.path.join(DATA_FAIL_DIR, filename))


def test_get_file_names(tmp_path):
    (tmp_path / "a.phragmen.yaml").write_text("ballots: []\n")
    (tmp_path / "b.txt").write_text("")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "c.phragmen.yaml").write_text("ballots: []\n")

    assert fileio.get_file_names(tmp_path) == ["a.phragmen.yaml", "b.txt"]
    assert fileio.get_file_names(tmp_path, filename_extensions=[".phragmen.yaml"]) == [
        "a.phragmen.yaml"
    ]
    with pytest.raises(FileNotFoundError):
        fileio.get_file_names(tmp_path / "sub" / "missing")


def test_write_and_read(tmp_path, default_ballots):
    filename = str(tmp_path / "election.phragmen.yaml")
    fileio.write_phragmen_yaml_file(
        filename, default_ballots, num_to_elect=2, result=["Z", "Y"], description="test"
    )
    ballots, num_to_elect, data = fileio.read_phragmen_yaml_file(filename)

    assert ballots == default_ballots
    assert num_to_elect == 2
    assert data["result"] == ["Z", "Y"]
    assert data["description"] == "test"

    with open(filename) as inputfile:
        content = inputfile.read()
    assert "- {voter: A, budget: 10, approved: [X, Y]}" in content


def test_write_election_result(tmp_path, default_ballots):
    filename = str(tmp_path / "election.phragmen.yaml")
    result = compute_seqphragmen(default_ballots, 3)
    fileio.write_phragmen_yaml_file(filename, default_ballots, num_to_elect=3, result=result)
    _, _, data = fileio.read_phragmen_yaml_file(filename)
    assert data["result"] == ["Z", "Y", "X"]


def test_write_minimal(tmp_path):
    filename = str(tmp_path / "minimal.phragmen.yaml")
    fileio.write_phragmen_yaml_file(filename, [("A", 1, [])])
    ballots, num_to_elect, data = fileio.read_phragmen_yaml_file(filename)
    assert ballots == [("A", 1, [])]
    assert num_to_elect is None
    assert sorted(data.keys()) == ["ballots"]


def test_float_budgets(tmp_path):
    filename = str(tmp_path / "floats.phragmen.yaml")
    fileio.write_phragmen_yaml_file(filename, [("A", 0.5, ["X"]), ("B", 1.5, ["X", "Y"])])
    ballots, _, _ = fileio.read_phragmen_yaml_file(filename)
    assert ballots == [("A", 0.5, ["X"]), ("B", 1.5, ["X", "Y"])]

    result = compute_seqphragmen(ballots, 2, algorithm="standard-fractions")
    assert result.elected_ids == ["X", "Y"]
    # B contributes 9/14 of its budget to X
    assert result.candidate_support()["X"] == Fraction(8, 7)


@pytest.mark.parametrize("num_to_elect", ["two", "1.7", "-1", "true"])
def test_invalid_num_to_elect(tmp_path, num_to_elect):
    filename = tmp_path / "invalid.phragmen.yaml"
    filename.write_text(
        "ballots:\n"
        "- {voter: A, budget: 10, approved: [X]}\n"
        f"num_to_elect: {num_to_elect}\n"
    )
    with pytest.raises(fileio.MalformattedFileException):
        fileio.read_phragmen_yaml_file(filename)


@pytest.mark.parametrize("ballots", ["5", "A", "{voter: A, budget: 10, approved: [X]}"])
def test_ballots_not_a_list(tmp_path, ballots):
    filename = tmp_path / "invalid.phragmen.yaml"
    filename.write_text(f"ballots: {ballots}\n")
    with pytest.raises(fileio.MalformattedFileException):
        fileio.read_phragmen_yaml_file(filename)
