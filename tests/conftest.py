import pytest

from phragmen.output import output, WARNING


DEFAULT_BALLOTS = [
    ("A", 10, ["X", "Y"]),
    ("B", 20, ["X", "Z"]),
    ("C", 30, ["Y", "Z"]),
    ("C", 50, ["Z"]),
]


@pytest.fixture
def default_ballots():
    # copy, so that tests cannot modify the module-level ballots
    return [(voter_id, budget, list(approved)) for voter_id, budget, approved in DEFAULT_BALLOTS]


@pytest.fixture(autouse=True)
def reset_verbosity():
    # tests and examples modify the verbosity of the global output object
    output.setup(WARNING)
    yield
    output.setup(WARNING)


def assert_aggregates(assignment, tolerance=1e-9):
    """Check that voter loads and candidate support equal the sums over their edges."""
    for voter in assignment.voters:
        edge_sum = sum(assignment.edgeload[edge.index] for edge in voter.edges)
        assert abs(assignment.voterload[voter.index] - edge_sum) <= tolerance
    for cand in assignment.candidates:
        weight_sum = sum(
            assignment.edgeweight[edge.index]
            for edge in assignment.edges
            if edge.cand_index == cand.index
        )
        assert abs(assignment.cansupport[cand.index] - weight_sum) <= tolerance
