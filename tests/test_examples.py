"""
Unit tests for examples/*.
"""

import runpy
import pytest
from pathlib import Path

from phragmen.output import output, WARNING

EXAMPLES_DIR = Path(__file__).parent.parent / "examples"


@pytest.fixture
def run_example(capfd):
    """Run an example script and return what it printed to stdout."""

    def _run(filename):
        runpy.run_path(str(EXAMPLES_DIR / filename), run_name="__main__")
        # examples modify the verbosity level
        output.set_verbosity(WARNING)
        return capfd.readouterr().out

    return _run


def test_simple_py(run_example):
    out = run_example("simple.py")
    assert "Electing 2 candidates with seq-Phragmen" in out
    assert " C (50): Z" in out
    assert "Phragmen's Sequential Rule (seq-Phragmen)" in out
    assert "electing candidate number 1: Z" in out
    assert "electing candidate number 2: Y" in out
    assert "maximum load increased to 0.01" in out
    assert "2 elected candidates: Z, Y" in out
    assert "corresponding weights:" in out
    assert "A -> X" not in out


def test_file_examples_py(run_example):
    out = run_example("file_examples.py")
    assert "a council with two parties and an independent candidate" in out
    assert "3 elected candidates: Anna, Dora, Bert" in out
    assert "stored result: Anna, Dora, Bert" in out
    # details are not shown with verbosity INFO
    assert "electing candidate number" not in out


def test_random_ballots_py(run_example):
    out = run_example("random_ballots.py")
    assert "2 elected candidates:" in out
    assert "bipartite graph with 8 voters" in out
    assert "is bipartite: True" in out
    assert "support of c" in out
