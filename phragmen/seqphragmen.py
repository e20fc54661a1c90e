"""Phragmen's sequential rule (seq-Phragmen) with budgets, loads and edge weights.

Module Attributes
-----------------
ALGORITHM_NAMES : dict of str to str
    A dictionary mapping valid algorithm identifiers to their descriptions.
    The algorithm determines the number type used for loads, scores and weights.

ALGORITHMS : tuple of str
    All algorithms for seq-Phragmen, sorted by speed.
"""

import math
from phragmen.output import output
from phragmen import misc
from phragmen.assignment import Assignment, UnknownAlgorithm, ALGORITHMS, mpq
from phragmen.ballots import build
from phragmen.misc import header, str_loads, str_set_of_candidates
from phragmen.result import ElectionResult


LONGNAME = "Phragmen's Sequential Rule (seq-Phragmen)"

ALGORITHM_NAMES = {
    "float-fractions": "Standard algorithm (using floats instead of fractions)",
    "gmpy2-fractions": "Standard algorithm (using gmpy2 fractions)",
    "standard-fractions": "Standard algorithm (using standard Python fractions)",
}


class InvalidSeatCount(ValueError):
    """
    Error: the number of seats is negative, not an integer or exceeds the number of candidates.

    Parameters
    ----------
        num_to_elect : object
            The requested number of seats.

        num_cand : int
            The number of distinct candidates.
    """

    def __init__(self, num_to_elect, num_cand):
        message = (
            f"Cannot elect {num_to_elect} candidates: the number of seats must be an integer "
            f"between 0 and the number of candidates ({num_cand})."
        )
        super().__init__(message)


class UnelectableCandidate(RuntimeError):
    """
    Error: a seat has to be filled but no remaining candidate is approved by anyone.

    Candidates whose approvers have a total budget of 0 have an infinite score and are
    never elected.

    Parameters
    ----------
        seat : int
            The seat (counting from 1) that cannot be filled.

        remaining : list of str
            Identifiers of the remaining (unelectable) candidates.
    """

    def __init__(self, seat, remaining):
        message = (
            f"Seat {seat} cannot be filled: none of the remaining candidates "
            f"({', '.join(str(cand_id) for cand_id in remaining)}) has positive approval."
        )
        super().__init__(message)


def _available_algorithms():
    """Verify which algorithms are supported on the current machine."""
    available = []
    for algorithm in ALGORITHMS:
        if algorithm == "gmpy2-fractions" and not mpq:
            continue
        available.append(algorithm)
    return available


available_algorithms = _available_algorithms()


def fastest_available_algorithm():
    """
    Return the fastest algorithm for seq-Phragmen that is available on this system.

    Returns
    -------
        str
    """
    # ALGORITHMS is sorted by speed and float-fractions is always available
    return available_algorithms[0]


def verify_compute_parameters(num_cand, num_to_elect, algorithm):
    """
    Basic checks for parameter values, done before anything is computed.

    Parameters
    ----------
        num_cand : int
            The number of distinct candidates.

        num_to_elect : int
            The number of seats.

        algorithm : str
            The algorithm to be used.
    """
    if not misc.is_index(num_to_elect) or num_to_elect > num_cand:
        raise InvalidSeatCount(num_to_elect, num_cand)

    if algorithm not in ALGORITHMS:
        raise UnknownAlgorithm(algorithm)


def compute_seqphragmen(ballots, num_to_elect, algorithm="fastest"):
    """
    Compute the outcome of Phragmen's sequential rule (seq-Phragmen).

    In every round the candidate is elected that minimizes the maximum load of its
    approvers, if its unit cost is shared among them in proportion to their budgets. Ties
    are broken in favor of the candidate mentioned first in `ballots`. Finally, the budget
    of every voter is split among its approved candidates in proportion to the loads.

    For a mathematical description of this rule, see e.g.
    "Phragmén's voting methods and justified representation".
    Markus Brill, Rupert Freeman, Svante Janson, Martin Lackner.
    <https://arxiv.org/abs/2102.12305>

    .. doctest::

        >>> ballots = [("A", 10, ["X", "Y"]), ("B", 20, ["X", "Z"]),
        ...            ("C", 30, ["Y", "Z"]), ("C", 50, ["Z"])]
        >>> compute_seqphragmen(ballots, 2).elected_ids
        ['Z', 'Y']

    Parameters
    ----------
        ballots : iterable of tuple
            Ballots of the form `(voter_id, budget, approved_candidate_ids)`.

        num_to_elect : int
            The number of seats, between 0 and the number of distinct candidates.

        algorithm : str, optional
            The algorithm (number type) to be used.

            The following algorithms are available:

            .. doctest::

                >>> ALGORITHMS
                ('float-fractions', 'gmpy2-fractions', 'standard-fractions')

            `"fastest"` selects the fastest available one.

    Returns
    -------
        phragmen.result.ElectionResult
    """
    if algorithm == "fastest":
        algorithm = fastest_available_algorithm()
    voters, candidates = build(ballots)
    verify_compute_parameters(
        num_cand=len(candidates), num_to_elect=num_to_elect, algorithm=algorithm
    )

    assignment = Assignment(voters, candidates, algorithm=algorithm)
    detailed_info = _seqphragmen_algorithm(assignment, num_to_elect)
    result = ElectionResult(assignment, detailed_info["next_cand"], rounds=detailed_info)

    # optional output
    output.info(header(LONGNAME), wrap=False)
    output.details(f"Algorithm: {ALGORITHM_NAMES[algorithm]}\n")
    cand_names = result.cand_names
    for i, next_cand in enumerate(detailed_info["next_cand"]):
        tied_cands = detailed_info["tied_cands"][i]
        max_load = detailed_info["max_load"][i]
        output.details(f"electing candidate number {i + 1}: {cand_names[next_cand]}")
        output.details(f"maximum load increased to {max_load}", indent=" ")
        output.details(" load distribution:")
        output.details(str_loads(detailed_info["load"][i]), indent="  ")
        if len(tied_cands) > 1:
            output.details(f"tie broken in favor of {cand_names[next_cand]},", indent=" ")
            output.details(
                f"candidates {str_set_of_candidates(tied_cands, cand_names=cand_names)}"
                f" are tied",
                indent=" ",
            )
        output.details("")
    output.info(result.str_elected() + "\n")
    output.details("corresponding weights:")
    output.details(result.str_weights() + "\n", wrap=False)
    # end of optional output

    return result


def _score_candidates(assignment):
    """
    Compute the score of every unelected candidate.

    The score of a candidate is the maximum load of its approvers if it was elected now.
    Candidates without approval get an infinite score.
    """
    division = assignment.division
    for cand in assignment.candidates:
        if assignment.is_elected(cand):
            continue
        approval = assignment.canapproval[cand.index]
        if approval == 0:
            assignment.set_score(cand, math.inf)
        else:
            assignment.set_score(cand, division(1, approval))

    for voter in assignment.voters:
        budget = assignment.voterbudget[voter.index]
        voter_load = assignment.voterload[voter.index]
        for edge in voter.edges:
            if assignment.canelected[edge.cand_index]:
                continue
            approval = assignment.canapproval[edge.cand_index]
            if approval == 0:
                continue
            assignment.canscore[edge.cand_index] += division(budget * voter_load, approval)
            output.debug2(
                f"score of {edge.cand_id} increased to {assignment.canscore[edge.cand_index]}"
                f" (voter {edge.voter_id})"
            )

    output.debug(
        "scores: "
        + ", ".join(
            f"{cand.cand_id}: {assignment.canscore[cand.index]}"
            for cand in assignment.candidates
            if not assignment.is_elected(cand)
        )
    )


def _select_candidate(assignment):
    """
    Return the unelected candidate with minimum score (and all candidates tied with it).

    Only candidates with nonzero approval are electable, even if their score overflows to
    infinity. The scan is in candidate index order and only a strictly smaller score replaces
    the current best candidate. Returns `(None, [])` if no unelected candidate is electable.
    """
    electable = [
        cand
        for cand in assignment.candidates
        if not assignment.is_elected(cand) and assignment.canapproval[cand.index] != 0
    ]
    if not electable:
        return None, []

    best_cand = electable[0]
    best_score = assignment.canscore[best_cand.index]
    for cand in electable[1:]:
        if assignment.canscore[cand.index] < best_score:
            best_cand = cand
            best_score = assignment.canscore[cand.index]

    if assignment.algorithm == "float-fractions":
        tied_cands = [
            cand.index
            for cand in electable
            if misc.isclose(assignment.canscore[cand.index], best_score)
        ]
    else:
        tied_cands = [
            cand.index for cand in electable if assignment.canscore[cand.index] == best_score
        ]
    return best_cand, tied_cands


def _seqphragmen_algorithm(assignment, num_to_elect):
    """
    Elect `num_to_elect` candidates, then convert loads to weights.

    Mutates `assignment` and returns information about each round.
    """
    detailed_info = {
        "next_cand": [],
        "tied_cands": [],
        "max_load": [],
        "load": [],
    }

    for seat in range(1, num_to_elect + 1):
        _score_candidates(assignment)
        next_cand, tied_cands = _select_candidate(assignment)
        if next_cand is None:
            remaining = [
                cand.cand_id
                for cand in assignment.candidates
                if not assignment.is_elected(cand)
            ]
            raise UnelectableCandidate(seat, remaining)

        max_load = assignment.canscore[next_cand.index]
        assignment.elect(next_cand)
        # raise the load of all approvers to the new maximum load
        for edge in assignment.edges:
            if edge.cand_index == next_cand.index:
                assignment.set_load(edge, max_load - assignment.voterload[edge.voter_index])

        detailed_info["next_cand"].append(next_cand.index)
        detailed_info["tied_cands"].append(tied_cands)
        detailed_info["max_load"].append(max_load)
        detailed_info["load"].append(assignment.voterload.tolist())  # create copy of loads

    assignment.loads_to_weights()
    return detailed_info
