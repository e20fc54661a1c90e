"""
The numeric state of a Phragmén election: loads, weights, support, approval and scores.

All quantities live in preallocated arrays indexed by the dense indices of voters, edges and
candidates (see :mod:`phragmen.ballots`). The mutators keep two aggregates consistent:

- ``voterload[v]`` is the sum of ``edgeload[e]`` over all edges `e` of voter `v`,
- ``cansupport[c]`` is the sum of ``edgeweight[e]`` over all edges `e` approving candidate `c`.

Aggregates are updated incrementally and never recomputed from scratch.
"""

from fractions import Fraction
import numpy as np
from phragmen.ballots import edges_of

try:
    from gmpy2 import mpq
except ImportError:
    mpq = None


#: All algorithms (number types) for seq-Phragmen, sorted by speed.
ALGORITHMS = ("float-fractions", "gmpy2-fractions", "standard-fractions")


class UnknownAlgorithm(ValueError):
    """
    Error: unknown algorithm for sequential Phragmén.

    Parameters
    ----------
        algorithm : str
            The unknown algorithm identifier.
    """

    def __init__(self, algorithm):
        message = (
            f"Algorithm {algorithm} not specified for sequential Phragmen "
            f"(known algorithms: {', '.join(ALGORITHMS)})."
        )
        super().__init__(message)


def _arithmetic(algorithm):
    """Return `(convert, division)` for the number type selected by `algorithm`."""
    if algorithm == "float-fractions":
        return float, lambda x, y: x / y  # standard float division
    if algorithm == "standard-fractions":
        return Fraction, Fraction  # Python built-in fractions
    if algorithm == "gmpy2-fractions":
        if not mpq:
            raise ImportError(
                'Module gmpy2 not available, required for algorithm "gmpy2-fractions"'
            )
        return mpq, mpq
    raise UnknownAlgorithm(algorithm)


class Assignment:
    """
    Mutable loads and weights over a fixed set of voters, candidates and edges.

    Parameters
    ----------
        voters : list of phragmen.ballots.Voter
            Voters as returned by :func:`phragmen.ballots.build`.

        candidates : list of phragmen.ballots.Candidate
            Candidates as returned by :func:`phragmen.ballots.build`.

        algorithm : str, default="float-fractions"
            The number type used for all quantities:

            - `"float-fractions"`: floats,
            - `"standard-fractions"`: Python's `fractions.Fraction`,
            - `"gmpy2-fractions"`: `gmpy2.mpq` (requires gmpy2).

    Attributes
    ----------
        voterload : numpy.ndarray
            Total load of each voter.

        edgeload, edgeweight : numpy.ndarray
            Load and (normalized) weight of each edge.

        cansupport : numpy.ndarray
            Total weight supporting each candidate.

        canapproval : numpy.ndarray
            Sum of the budgets of all voters approving a candidate (fixed).

        canscore : numpy.ndarray
            Phragmén score of each candidate in the current round (lower is better).

        canelected : numpy.ndarray of bool
            Whether a candidate is elected.
    """

    def __init__(self, voters, candidates, algorithm="float-fractions"):
        self.algorithm = algorithm
        self.convert, self.division = _arithmetic(algorithm)
        self.voters = voters
        self.candidates = candidates
        self.edges = edges_of(voters)

        self.voterbudget = self._array(voter.budget for voter in voters)
        self.voterload = self._zeros(self.num_voters)
        self.edgeload = self._zeros(self.num_edges)
        self.edgeweight = self._zeros(self.num_edges)
        self.cansupport = self._zeros(self.num_cand)
        self.canscore = self._zeros(self.num_cand)
        self.canelected = np.zeros(self.num_cand, dtype=bool)

        self.canapproval = self._zeros(self.num_cand)
        for voter in voters:
            for edge in voter.edges:
                self.canapproval[edge.cand_index] += self.voterbudget[voter.index]

    def _array(self, values):
        values = [self.convert(value) for value in values]
        if self.algorithm == "float-fractions":
            return np.array(values, dtype=np.float64)
        # fractions are stored as Python objects
        array = np.empty(len(values), dtype=object)
        array[:] = values
        return array

    def _zeros(self, size):
        return self._array([0] * size)

    @property
    def num_voters(self):
        """Number of voters."""
        return len(self.voters)

    @property
    def num_cand(self):
        """Number of candidates."""
        return len(self.candidates)

    @property
    def num_edges(self):
        """Number of edges (approvals)."""
        return len(self.edges)

    def set_load(self, edge, load):
        """
        Set the load of `edge` and update the load of its voter.

        Parameters
        ----------
            edge : phragmen.ballots.Edge
                The edge.

            load : number
                The new load.
        """
        old_load = self.edgeload[edge.index]
        self.edgeload[edge.index] = load
        self.voterload[edge.voter_index] += load - old_load

    def set_weight(self, edge, weight):
        """
        Set the weight of `edge` and update the support of its candidate.

        Parameters
        ----------
            edge : phragmen.ballots.Edge
                The edge.

            weight : number
                The new weight.
        """
        old_weight = self.edgeweight[edge.index]
        self.edgeweight[edge.index] = weight
        self.cansupport[edge.cand_index] += weight - old_weight

    def set_score(self, candidate, score):
        self.canscore[candidate.index] = score

    def is_elected(self, candidate):
        return bool(self.canelected[candidate.index])

    def elect(self, candidate):
        """
        Mark `candidate` as elected.

        Raises `ValueError` if the candidate is elected already.
        """
        if self.canelected[candidate.index]:
            raise ValueError(f"Candidate {candidate.cand_id} is already elected.")
        self.canelected[candidate.index] = True

    def unelect(self, candidate):
        """
        Undo the election of `candidate`.

        Not used by sequential Phragmén, which never revises a decision.
        Raises `ValueError` if the candidate is not elected.
        """
        if not self.canelected[candidate.index]:
            raise ValueError(f"Candidate {candidate.cand_id} is not elected.")
        self.canelected[candidate.index] = False

    def elected_candidates(self):
        """
        Return the set of elected candidates.

        Returns
        -------
            set of int
                Indices of elected candidates.
        """
        return {int(cand) for cand in np.flatnonzero(self.canelected)}

    def loads_to_weights(self):
        """
        Distribute the budget of each voter over its edges proportionally to their loads.

        The weight of an edge becomes `budget * edgeload / voterload`. Voters without load
        do not contribute weight to any candidate.
        """
        for voter in self.voters:
            voter_load = self.voterload[voter.index]
            if voter_load > 0:
                budget = self.voterbudget[voter.index]
                for edge in voter.edges:
                    weight = self.division(budget * self.edgeload[edge.index], voter_load)
                    self.set_weight(edge, weight)

    def weights_to_loads(self):
        """
        Set the load of each edge to its share of its candidate's support.

        The load of an edge becomes `edgeweight / cansupport`; edges of candidates without
        support are left unchanged. This is the inverse direction of
        :meth:`loads_to_weights` and is not needed by sequential Phragmén.
        """
        for edge in self.edges:
            support = self.cansupport[edge.cand_index]
            if support > 0:
                self.set_load(edge, self.division(self.edgeweight[edge.index], support))

    def copy(self):
        """
        Return a copy of the numeric state over the same voters and candidates.

        Returns
        -------
            Assignment
        """
        copy_assignment = Assignment.__new__(Assignment)
        copy_assignment.__dict__.update(self.__dict__)
        for name in (
            "voterbudget",
            "voterload",
            "edgeload",
            "edgeweight",
            "cansupport",
            "canscore",
            "canelected",
            "canapproval",
        ):
            setattr(copy_assignment, name, getattr(self, name).copy())
        return copy_assignment

    __copy__ = copy
