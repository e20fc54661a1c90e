"""
Ballots, voters, candidates and approval edges.

.. important::

    - A ballot is a tuple `(voter_id, budget, approved_candidate_ids)`.
    - Voters are indexed by `0`, ..., `len(voters)-1` in the order of the ballots.
    - Candidates are indexed by `0`, ..., `len(candidates)-1` in the order in which they are
      first mentioned. This order decides ties between candidates.
    - Every approval is an edge; edges are indexed globally in the order in which voters and
      their approvals are traversed.

"""


class Edge:
    """
    An approval of one candidate by one voter.

    Parameters
    ----------
        voter_id : str
            Identifier of the approving voter.

        cand_id : str
            Identifier of the approved candidate.

    Attributes
    ----------
        index : int
            Global index of this edge.

        voter_index : int
            Index of the approving voter.

        cand_index : int
            Index of the approved candidate.
    """

    def __init__(self, voter_id, cand_id):
        self.voter_id = voter_id
        self.cand_id = cand_id
        self.index = 0
        self.voter_index = 0
        self.cand_index = 0

    def __repr__(self):
        return f"Edge({self.voter_id!r} -> {self.cand_id!r}, index={self.index})"


class Voter:
    """
    A voter with a budget and one edge per approved candidate.

    Parameters
    ----------
        voter_id : str
            Identifier of the voter. Identifiers need not be unique.

        budget : int or float or Fraction
            The voter's total spending power; should be non-negative (this is not checked).

        approved : iterable of str
            Identifiers of the approved candidates.

            Approving the same candidate twice creates two edges, i.e., the voter supports
            this candidate twice.
    """

    def __init__(self, voter_id, budget, approved):
        self.voter_id = voter_id
        self.budget = budget
        self.edges = [Edge(voter_id, cand_id) for cand_id in approved]
        self.index = 0

    def __str__(self):
        approved = ", ".join(str(edge.cand_id) for edge in self.edges)
        return f"{self.voter_id} ({self.budget}): {{{approved}}}"

    def __repr__(self):
        return f"Voter({self.voter_id!r}, {self.budget!r}, index={self.index})"


class Candidate:
    """
    A candidate with its identifier and index.

    Parameters
    ----------
        cand_id : str
            Identifier of the candidate.

        index : int
            Index of the candidate (position of its first mention among all ballots).
    """

    def __init__(self, cand_id, index):
        self.cand_id = cand_id
        self.index = index

    def __str__(self):
        return str(self.cand_id)

    def __repr__(self):
        return f"Candidate({self.cand_id!r}, index={self.index})"


def build(ballots):
    """
    Build voters, candidates and edges from ballots.

    .. doctest::

        >>> voters, candidates = build([("A", 10, ["X", "Y"]), ("B", 20, ["Z", "X"])])
        >>> [cand.cand_id for cand in candidates]
        ['X', 'Y', 'Z']
        >>> [(edge.index, edge.voter_index, edge.cand_index) for edge in voters[1].edges]
        [(2, 1, 2), (3, 1, 0)]

    Parameters
    ----------
        ballots : iterable of tuple
            Ballots of the form `(voter_id, budget, approved_candidate_ids)`.

    Returns
    -------
        tuple of (list of Voter, list of Candidate)
    """
    voters = []
    candidates = []
    cand_index_by_id = {}
    num_edges = 0

    for voter_id, budget, approved in ballots:
        voter = Voter(voter_id, budget, approved)
        voter.index = len(voters)
        for edge in voter.edges:
            edge.index = num_edges
            edge.voter_index = voter.index
            num_edges += 1
            if edge.cand_id not in cand_index_by_id:
                cand_index_by_id[edge.cand_id] = len(candidates)
                candidates.append(Candidate(edge.cand_id, len(candidates)))
            edge.cand_index = cand_index_by_id[edge.cand_id]
        voters.append(voter)

    return voters, candidates


def edges_of(voters):
    """
    Return all edges of `voters`, ordered by edge index.

    Parameters
    ----------
        voters : list of Voter
            Voters as returned by :func:`build`.

    Returns
    -------
        list of Edge
    """
    return [edge for voter in voters for edge in voter.edges]
