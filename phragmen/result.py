"""
The outcome of a sequential Phragmén election.
"""

import networkx as nx
from phragmen import misc


class ElectionResult:
    """
    Elected candidates and the final loads and weights of an election.

    Parameters
    ----------
        assignment : phragmen.assignment.Assignment
            The finalized assignment (weights already computed from loads).

        elected : list of int
            Indices of the elected candidates in the order in which they were elected.

        rounds : dict, optional
            Information about each round, with keys `"next_cand"`, `"tied_cands"`,
            `"max_load"` and `"load"` (one list entry per round).
    """

    def __init__(self, assignment, elected, rounds=None):
        self.assignment = assignment
        self.elected = list(elected)
        if rounds is None:
            rounds = {"next_cand": [], "tied_cands": [], "max_load": [], "load": []}
        self.rounds = rounds

    @property
    def cand_names(self):
        """Identifiers of all candidates, indexed by candidate index."""
        return [cand.cand_id for cand in self.assignment.candidates]

    @property
    def committee(self):
        """The set of elected candidate indices."""
        return set(self.elected)

    @property
    def elected_ids(self):
        """Identifiers of the elected candidates in election order."""
        cand_names = self.cand_names
        return [cand_names[cand] for cand in self.elected]

    def edge_weights(self):
        """
        Return the final weight of every edge.

        Returns
        -------
            list of tuple
                Triples `(voter_id, cand_id, weight)`, ordered by edge index.
        """
        return [
            (edge.voter_id, edge.cand_id, self.assignment.edgeweight[edge.index])
            for edge in self.assignment.edges
        ]

    def voter_loads(self):
        """
        Return the final load of every voter.

        Returns
        -------
            list of tuple
                Pairs `(voter_id, load)`, ordered by voter index.
        """
        return [
            (voter.voter_id, self.assignment.voterload[voter.index])
            for voter in self.assignment.voters
        ]

    def candidate_support(self):
        """
        Return the total weight supporting each candidate.

        Returns
        -------
            dict
                Maps candidate identifiers to their support.
        """
        return {
            cand.cand_id: self.assignment.cansupport[cand.index]
            for cand in self.assignment.candidates
        }

    def str_elected(self):
        """
        Format the elected candidates, e.g. ``"2 elected candidates: Z, Y"``.

        Returns
        -------
            str
        """
        if not self.elected:
            return "No elected candidates"
        if len(self.elected) == 1:
            text = "1 elected candidate: "
        else:
            text = f"{len(self.elected)} elected candidates: "
        return text + misc.str_sequence_of_candidates(self.elected, self.cand_names)

    def str_weights(self):
        """Format the weights of all edges with positive weight, one per line."""
        lines = [
            f" {voter_id} -> {cand_id}: {weight}"
            for voter_id, cand_id, weight in self.edge_weights()
            if weight > 0
        ]
        return "\n".join(lines)

    def __str__(self):
        return self.str_elected()

    def to_networkx(self):
        """
        Return the approval graph with final loads and weights.

        Voters are nodes `("voter", index)` with ``bipartite=0``, candidates are nodes
        `("candidate", index)` with ``bipartite=1``. Every approval is one graph edge (keyed
        by its edge index, so duplicate approvals stay separate) with attributes `load` and
        `weight`.

        Returns
        -------
            networkx.MultiGraph
        """
        assignment = self.assignment
        graph = nx.MultiGraph()
        for voter in assignment.voters:
            graph.add_node(
                ("voter", voter.index),
                bipartite=0,
                voter_id=voter.voter_id,
                budget=assignment.voterbudget[voter.index],
                load=assignment.voterload[voter.index],
            )
        for cand in assignment.candidates:
            graph.add_node(
                ("candidate", cand.index),
                bipartite=1,
                cand_id=cand.cand_id,
                approval=assignment.canapproval[cand.index],
                support=assignment.cansupport[cand.index],
                elected=assignment.is_elected(cand),
            )
        for edge in assignment.edges:
            graph.add_edge(
                ("voter", edge.voter_index),
                ("candidate", edge.cand_index),
                key=edge.index,
                load=assignment.edgeload[edge.index],
                weight=assignment.edgeweight[edge.index],
            )
        return graph
