"""
Example how to generate random ballots and inspect the resulting weight distribution
"""

import networkx as nx

from phragmen.generate import random_ballots
from phragmen.seqphragmen import compute_seqphragmen
from phragmen.output import output, INFO

output.set_verbosity(INFO)

ballots = random_ballots(num_voters=8, num_cand=5, p=0.4, max_budget=10, seed=42)
result = compute_seqphragmen(ballots, num_to_elect=2, algorithm="standard-fractions")

graph = result.to_networkx()
voter_nodes = {node for node, side in graph.nodes(data="bipartite") if side == 0}
print(f"bipartite graph with {len(voter_nodes)} voters and {graph.number_of_edges()} edges")
print(f"is bipartite: {nx.is_bipartite(graph)}")
for cand_id, support in result.candidate_support().items():
    print(f" support of {cand_id}: {support}")
