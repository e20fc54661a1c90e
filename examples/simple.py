"""
Very simple example (compute seq-Phragmen with voter budgets)
"""

from phragmen.seqphragmen import compute_seqphragmen
from phragmen.output import output, DETAILS

output.set_verbosity(DETAILS)

ballots = [
    ("A", 10, ["X", "Y"]),
    ("B", 20, ["X", "Z"]),
    ("C", 30, ["Y", "Z"]),
    ("C", 50, ["Z"]),
]
num_to_elect = 2
print(f"Electing {num_to_elect} candidates with seq-Phragmen given the following ballots:")
for voter_id, budget, approved in ballots:
    print(f" {voter_id} ({budget}): {', '.join(approved)}")
print()

result = compute_seqphragmen(ballots, num_to_elect)
