"""
Random generation of ballots.

Approval sets are sampled with `prefsampling <https://github.com/COMSOC-Community/prefsampling>`_,
budgets with numpy.
"""

import prefsampling.approval as app_samplers
from numpy.random import default_rng


def cand_name(cand):
    """Identifier of the candidate with index `cand` in generated ballots."""
    return f"c{cand}"


def random_ballots(num_voters, num_cand, p=0.5, max_budget=10, seed=None):
    """
    Generate random ballots using the *Independent Culture (IC)* probability distribution.

    Every voter approves every candidate independently with probability `p` and gets an
    integer budget drawn uniformly from `1`, ..., `max_budget`.

    Parameters
    ----------
        num_voters : int
            The desired number of voters (ballots).

        num_cand : int
            The number of candidates that voters may approve.

            Candidates that nobody approves do not appear in the ballots.

        p : float in [0, 1]
            Probability of approving a candidate.

        max_budget : int
            Maximum budget of a voter.

        seed : int, optional
            Seed for both the approval sampler and the budgets.

    Returns
    -------
        list of tuple
            Ballots of the form `(voter_id, budget, approved_candidate_ids)`, voters are
            named `"v0"`, `"v1"`, ...

    References
    ----------
    Corresponds to *p-IC* in:

    *How to Sample Approval Elections?*
    Stanisław Szufa, Piotr Faliszewski, Łukasz Janeczko, Martin Lackner, Arkadii Slinko,
    Krzysztof Sornat, Nimrod Talmon.
    https://arxiv.org/abs/2207.01140
    """
    if max_budget < 1:
        raise ValueError("Parameter `max_budget` must be a positive integer.")
    approval_sets = app_samplers.impartial(
        num_voters=num_voters, num_candidates=num_cand, p=p, seed=seed
    )
    rng = default_rng(seed)
    budgets = rng.integers(1, max_budget + 1, size=num_voters)
    return [
        (f"v{v}", int(budget), [cand_name(cand) for cand in sorted(approved)])
        for v, (approved, budget) in enumerate(zip(approval_sets, budgets))
    ]
