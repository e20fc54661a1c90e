"""
Miscellaneous functions: float comparison and formatting of candidates and loads.
"""

import math
import numpy as np

FLOAT_ISCLOSE_REL_TOL = 1e-12
"""
The relative tolerance when comparing floats.

See also: `math.isclose() <https://docs.python.org/3/library/math.html#math.isclose>`_.
"""

FLOAT_ISCLOSE_ABS_TOL = 1e-12
"""
The absolute tolerance when comparing floats.

See also: `math.isclose() <https://docs.python.org/3/library/math.html#math.isclose>`_.
"""


def isclose(x, y):
    """
    Compare two floats using the default values for absolute and relative tolerance.

    Parameters
    ----------
        x, y : float
            Two floats.

    Returns
    -------
        bool
    """
    return math.isclose(x, y, rel_tol=FLOAT_ISCLOSE_REL_TOL, abs_tol=FLOAT_ISCLOSE_ABS_TOL)


def is_index(value):
    """
    Check whether `value` can be used as a dense index (a non-negative integer).

    Integers taken from numpy arrays (`np.integer`) are accepted, booleans are not.

    Parameters
    ----------
        value : object

    Returns
    -------
        bool
    """
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, np.integer)) and value >= 0


def str_set_of_candidates(candset, cand_names=None):
    """
    Nicely format a set of candidates.

    .. doctest::

        >>> print(str_set_of_candidates({0, 1, 3, 2}))
        {0, 1, 2, 3}
        >>> print(str_set_of_candidates({0, 2}, cand_names=["X", "Y", "Z"]))
        {X, Z}

    Parameters
    ----------
        candset : iterable of int
            An iterable of candidate indices.

        cand_names : list of str, optional
            Identifiers of all candidates, indexed by candidate index.

    Returns
    -------
        str
    """
    if cand_names is None:
        named = sorted(str(cand) for cand in candset)
    else:
        named = sorted(str(cand_names[cand]) for cand in candset)
    return "{" + ", ".join(named) + "}"


def str_sequence_of_candidates(candidates, cand_names=None):
    """
    Format candidates in the given order (e.g., the order in which they were elected).

    .. doctest::

        >>> print(str_sequence_of_candidates([2, 1], cand_names=["X", "Y", "Z"]))
        Z, Y

    Parameters
    ----------
        candidates : iterable of int
            Candidate indices.

        cand_names : list of str, optional
            Identifiers of all candidates, indexed by candidate index.

    Returns
    -------
        str
    """
    if cand_names is None:
        return ", ".join(str(cand) for cand in candidates)
    return ", ".join(str(cand_names[cand]) for cand in candidates)


def str_loads(loads):
    """
    Format a sequence of voter loads as a tuple.

    .. doctest::

        >>> print(str_loads([0, 0.5, 1]))
        (0, 0.5, 1)

    Parameters
    ----------
        loads : iterable of numbers

    Returns
    -------
        str
    """
    return "(" + ", ".join(str(load) for load in loads) + ")"


def header(text, symbol="-"):
    """
    Format a header for `text`.

    Parameters
    ----------
        text : str
            Header text.

        symbol : str
            Symbol to be used for the box around the header text; should be exactly 1 character.

    Returns
    -------
        str
    """
    border = symbol[0] * len(text) + "\n"
    return border + text + "\n" + border
