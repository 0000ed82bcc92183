# This source code is part of the Seqsig package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module maps sequences onto cumulative coordinates, i.e. a path
that makes a step for each symbol in the sequence.
"""

__name__ = "seqsig.signature"
__author__ = "The Seqsig contributors"
__all__ = [
    "calculate_coordinates",
    "get_weight",
    "infer_window_size",
    "DEFAULT_WINDOW_SIZE",
    "DEFAULT_WEIGHT",
]

import warnings
from numbers import Integral
import numpy as np
from seqsig.signature.error import (
    DimensionMismatchError,
    TypeMismatchError,
    UnknownSymbolError,
    UnmatchedWeightWarning,
    WeightKeyLengthError,
)


DEFAULT_WINDOW_SIZE = 3
DEFAULT_WEIGHT = 1.0


def calculate_coordinates(sequence, mapping, weights=None, window_size=None):
    """
    Calculate the cumulative coordinates of a sequence.

    Each symbol in the sequence is mapped onto a vector via `mapping`.
    The vector is multiplied with the weight of the *context* of the
    symbol, i.e. the subsequence of length `window_size` that ends
    with the symbol.
    The coordinates are the cumulative sum of these weighted vectors,
    starting at the origin.

    Parameters
    ----------
    sequence : str or iterable object of str
        The sequence.
        Each symbol must be a key of `mapping`.
    mapping : dict of (str -> array-like of float)
        Maps each symbol onto a vector.
        All vectors must have the same dimension *n*.
    weights : dict of (str -> float), optional
        Maps contexts onto the weight of the vector of the last symbol
        in the context.
        Contexts, that are not in this table, have a weight of 1.
        Near the start of the sequence, where less than `window_size`
        symbols precede the current symbol, the context is accordingly
        shorter.
    window_size : int, optional
        The length of the contexts.
        By default, the common length of the contexts in `weights` is
        used, or 3 if `weights` is not given.

    Returns
    -------
    coord : ndarray, shape=(n, m+1), dtype=float
        The coordinates for each of the *n* dimensions.
        *m* is the length of the sequence.
        The first point is always the origin.

    Raises
    ------
    DimensionMismatchError
        If the vectors in `mapping` have different dimensions.
    WeightKeyLengthError
        If `window_size` is not given and the contexts in `weights`
        have different lengths.
    UnknownSymbolError
        If the sequence contains a symbol that is not in `mapping`.

    Warns
    -----
    UnmatchedWeightWarning
        If an explicit `window_size` is given, but none of the contexts
        in `weights` has this length.

    See Also
    --------
    get_weight : The lookup of a weight for a context.

    Examples
    --------

    Map a DNA sequence onto a 2D path:

    >>> mapping = {"A": [1, 1], "C": [-1, 1], "G": [-1, -1], "T": [1, -1]}
    >>> coord = calculate_coordinates("ACGT", mapping)
    >>> print(coord.tolist())
    [[0.0, 1.0, 0.0, -1.0, 0.0], [0.0, 1.0, 2.0, 1.0, 0.0]]

    Double the step for each ``'C'`` following an ``'A'``:

    >>> coord = calculate_coordinates("ACGT", mapping, weights={"AC": 2})
    >>> print(coord.tolist())
    [[0.0, 1.0, -1.0, -2.0, -1.0], [0.0, 1.0, 3.0, 2.0, 1.0]]
    """
    vectors, n_dim = _check_mapping(mapping)
    window_size = infer_window_size(weights, window_size)
    lookback = window_size - 1
    if weights is None:
        weights = {}
    elif len(weights) > 0 and all(len(ctx) != window_size for ctx in weights):
        warnings.warn(
            f"No context in the weight table has a length of "
            f"{window_size}, weights can only apply to the shortened "
            f"contexts at the start of the sequence",
            UnmatchedWeightWarning,
        )

    symbols = list(sequence)
    # The first row is the origin
    steps = np.zeros((len(symbols) + 1, n_dim), dtype=np.float64)
    for i, symbol in enumerate(symbols):
        try:
            vector = vectors[symbol]
        except KeyError:
            raise UnknownSymbolError(
                f"Symbol {repr(symbol)} at position {i} is not in the mapping"
            ) from None
        start = max(0, i - lookback)
        context = "".join(symbols[start : i + 1])
        steps[i + 1] = vector * get_weight(weights, context)
    # Accumulation in sequence order, equal to adding step by step
    return np.cumsum(steps, axis=0).T


def get_weight(weights, context, default=DEFAULT_WEIGHT):
    """
    Get the weight for a context.

    Parameters
    ----------
    weights : dict of (str -> float) or None
        The weight table.
    context : str
        The context to look up.
    default : float, optional
        The weight for contexts that are not in `weights`.

    Returns
    -------
    weight : float
        The weight of `context`.

    Examples
    --------

    >>> print(get_weight({"ACG": 0.5}, "ACG"))
    0.5
    >>> print(get_weight({"ACG": 0.5}, "TTT"))
    1.0
    """
    if weights is None:
        return default
    return float(weights.get(context, default))


def infer_window_size(weights=None, window_size=None):
    """
    Determine the length of the contexts that are used for the lookup
    of weights.

    Parameters
    ----------
    weights : dict of (str -> float), optional
        The weight table.
    window_size : int, optional
        An explicitly chosen window size.
        If given, it takes precedence over the weights.

    Returns
    -------
    window_size : int
        The window size.
        This is `window_size`, if given, otherwise the common length
        of the contexts in `weights`, or the default of 3 if neither is
        given.

    Raises
    ------
    WeightKeyLengthError
        If the window size is inferred from the weights, but the
        contexts have different lengths.
    TypeMismatchError
        If `window_size` is not an integer.
    ValueError
        If `window_size` is smaller than 1.

    Examples
    --------

    >>> print(infer_window_size({"AC": 2.0, "GT": 0.5}))
    2
    >>> print(infer_window_size({"AC": 2.0, "GT": 0.5}, window_size=4))
    4
    >>> print(infer_window_size())
    3
    """
    if window_size is None:
        if weights is not None and len(weights) > 0:
            lengths = set(len(context) for context in weights)
            if len(lengths) != 1:
                raise WeightKeyLengthError(
                    "The contexts in the weight table must have the same "
                    "length, if no window size is given"
                )
            window_size = lengths.pop()
        else:
            window_size = DEFAULT_WINDOW_SIZE
    if not isinstance(window_size, Integral) or isinstance(window_size, bool):
        raise TypeMismatchError(
            f"Window size must be an integer, "
            f"not '{type(window_size).__name__}'"
        )
    if window_size < 1:
        raise ValueError(f"Window size must be at least 1, not {window_size}")
    return int(window_size)


def _check_mapping(mapping):
    """
    Convert the vectors of a mapping into float arrays and get their
    common dimension, without changing the mapping itself.
    """
    if len(mapping) == 0:
        raise ValueError("The symbol mapping is empty")
    vectors = {
        symbol: np.asarray(vector, dtype=np.float64).ravel()
        for symbol, vector in mapping.items()
    }
    dimensions = set(vector.shape[0] for vector in vectors.values())
    if len(dimensions) != 1:
        raise DimensionMismatchError(
            "All vectors in the symbol mapping must have the same dimension, "
            f"but found dimensions {sorted(dimensions)}"
        )
    return vectors, dimensions.pop()
