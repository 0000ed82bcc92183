# This source code is part of the Seqsig package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module computes *local patterns* of a rasterized coordinate path,
a texture descriptor analogous to local binary patterns in image
analysis.
"""

__name__ = "seqsig.signature"
__author__ = "The Seqsig contributors"
__all__ = [
    "NEIGHBOR_OFFSETS",
    "N_PATTERNS",
    "local_pattern_histogram",
    "pattern_histogram",
    "fill_pixels",
    "get_patterns",
    "get_centers",
    "encode_pattern",
    "decode_pattern",
    "sequence_signature",
]

import numpy as np
from seqsig.signature.coordinates import calculate_coordinates
from seqsig.signature.error import LengthMismatchError, TypeMismatchError
from seqsig.signature.raster import bresenham


# The order of the offsets determines the bit significance in the
# encoded pattern: The first offset is the most significant bit
# fmt: off
NEIGHBOR_OFFSETS = (
    ( 1, -1), ( 0, -1), (-1, -1),
    ( 1,  0), ( 0,  0), (-1,  0),
    ( 1,  1), ( 0,  1), (-1,  1),
)
# fmt: on
N_PATTERNS = 2 ** len(NEIGHBOR_OFFSETS)


def local_pattern_histogram(x_coord, y_coord):
    """
    Compute the histogram of local patterns of the path given by
    two-dimensional coordinates.

    The path is rasterized into pixels, then for each 3x3 window that
    contains at least one filled pixel the pattern of filled pixels in
    this window is counted.

    Parameters
    ----------
    x_coord, y_coord : array-like of float or int
        The coordinates of the points on the path.
        Non-integer coordinates are truncated toward zero.

    Returns
    -------
    histogram : ndarray, shape=(512,), dtype=int
        The (unnormalized) histogram.
        The index is the pattern encoded via :func:`encode_pattern()`.

    Raises
    ------
    LengthMismatchError
        If `x_coord` and `y_coord` have different lengths.

    See Also
    --------
    fill_pixels : The rasterization step.
    pattern_histogram : The pattern counting step.

    Examples
    --------

    >>> histogram = local_pattern_histogram([0, 2, 0], [0, 0, 1])
    >>> print(len(histogram))
    512
    >>> print(histogram.sum())
    19
    """
    filled = fill_pixels(x_coord, y_coord)
    return pattern_histogram(filled)


def pattern_histogram(filled):
    """
    Count the local patterns around a set of filled pixels.

    Parameters
    ----------
    filled : set of tuple(int, int)
        The filled pixels.

    Returns
    -------
    histogram : ndarray, shape=(512,), dtype=int
        The (unnormalized) histogram.
        The index is the pattern encoded via :func:`encode_pattern()`.

    Examples
    --------

    >>> histogram = pattern_histogram({(0, 0)})
    >>> print(np.nonzero(histogram)[0])
    [  1   2   4   8  16  32  64 128 256]
    """
    histogram = np.zeros(N_PATTERNS, dtype=np.int64)
    for pattern in get_patterns(filled):
        histogram[encode_pattern(pattern)] += 1
    return histogram


def fill_pixels(x_coord, y_coord):
    """
    Rasterize the path given by two-dimensional coordinates.

    Each pair of consecutive points is connected by a line, that is
    rasterized via :func:`bresenham()`.

    Parameters
    ----------
    x_coord, y_coord : array-like of float or int
        The coordinates of the points on the path.
        Non-integer coordinates are truncated toward zero.

    Returns
    -------
    filled : set of tuple(int, int)
        The pixels crossed by the path.

    Raises
    ------
    LengthMismatchError
        If `x_coord` and `y_coord` have different lengths.

    Examples
    --------

    >>> print(sorted(fill_pixels([0.5, 2.4, -1.7], [0.0, 0.0, 0.9])))
    [(-1, 0), (0, 0), (1, 0), (2, 0)]
    """
    if len(x_coord) != len(y_coord):
        raise LengthMismatchError(
            f"{len(x_coord)} x-coordinates were given, "
            f"but {len(y_coord)} y-coordinates"
        )
    # 'int()' truncates toward zero
    x_coord = [int(x) for x in x_coord]
    y_coord = [int(y) for y in y_coord]
    filled = set()
    for i in range(len(x_coord) - 1):
        filled.update(
            bresenham(x_coord[i], y_coord[i], x_coord[i + 1], y_coord[i + 1])
        )
    return filled


def get_patterns(filled):
    """
    Iterate over the local patterns around a set of filled pixels.

    A local pattern is the filled state of the 3x3 window around a
    center pixel.
    Each window, that contains at least one filled pixel, is reported
    exactly once.

    Parameters
    ----------
    filled : set of tuple(int, int)
        The filled pixels.
        The complete set must be known beforehand, as a window might
        contain pixels from different parts of the path.

    Yields
    ------
    pattern : tuple of bool, length=9
        Whether the pixel at each of the :data:`NEIGHBOR_OFFSETS`
        relative to the center is filled.

    Raises
    ------
    TypeMismatchError
        If `filled` is not a set.
    """
    if not isinstance(filled, (set, frozenset)):
        raise TypeMismatchError(
            f"Filled pixels must be given as set, not '{type(filled).__name__}'"
        )
    seen_centers = set()
    for pixel in filled:
        for center in get_centers(pixel):
            if center in seen_centers:
                continue
            seen_centers.add(center)
            cx, cy = center
            yield tuple(
                (cx + dx, cy + dy) in filled for dx, dy in NEIGHBOR_OFFSETS
            )


def get_centers(pixel):
    """
    Get the centers of all 3x3 windows, that contain the given pixel.

    Parameters
    ----------
    pixel : tuple(int, int)
        The pixel.

    Returns
    -------
    centers : list of tuple(int, int)
        The window centers, in the order of :data:`NEIGHBOR_OFFSETS`.

    Examples
    --------

    >>> print(get_centers((1, 1)))
    [(2, 0), (1, 0), (0, 0), (2, 1), (1, 1), (0, 1), (2, 2), (1, 2), (0, 2)]
    """
    x, y = pixel
    return [(x + dx, y + dy) for dx, dy in NEIGHBOR_OFFSETS]


def encode_pattern(pattern):
    """
    Encode a local pattern into an integer.

    The pattern is interpreted as binary number, with the first element
    being the most significant bit.

    Parameters
    ----------
    pattern : iterable object of bool, length=9
        The pattern, with one element for each of the
        :data:`NEIGHBOR_OFFSETS`.

    Returns
    -------
    code : int
        The encoded pattern.
        The code is always lower than :data:`N_PATTERNS`.

    Raises
    ------
    TypeMismatchError
        If the pattern contains a non-boolean value.
    LengthMismatchError
        If the pattern does not have exactly 9 elements.

    See Also
    --------
    decode_pattern : The inverse function.

    Examples
    --------

    >>> print(encode_pattern(
    ...     [False, False, False, False, True, False, False, False, True]
    ... ))
    17
    """
    pattern = list(pattern)
    for value in pattern:
        if not isinstance(value, (bool, np.bool_)):
            raise TypeMismatchError(
                f"Pattern must contain only boolean values, "
                f"but got '{type(value).__name__}'"
            )
    if len(pattern) != len(NEIGHBOR_OFFSETS):
        raise LengthMismatchError(
            f"Pattern must have {len(NEIGHBOR_OFFSETS)} elements, "
            f"but has {len(pattern)}"
        )
    code = 0
    for value in pattern:
        code = (code << 1) | int(value)
    return code


def decode_pattern(code, length=len(NEIGHBOR_OFFSETS)):
    """
    Decode an integer into a local pattern.

    Parameters
    ----------
    code : int
        The encoded pattern.
    length : int, optional
        The number of elements in the pattern.

    Returns
    -------
    pattern : tuple of bool
        The pattern, the most significant bit first.

    Raises
    ------
    ValueError
        If `code` cannot be represented by `length` bits.

    Examples
    --------

    >>> print(decode_pattern(17))
    (False, False, False, False, True, False, False, False, True)
    """
    if code < 0 or code >= 2**length:
        raise ValueError(
            f"Code {code} is out of range for a pattern of length {length}"
        )
    return tuple(bool((code >> shift) & 1) for shift in range(length - 1, -1, -1))


def sequence_signature(
    sequence, mapping, weights=None, window_size=None, dimensions=(0, 1)
):
    """
    Compute the local pattern histogram of a sequence.

    This is a shortcut for :func:`calculate_coordinates()` followed by
    :func:`local_pattern_histogram()`.

    Parameters
    ----------
    sequence : str or iterable object of str
        The sequence.
    mapping : dict of (str -> array-like of float)
        Maps each symbol onto a vector.
    weights : dict of (str -> float), optional
        Weights for contexts.
    window_size : int, optional
        The length of the contexts.
    dimensions : tuple(int, int), optional
        The dimensions of the coordinates, that are used as *x* and *y*
        coordinates, respectively.

    Returns
    -------
    histogram : ndarray, shape=(512,), dtype=int
        The (unnormalized) local pattern histogram.

    Examples
    --------

    >>> mapping = {"A": [1, 1], "C": [-1, 1], "G": [-1, -1], "T": [1, -1]}
    >>> histogram = sequence_signature("ACGT", mapping)
    >>> print(histogram.sum())
    21
    """
    coord = calculate_coordinates(sequence, mapping, weights, window_size)
    x_dim, y_dim = dimensions
    return local_pattern_histogram(coord[x_dim], coord[y_dim])
