# This source code is part of the Seqsig package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module provides the rasterization of line segments into pixels.
"""

__name__ = "seqsig.signature"
__author__ = "The Seqsig contributors"
__all__ = ["bresenham"]

from numbers import Integral
from seqsig.signature.error import TypeMismatchError


def bresenham(x0, y0, x1, y1):
    """
    Rasterize the line segment between two points using the
    integer variant of Bresenham's algorithm.

    All eight octants are handled by doubling the deltas and
    correcting the sign of each step.

    Parameters
    ----------
    x0, y0 : int
        The start point of the segment.
    x1, y1 : int
        The end point of the segment.

    Returns
    -------
    pixels : list of tuple(int, int)
        The pixels on the segment, ordered from the start point to the
        end point.
        Both, the start and end point are included.

    Raises
    ------
    TypeMismatchError
        If any of the arguments is not an integer.
        Fractional coordinates are not truncated silently, as the
        rounding policy is up to the caller.

    Notes
    -----
    The initial error term is computed with floor division.
    As the doubled deltas are never negative, floor division is
    equal to exact halving here.

    In case of a rounding tie, the chosen pixels depend on the
    direction of the segment.
    Hence, swapping start and end point may give different pixels for
    such segments.

    Examples
    --------

    >>> print(bresenham(0, 0, 3, 3))
    [(0, 0), (1, 1), (2, 2), (3, 3)]
    >>> print(bresenham(0, 0, 4, -1))
    [(0, 0), (1, 0), (2, -1), (3, -1), (4, -1)]
    >>> print(bresenham(2, 5, 2, 5))
    [(2, 5)]
    """
    for value in (x0, y0, x1, y1):
        if not isinstance(value, Integral) or isinstance(value, bool):
            raise TypeMismatchError(
                f"All coordinates must be integers, "
                f"but got '{type(value).__name__}'"
            )
    x0, y0, x1, y1 = int(x0), int(y0), int(x1), int(y1)

    dx = x1 - x0
    dy = y1 - y0
    # A zero delta takes the negative branch,
    # which is irrelevant since no step is taken in that direction
    step_x = 1 if dx > 0 else -1
    step_y = 1 if dy > 0 else -1
    dx = 2 * abs(dx)
    dy = 2 * abs(dy)

    pixels = [(x0, y0)]
    if dx > dy:
        # x is the primary axis
        fraction = dy - dx // 2
        while x0 != x1:
            if fraction >= 0:
                y0 += step_y
                fraction -= dx
            x0 += step_x
            fraction += dy
            pixels.append((x0, y0))
    else:
        # y is the primary axis
        fraction = dx - dy // 2
        while y0 != y1:
            if fraction >= 0:
                x0 += step_x
                fraction -= dy
            y0 += step_y
            fraction += dx
            pixels.append((x0, y0))
    return pixels
