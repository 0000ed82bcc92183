# This source code is part of the Seqsig package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import itertools
import numpy as np
import pytest
import seqsig.signature as signature


def test_diagonal():
    assert signature.bresenham(0, 0, 3, 3) \
        == [(0, 0), (1, 1), (2, 2), (3, 3)]


@pytest.mark.parametrize(
    "x0, y0, x1, y1, ref_pixels",
    [
        # Horizontal and vertical segments in both directions
        (0, 0, 3, 0, [(0, 0), (1, 0), (2, 0), (3, 0)]),
        (3, 0, 0, 0, [(3, 0), (2, 0), (1, 0), (0, 0)]),
        (0, 0, 0, 3, [(0, 0), (0, 1), (0, 2), (0, 3)]),
        (0, 0, 0, -3, [(0, 0), (0, -1), (0, -2), (0, -3)]),
        # Shallow segments with negative slope
        (0, 0, 4, -1, [(0, 0), (1, 0), (2, -1), (3, -1), (4, -1)]),
        (0, 0, -3, 2, [(0, 0), (-1, 1), (-2, 1), (-3, 2)]),
        # Steep segments
        (0, 0, 1, 3, [(0, 0), (0, 1), (1, 2), (1, 3)]),
        (0, 0, -1, -3, [(0, 0), (0, -1), (-1, -2), (-1, -3)]),
        # Rounding tie
        (0, 0, 2, 1, [(0, 0), (1, 1), (2, 1)]),
        (2, 1, 0, 0, [(2, 1), (1, 0), (0, 0)]),
    ]
)
def test_octants(x0, y0, x1, y1, ref_pixels):
    """
    Check the exact pixel order for segments in different octants,
    including negative coordinates.
    """
    assert signature.bresenham(x0, y0, x1, y1) == ref_pixels


@pytest.mark.parametrize(
    "x0, y0, x1, y1",
    [
        (0, 0, 3, 3),
        (0, 0, 3, 1),
        (0, 0, 5, 2),
        (0, 0, 1, 3),
        (0, 0, -3, 2),
        (-4, 7, -4, -2),
        (5, -1, -3, -1),
        (-2, -2, 4, 4),
    ]
)
def test_swapped_endpoints(x0, y0, x1, y1):
    """
    For segments without a rounding tie, swapping start and end point
    must give the same pixels.
    """
    forward = signature.bresenham(x0, y0, x1, y1)
    backward = signature.bresenham(x1, y1, x0, y0)
    assert set(forward) == set(backward)


@pytest.mark.parametrize(
    "x0, y0, x1, y1",
    list(itertools.product(range(-3, 4), range(-3, 4), [0, 5, -7], [0, 4, -6]))
)
def test_connectivity(x0, y0, x1, y1):
    """
    The rasterized segment must start and end at the given points and
    consecutive pixels must be 8-connected neighbors, that approach the
    end point along the primary axis.
    """
    pixels = signature.bresenham(x0, y0, x1, y1)
    assert pixels[0] == (x0, y0)
    assert pixels[-1] == (x1, y1)
    assert len(pixels) == max(abs(x1 - x0), abs(y1 - y0)) + 1
    for (xa, ya), (xb, yb) in zip(pixels[:-1], pixels[1:]):
        assert max(abs(xb - xa), abs(yb - ya)) == 1


def test_single_point():
    assert signature.bresenham(4, -2, 4, -2) == [(4, -2)]


def test_numpy_integers():
    pixels = signature.bresenham(np.int64(0), np.int32(0), np.int16(2), 2)
    assert pixels == [(0, 0), (1, 1), (2, 2)]
    assert all(type(x) is int and type(y) is int for x, y in pixels)


@pytest.mark.parametrize("n_float", [1, 2, 3, 4])
def test_non_integer(n_float):
    """
    Fractional input must not be truncated silently, even if it has an
    integral value.
    """
    for indices in itertools.combinations(range(4), n_float):
        args = [0, 0, 10, 10]
        for i in indices:
            args[i] = float(args[i])
        with pytest.raises(signature.TypeMismatchError):
            signature.bresenham(*args)
    # The error is also a 'TypeError'
    with pytest.raises(TypeError):
        signature.bresenham(0, 0, 1.5, 1)
