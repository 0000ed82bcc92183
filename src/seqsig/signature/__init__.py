# This source code is part of the Seqsig package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
A subpackage for converting sequences into geometric signatures.

The conversion is a pipeline of three steps:

    1. Each symbol of a sequence is mapped onto a vector, optionally
       weighted by the *context* of the symbol, i.e. the preceding
       symbols.
       The cumulative sum of these vectors gives a path
       (:func:`calculate_coordinates()`).
    2. Two dimensions of this path are rasterized into pixels, using
       Bresenham's line algorithm (:func:`bresenham()`,
       :func:`fill_pixels()`).
    3. For each 3x3 window around the rasterized path the pattern of
       filled pixels is encoded into an integer between 0 and 511.
       The histogram of these *local patterns* describes the texture
       of the path (:func:`local_pattern_histogram()`).

The resulting histogram has always the same size, independent of the
sequence length, and can be used to compare and classify sequences.

All functions in this subpackage are pure:
They do not keep any state between calls and do not modify their
input.
"""

__name__ = "seqsig.signature"
__author__ = "The Seqsig contributors"

from .error import *
from .raster import *
from .coordinates import *
from .pattern import *
