# This source code is part of the Seqsig package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import pytest


@pytest.fixture
def dna_mapping():
    """
    A two-dimensional mapping of nucleotides onto the diagonals.
    """
    return {"A": [1, 1], "C": [-1, 1], "G": [-1, -1], "T": [1, -1]}
