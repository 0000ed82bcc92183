import numpy as np
import pytest


@pytest.fixture(scope="session")
def dna_sequence():
    """
    A random nucleotide sequence, the same for all benchmarks.
    """
    LENGTH = 10000

    rng = np.random.default_rng(0)
    return "".join(rng.choice(list("ACGT"), size=LENGTH))


@pytest.fixture(scope="session")
def dna_mapping():
    return {"A": [1, 1], "C": [-1, 1], "G": [-1, -1], "T": [1, -1]}
