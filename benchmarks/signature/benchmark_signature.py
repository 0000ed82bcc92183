import itertools
import pytest
import seqsig.signature as signature


@pytest.fixture(scope="module")
def weights():
    return {
        "".join(context): 1.0 + 0.1 * i
        for i, context in enumerate(itertools.product("ACGT", repeat=3))
    }


@pytest.fixture(scope="module")
def coord(dna_sequence, dna_mapping, weights):
    return signature.calculate_coordinates(dna_sequence, dna_mapping, weights)


@pytest.fixture(scope="module")
def filled(coord):
    return signature.fill_pixels(coord[0], coord[1])


@pytest.mark.parametrize("use_weights", [False, True])
@pytest.mark.benchmark
def benchmark_calculate_coordinates(dna_sequence, dna_mapping, weights, use_weights):
    signature.calculate_coordinates(
        dna_sequence, dna_mapping, weights if use_weights else None
    )


@pytest.mark.benchmark
def benchmark_fill_pixels(coord):
    signature.fill_pixels(coord[0], coord[1])


@pytest.mark.benchmark
def benchmark_pattern_histogram(filled):
    signature.pattern_histogram(filled)


@pytest.mark.benchmark
def benchmark_sequence_signature(dna_sequence, dna_mapping, weights):
    signature.sequence_signature(dna_sequence, dna_mapping, weights)
