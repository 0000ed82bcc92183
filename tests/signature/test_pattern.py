# This source code is part of the Seqsig package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import itertools
import numpy as np
import pytest
import seqsig.signature as signature


# The codes of all windows around a completely filled 3x3 block
FILLED_BLOCK_CODES = [
      1,   3,   7,   6,   4,
      9,  27,  63,  54,  36,
     73, 219, 511, 438, 292,
     72, 216, 504, 432, 288,
     64, 192, 448, 384, 256,
]


@pytest.fixture
def filled_block():
    return set(itertools.product(range(3), range(3)))


def test_local_pattern_histogram():
    """
    The zigzag path covers a 3x3 block completely.
    """
    x_coord = [0, 2, 0, 2, 0, 2]
    y_coord = [0, 0, 1, 1, 2, 2]
    histogram = signature.local_pattern_histogram(x_coord, y_coord)
    assert len(histogram) == 512
    assert np.nonzero(histogram)[0].tolist() == sorted(FILLED_BLOCK_CODES)
    assert (histogram[FILLED_BLOCK_CODES] == 1).all()


def test_float_coordinates():
    histogram = signature.local_pattern_histogram([0.5, 2.4], [0.5, 2.4])
    assert len(histogram) == 512
    # Float coordinates are truncated
    assert np.array_equal(
        histogram, signature.local_pattern_histogram([0, 2], [0, 2])
    )


def test_truncation_toward_zero():
    filled = signature.fill_pixels([-0.5, -1.5], np.array([0.9, -0.9]))
    assert filled == {(0, 0), (-1, 0)}


def test_length_mismatch():
    with pytest.raises(signature.LengthMismatchError):
        signature.local_pattern_histogram([0, 1, 2], [0, 1])


@pytest.mark.parametrize("length", [0, 1])
def test_no_segments(length):
    """
    Without any segment, there are no filled pixels.
    """
    histogram = signature.local_pattern_histogram([3] * length, [4] * length)
    assert histogram.shape == (512,)
    assert (histogram == 0).all()


def test_filled_block(filled_block):
    """
    Each window around the block is counted exactly once.
    """
    histogram = signature.pattern_histogram(filled_block)
    assert histogram.sum() == len(FILLED_BLOCK_CODES)
    for code in FILLED_BLOCK_CODES:
        assert histogram[code] == 1


def test_single_pixel():
    histogram = signature.pattern_histogram({(5, -5)})
    assert np.nonzero(histogram)[0].tolist() == [2**i for i in range(9)]


def test_random_path():
    """
    The histogram must count each window that contains a filled pixel
    exactly once and no window must be empty.
    """
    rng = np.random.default_rng(0)
    x_coord = np.cumsum(rng.uniform(-3, 3, size=100))
    y_coord = np.cumsum(rng.uniform(-3, 3, size=100))
    filled = signature.fill_pixels(x_coord, y_coord)
    ref_centers = set(
        (x + dx, y + dy)
        for x, y in filled
        for dx, dy in itertools.product([-1, 0, 1], repeat=2)
    )

    histogram = signature.local_pattern_histogram(x_coord, y_coord)
    assert histogram.sum() == len(ref_centers)
    assert histogram[0] == 0
    # The center pixel is the 5th element of the pattern
    assert histogram[np.arange(512) & 16 != 0].sum() == len(filled)
    # No state is kept between calls
    assert np.array_equal(
        histogram, signature.local_pattern_histogram(x_coord, y_coord)
    )


def test_get_centers():
    centers = signature.get_centers((1, 1))
    assert set(centers) == set(itertools.product(range(3), range(3)))
    assert centers == [
        (1 + dx, 1 + dy) for dx, dy in signature.NEIGHBOR_OFFSETS
    ]


def test_get_patterns(filled_block):
    patterns = list(signature.get_patterns(filled_block))
    assert len(patterns) == 25
    assert all(len(pattern) == 9 for pattern in patterns)
    assert all(type(value) is bool for pattern in patterns for value in pattern)
    assert (True,) * 9 in patterns


def test_get_patterns_requires_set():
    with pytest.raises(signature.TypeMismatchError):
        list(signature.get_patterns([(0, 0)]))


def test_encode_bijection():
    """
    Decoding and encoding must give the original code.
    """
    codes = set()
    for code in range(512):
        # Bit array with the most significant bit first
        bits = [bool((code >> shift) & 1) for shift in range(8, -1, -1)]
        assert signature.encode_pattern(bits) == code
        assert signature.decode_pattern(code) == tuple(bits)
        codes.add(signature.encode_pattern(signature.decode_pattern(code)))
    assert codes == set(range(512))


def test_encode_bit_order():
    # The first element is the most significant bit
    assert signature.encode_pattern([True] + [False] * 8) == 256
    assert signature.encode_pattern([False] * 8 + [True]) == 1
    assert signature.encode_pattern([True] * 9) == signature.N_PATTERNS - 1


@pytest.mark.parametrize("length", [0, 3, 8, 10])
def test_encode_wrong_length(length):
    # Only patterns of a 3x3 window have a code in the histogram range
    with pytest.raises(signature.LengthMismatchError):
        signature.encode_pattern([True] * length)


def test_encode_numpy_bool():
    pattern = np.zeros(9, dtype=bool)
    pattern[[0, 8]] = True
    assert signature.encode_pattern(pattern) == 257


@pytest.mark.parametrize(
    "pattern", [[True, True, 1], [0] * 9, [True, None], ["True"]]
)
def test_encode_non_boolean(pattern):
    with pytest.raises(signature.TypeMismatchError):
        signature.encode_pattern(pattern)


@pytest.mark.parametrize("code", [-1, 512])
def test_decode_out_of_range(code):
    with pytest.raises(ValueError):
        signature.decode_pattern(code)


def test_sequence_signature(dna_mapping):
    sequence = "ACGTTTGACCAGTAGGATACA"
    weights = {"TT": 2.0, "GA": 0.5}
    coord = signature.calculate_coordinates(sequence, dna_mapping, weights)
    assert np.array_equal(
        signature.sequence_signature(sequence, dna_mapping, weights),
        signature.local_pattern_histogram(coord[0], coord[1]),
    )
    assert np.array_equal(
        signature.sequence_signature(
            sequence, dna_mapping, weights, dimensions=(1, 0)
        ),
        signature.local_pattern_histogram(coord[1], coord[0]),
    )
