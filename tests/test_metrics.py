import pytest

from huffman import build_codebook, build_frequencies, build_tree
from metrics import average_code_length, compression_ratio, entropy


def test_entropy_uniform_pair():
    assert entropy({"a": 1, "b": 1}) == pytest.approx(1.0)


def test_entropy_degenerate():
    assert entropy({"a": 4}) == 0.0
    assert entropy({}) == 0.0


def test_average_code_length():
    freqs = build_frequencies("aabbbcccc")
    codebook = build_codebook(build_tree(freqs))
    assert average_code_length(freqs, codebook) == pytest.approx(14 / 9)


def test_average_code_length_within_one_bit_of_entropy():
    freqs = build_frequencies("a man a plan a canal panama")
    codebook = build_codebook(build_tree(freqs))
    H = entropy(freqs)
    assert H <= average_code_length(freqs, codebook) < H + 1


def test_compression_ratio():
    assert compression_ratio(8, 4) == pytest.approx(0.5)
    assert compression_ratio(0, 17) == 0.0
