import numpy as np


def entropy(freqs) -> float:
    """Shannon entropy in bits/symbol of a frequency mapping."""
    if not freqs:
        return 0.0
    f = np.fromiter(freqs.values(), dtype=np.float64)
    p = f / f.sum()
    return float(-np.sum(p * np.log2(p)))


def average_code_length(freqs, codebook) -> float:
    if not freqs:
        return 0.0
    f = np.fromiter(freqs.values(), dtype=np.float64)
    L = np.fromiter((len(codebook[s]) for s in freqs), dtype=np.float64)
    return float(np.sum(f * L) / np.sum(f))


def compression_ratio(n_symbols: int, n_bytes: int, bits_per_symbol: int = 8) -> float:
    """Compressed size over raw size; 0.0 for empty input."""
    raw_bytes = n_symbols * bits_per_symbol / 8.0
    if raw_bytes == 0:
        return 0.0
    return float(n_bytes / raw_bytes)
