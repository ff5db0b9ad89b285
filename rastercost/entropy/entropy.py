import math
import numpy as np
from scipy.stats import entropy
from rastercost.entropy.probability import FrequencyMap, stats_marg

HEADER_BYTES = 8
BLOCK_BYTES = 4

def cost_in_bits(p):
    """
    Computes the ideal code length of a symbol with the formula
    -log2(p(x)).

    p: probability in the range (0, 1]

    returns
        bits: scalar value, cost of a single symbol in bits
    """
    if not 0 < p <= 1:
        raise ValueError(f"Probability must be in (0, 1], got {p}")
    return -math.log2(p)

def bits_to_bytes(bits):
    """
    Converts a bit count to the size of the output file in bytes.
    The payload is rounded up to whole 4 byte blocks and a fixed
    8 byte header is added on top, so the result is never below 8.
    """
    num_bytes = bits / 8
    blocks = math.ceil(num_bytes / BLOCK_BYTES)
    return blocks * BLOCK_BYTES + HEADER_BYTES

def _as_counts(freq):
    if isinstance(freq, FrequencyMap):
        return freq.counts
    if isinstance(freq, dict):
        return np.fromiter(freq.values(), dtype=np.int64, count=len(freq))
    return np.asarray(freq, dtype=np.int64)

def cost_from_map(freq):
    """
    Estimates the size in bytes of a zero-order entropy coded stream
    whose symbol frequencies are given by freq. Each symbol with a
    nonzero count c out of a total T costs c * -log2(c / T) bits,
    empty bins cost nothing.

    freq: FrequencyMap, dict of symbol -> count or np.array of counts

    returns
        num_bytes: int, estimated encoded size including the header
    """
    counts = _as_counts(freq)
    total = int(counts.sum())
    bit_count = 0.0
    for count in counts[counts > 0]:
        count = int(count)
        bit_count += count * cost_in_bits(count / total)
    return bits_to_bytes(bit_count)

def calc_entropy(pmf):
    """
    Shannon entropy in bits per symbol of a probability vector, taken
    over its nonzero bins with scipy.stats.entropy in base 2.

    pmf: np.array of shape [B], need not be normalized

    returns
        bits: float, 0.0 when every bin is empty
    """
    pmf = np.asarray(pmf, dtype=np.float64)
    nonzero_pmf = pmf[pmf > 0]
    if nonzero_pmf.size == 0:
        return 0.0
    return float(entropy(nonzero_pmf, base=2))

def entropy_of_map(freq):
    """Bits per symbol of a frequency map, 0.0 when nothing was counted."""
    return calc_entropy(stats_marg(_as_counts(freq)))
