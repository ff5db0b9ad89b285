import numpy as np

def identity_order(size):
    """
    Canonical order of an unsigned symbol domain.

    Parameters:
        size (int): number of symbols, e.g. 256 for bytes.

    Returns:
        np.ndarray: 0, 1, ..., size - 1
    """
    return np.arange(size, dtype=np.int64)

def zigzag_order(max_magnitude):
    """
    Zig-zag scan over the signed values [-max_magnitude, max_magnitude]
    so that small magnitudes come first.

    Parameters:
        max_magnitude (int): largest absolute value, 255 for byte differences.

    Returns:
        np.ndarray: 0, 1, -1, 2, -2, ..., max_magnitude, -max_magnitude
    """
    assert max_magnitude >= 0, "max_magnitude must be non-negative"

    magnitudes = np.arange(1, max_magnitude + 1, dtype=np.int64)
    pairs = np.stack([magnitudes, -magnitudes], axis=1)
    return np.concatenate([[0], pairs.flatten()]).astype(np.int64)