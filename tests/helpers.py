import numpy as np

from rastercost.entropy import FrequencyMap, InvalidSymbol


def histogram(values, lower_bound, upper_bound):
    """Counts an array over [lower_bound, upper_bound] with np.bincount."""
    flattened = np.asarray(values, dtype=np.int64).flatten()
    freq = FrequencyMap(lower_bound, upper_bound)
    if flattened.size == 0:
        return freq
    if flattened.min() < lower_bound or flattened.max() > upper_bound:
        raise InvalidSymbol(f"Values outside of [{lower_bound}, {upper_bound}]")
    counts = np.bincount(flattened - lower_bound, minlength=len(freq))
    for offset in np.flatnonzero(counts):
        freq.set(lower_bound + int(offset), int(counts[offset]))
    return freq


def difference_residual(channel):
    """Previous-sample residual of a plane read as one raster-order stream."""
    return np.diff(np.asarray(channel, dtype=np.int64).flatten())


def double_difference_residual(channel):
    """Residual of the 2D average predictor, first sample skipped."""
    channel = np.asarray(channel, dtype=np.int64)
    H, W = channel.shape
    flat = channel.flatten()
    positions = np.arange(1, flat.size)
    prediction = flat[:-1].copy()
    has_above = positions >= W
    prediction[has_above] = (flat[:-1][has_above] + flat[positions[has_above] - W]) // 2
    return flat[1:] - prediction
