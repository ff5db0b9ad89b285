import numpy as np
import pytest

from rastercost.entropy import InvalidSymbol
from rastercost.image import ChannelStatisticsAccumulator, average_predictor
from helpers import histogram, difference_residual, double_difference_residual


def feed(stream):
    accumulator = ChannelStatisticsAccumulator()
    for byte in stream:
        accumulator.add(byte)
    return accumulator


def nonzero(freq):
    return {symbol: count for symbol, count in freq.items() if count}


def test_average_predictor():
    assert average_predictor(10) == 10
    assert average_predictor(10, None) == 10
    assert average_predictor(20, 10) == 15
    assert average_predictor(3, 0) == 1


def test_example_stream():
    accumulator = feed([10, 10, 10, 20, 20, 30])

    assert nonzero(accumulator.byte_counts) == {10: 3, 20: 2, 30: 1}
    assert nonzero(accumulator.difference_counts) == {0: 3, 10: 2}
    assert nonzero(accumulator.run_lengths) == {1: 1, 2: 1}
    # the second zero of the 10, 10, 10 run is left to the run lengths
    assert nonzero(accumulator.differences_after_rle) == {0: 2, 10: 2}
    # without a scanline above the prediction is the previous byte
    assert nonzero(accumulator.double_difference_counts) == {0: 3, 10: 2}
    assert accumulator.samples_seen == 6
    assert accumulator.previous_byte == 30
    assert accumulator.run_length == 0


def test_example_stream_mru_ranks():
    accumulator = feed([10, 10, 10, 20, 20, 30])
    # byte ranks: 10, 0, 0, 20, 0, 30
    assert nonzero(accumulator.mru_byte_counts) == {0: 3, 10: 1, 20: 1, 30: 1}
    # difference ranks: 0, 0, 19, 1, 1
    assert nonzero(accumulator.mru_difference_counts) == {0: 2, 1: 2, 19: 1}
    assert nonzero(accumulator.mru_double_difference_counts) == {0: 2, 1: 2, 19: 1}


def test_map_domains():
    accumulator = ChannelStatisticsAccumulator()
    assert len(accumulator.byte_counts) == 256
    assert len(accumulator.difference_counts) == 511
    assert len(accumulator.double_difference_counts) == 511
    assert len(accumulator.differences_after_rle) == 511
    assert len(accumulator.mru_byte_counts) == 256
    assert len(accumulator.mru_difference_counts) == 511
    assert len(accumulator.mru_double_difference_counts) == 511
    assert len(accumulator.run_lengths) == 0


def test_extreme_differences():
    accumulator = feed([0, 255, 0])
    assert nonzero(accumulator.difference_counts) == {255: 1, -255: 1}


def test_double_difference_uses_scanline_above():
    accumulator = ChannelStatisticsAccumulator().add_channel(np.array([[10, 20], [30, 40]]))
    # previous byte carries over the scanline boundary
    assert nonzero(accumulator.difference_counts) == {10: 3}
    # 20 - 10, 30 - (20 + 10) // 2, 40 - (30 + 20) // 2
    assert nonzero(accumulator.double_difference_counts) == {10: 1, 15: 2}


def test_double_difference_rounds_down():
    accumulator = ChannelStatisticsAccumulator().add_channel(np.array([[5, 0], [0, 0]]))
    # 0 - 5, 0 - (0 + 5) // 2, 0 - (0 + 0) // 2
    assert nonzero(accumulator.double_difference_counts) == {-5: 1, -2: 1, 0: 1}


def test_flat_channel_with_width():
    flat = ChannelStatisticsAccumulator().add_channel(np.array([10, 20, 30, 40]), width=2)
    assert nonzero(flat.double_difference_counts) == {10: 1, 15: 2}
    with pytest.raises(ValueError):
        ChannelStatisticsAccumulator().add_channel(np.arange(5), width=2)
    with pytest.raises(ValueError):
        ChannelStatisticsAccumulator().add_channel(np.zeros((2, 2, 2)))


@pytest.mark.parametrize("levels", [3, 256])
def test_plane_matches_vectorized_statistics(levels):
    rng = np.random.default_rng(levels)
    plane = rng.integers(0, levels, size=(9, 13))
    accumulator = ChannelStatisticsAccumulator().add_channel(plane)

    assert accumulator.byte_counts.total() == plane.size
    assert accumulator.difference_counts.total() == plane.size - 1
    assert accumulator.double_difference_counts.total() == plane.size - 1
    assert accumulator.mru_byte_counts.total() == plane.size
    assert accumulator.mru_difference_counts.total() == plane.size - 1

    assert accumulator.byte_counts.to_dict() == histogram(plane, 0, 255).to_dict()
    assert accumulator.difference_counts.to_dict() == \
        histogram(difference_residual(plane), -255, 255).to_dict()
    assert accumulator.double_difference_counts.to_dict() == \
        histogram(double_difference_residual(plane), -255, 255).to_dict()


def test_run_lengths_account_for_every_zero_difference():
    rng = np.random.default_rng(5)
    plane = rng.integers(0, 2, size=(20, 20))
    accumulator = ChannelStatisticsAccumulator().add_channel(plane)
    runs = accumulator.run_lengths
    zero_differences = accumulator.difference_counts[0]
    assert sum(length * count for length, count in runs.items()) == zero_differences
    assert (runs.counts >= 0).all()
    # only the first zero of every run stays in the post-run differences
    removed = zero_differences - accumulator.differences_after_rle[0]
    assert removed == sum((length - 1) * count for length, count in runs.items())


def test_getters_return_frozen_copies():
    accumulator = feed([1, 2, 3])
    counts = accumulator.byte_counts
    assert counts.frozen
    with pytest.raises(RuntimeError):
        counts.increment(1)
    accumulator.add(1)
    assert counts[1] == 1
    assert accumulator.byte_counts[1] == 2


def test_non_byte_samples_are_rejected():
    accumulator = ChannelStatisticsAccumulator()
    with pytest.raises(InvalidSymbol):
        accumulator.add(256)
    with pytest.raises(InvalidSymbol):
        accumulator.add(-1)
    assert accumulator.samples_seen == 0
