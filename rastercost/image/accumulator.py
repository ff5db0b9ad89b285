import numpy as np
from rastercost.entropy.mru import MruList, InvalidSymbol
from rastercost.entropy.probability import FrequencyMap
from rastercost.entropy.zerorun import RunLengthCounter
from rastercost.image.predictive import average_predictor

BYTE_RANGE = (0, 255)
DIFFERENCE_RANGE = (-255, 255)

class ChannelStatisticsAccumulator:
    """
    Collects the symbol statistics of one channel in a single raster-order
    pass. All state of the pass (previous byte, current run, the three move
    to front lists) lives here, so channels never share anything.

    The previous byte is carried across scanlines: differences treat the
    channel as one long stream, only the double difference uses the
    scanline above.
    """

    def __init__(self):
        self.previous_byte = None
        self.samples_seen = 0

        self._byte_counts = FrequencyMap(*BYTE_RANGE)
        self._difference_counts = FrequencyMap(*DIFFERENCE_RANGE)
        self._double_difference_counts = FrequencyMap(*DIFFERENCE_RANGE)
        self._differences_after_rle = FrequencyMap(*DIFFERENCE_RANGE)
        self._runs = RunLengthCounter()

        self._mru_bytes = MruList.bytes()
        self._mru_diffs = MruList.diffs()
        self._mru_double_diffs = MruList.diffs()
        self._mru_byte_counts = FrequencyMap(0, len(self._mru_bytes) - 1)
        self._mru_difference_counts = FrequencyMap(0, len(self._mru_diffs) - 1)
        self._mru_double_difference_counts = FrequencyMap(0, len(self._mru_double_diffs) - 1)

    def add(self, byte, above=None):
        """
        Records one sample of the channel.

        byte: int in [0, 255]
        above: int in [0, 255] or None, same-channel sample one scanline up
        """
        byte = int(byte)
        if not BYTE_RANGE[0] <= byte <= BYTE_RANGE[1]:
            raise InvalidSymbol(f"Sample {byte} is not a byte")
        self._byte_counts.increment(byte)
        self._mru_byte_counts.increment(self._mru_bytes.encode(byte))

        previous = self.previous_byte
        if previous is not None:
            difference = byte - previous
            self._difference_counts.increment(difference)
            self._mru_difference_counts.increment(self._mru_diffs.encode(difference))

            # Continuation zeros of a run are left to the run-length stream.
            if self._runs.update(difference) < 2:
                self._differences_after_rle.increment(difference)

            predicted = average_predictor(previous, None if above is None else int(above))
            double_difference = byte - predicted
            self._double_difference_counts.increment(double_difference)
            self._mru_double_difference_counts.increment(
                self._mru_double_diffs.encode(double_difference))

        self.previous_byte = byte
        self.samples_seen += 1

    def add_channel(self, samples, width=None):
        """
        Feeds a whole plane in raster order, pairing every sample with the
        one directly above it (nothing above on the first scanline).

        samples: np.array of shape [H, W], or flat of shape [H * W] with width
        width: int, required for flat input
        """
        plane = np.asarray(samples)
        if plane.ndim == 1:
            if not width or plane.size % width != 0:
                raise ValueError(f"Cannot split {plane.size} samples into rows of width {width}")
            plane = plane.reshape(-1, width)
        elif plane.ndim != 2:
            raise ValueError(f"Expected a [H, W] plane, got shape {plane.shape}")

        rows = plane.tolist()
        for row_index, row in enumerate(rows):
            above_row = rows[row_index - 1] if row_index > 0 else None
            for col, byte in enumerate(row):
                self.add(byte, None if above_row is None else above_row[col])
        return self

    @property
    def run_length(self):
        return self._runs.run_length

    @property
    def byte_counts(self) -> FrequencyMap:
        return self._byte_counts.copy().freeze()

    @property
    def difference_counts(self) -> FrequencyMap:
        return self._difference_counts.copy().freeze()

    @property
    def double_difference_counts(self) -> FrequencyMap:
        return self._double_difference_counts.copy().freeze()

    @property
    def differences_after_rle(self) -> FrequencyMap:
        return self._differences_after_rle.copy().freeze()

    @property
    def run_lengths(self) -> FrequencyMap:
        return self._runs.run_lengths.copy().freeze()

    @property
    def mru_byte_counts(self) -> FrequencyMap:
        return self._mru_byte_counts.copy().freeze()

    @property
    def mru_difference_counts(self) -> FrequencyMap:
        return self._mru_difference_counts.copy().freeze()

    @property
    def mru_double_difference_counts(self) -> FrequencyMap:
        return self._mru_double_difference_counts.copy().freeze()
