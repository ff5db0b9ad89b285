from rastercost.entropy.entropy import cost_from_map, entropy_of_map
from rastercost.entropy.probability import count_zeros
from rastercost.image.accumulator import ChannelStatisticsAccumulator
from rastercost.utils import deinterleave
from rastercost.utils.metrics import percent_of, format_percent

DEFAULT_CHANNELS = ("red", "green", "blue", "alpha")

# strategy -> label used in the summary
STRATEGIES = {
    "bytes": "Byte",
    "differences": "Difference",
    "optimistic_rle": "Optimistic RLE",
    "less_optimistic_rle": "Less optimistic RLE",
    "rle": "RLE",
    "double_differences": "Double difference",
    "mru_bytes": "MRU byte",
    "mru_differences": "MRU difference",
    "mru_double_differences": "MRU double difference",
}

class ChannelCosts:
    """
    Frozen frequency maps of one channel together with the estimated
    size of every strategy built from them.
    """

    def __init__(self, name, accumulator: ChannelStatisticsAccumulator):
        self.name = name
        self.samples = accumulator.samples_seen

        # Upper bound of what RLE can save: every zero difference is
        # assumed to vanish into runs of negligible cost.
        optimistic = accumulator.difference_counts.copy()
        optimistic.set(0, 0)

        self.maps = {
            "bytes": accumulator.byte_counts,
            "differences": accumulator.difference_counts,
            "optimistic_rle": optimistic.freeze(),
            "differences_after_rle": accumulator.differences_after_rle,
            "run_lengths": accumulator.run_lengths,
            "double_differences": accumulator.double_difference_counts,
            "mru_bytes": accumulator.mru_byte_counts,
            "mru_differences": accumulator.mru_difference_counts,
            "mru_double_differences": accumulator.mru_double_difference_counts,
        }
        map_costs = {key: cost_from_map(freq) for key, freq in self.maps.items()}

        self.rle_differences_cost = map_costs["differences_after_rle"]
        self.rle_runs_cost = map_costs["run_lengths"]
        self.costs = {
            "bytes": map_costs["bytes"],
            "differences": map_costs["differences"],
            "optimistic_rle": map_costs["optimistic_rle"],
            "less_optimistic_rle": self.rle_differences_cost,
            "rle": self.rle_differences_cost + self.rle_runs_cost,
            "double_differences": map_costs["double_differences"],
            "mru_bytes": map_costs["mru_bytes"],
            "mru_differences": map_costs["mru_differences"],
            "mru_double_differences": map_costs["mru_double_differences"],
        }
        self.zero_bins = {key: count_zeros(freq) for key, freq in self.maps.items()}
        self.entropies = {key: entropy_of_map(freq) for key, freq in self.maps.items()}

    def __repr__(self):
        return f"ChannelCosts({self.name!r}, samples={self.samples}, costs={self.costs})"


class CompressionReport:
    """Per channel results, their sums and the sizes to compare them with."""

    def __init__(self, channels, uncompressed_size, reference_size=None):
        self.channels = list(channels)
        self.uncompressed_size = uncompressed_size
        self.reference_size = reference_size
        self.totals = {
            strategy: sum(channel.costs[strategy] for channel in self.channels)
            for strategy in STRATEGIES
        }

    def channel(self, name) -> ChannelCosts:
        for channel in self.channels:
            if channel.name == name:
                return channel
        raise KeyError(name)

    def percent_of_uncompressed(self, strategy):
        return percent_of(self.totals[strategy], self.uncompressed_size)

    def percent_of_reference(self, strategy):
        return percent_of(self.totals[strategy], self.reference_size)

    def best_strategy(self):
        return min(STRATEGIES, key=lambda strategy: self.totals[strategy])

    def summary_lines(self):
        lines = [f"Uncompressed file size: {self.uncompressed_size:,}."]
        if self.reference_size:
            reference_percent = percent_of(self.reference_size, self.uncompressed_size)
            lines.append(f"Initial file size: {self.reference_size:,}, "
                         f"{format_percent(reference_percent, 'uncompressed')}.")
        for strategy, label in STRATEGIES.items():
            lines.append(
                f"{label} compressed size: {self.totals[strategy]:,}, "
                f"{format_percent(self.percent_of_uncompressed(strategy), 'uncompressed')}, "
                f"{format_percent(self.percent_of_reference(strategy), 'reference')}.")
        return lines

    def channel_lines(self, name):
        channel = self.channel(name)
        lines = []
        for strategy, label in STRATEGIES.items():
            lines.append(f"{name} {label}: cost in bytes: {channel.costs[strategy]:,}.")
        for key, zeros in channel.zero_bins.items():
            lines.append(f"{name} {key}: number of 0's: {zeros}, "
                         f"{channel.entropies[key]:.4f} bits/symbol.")
        lines.append(f"{name} RLE: differences cost: {channel.rle_differences_cost:,}, "
                     f"runs cost: {channel.rle_runs_cost:,}.")
        return lines


class StatisticsAggregator:

    def __init__(self, channel_names=DEFAULT_CHANNELS, verbose=False):
        if not channel_names:
            raise ValueError("At least one channel name is required")
        self.channel_names = tuple(channel_names)
        self.verbose = verbose

    def run(self, data, width=None, reference_size=None) -> CompressionReport:
        """
        Estimates the compressed size of an interleaved raster under every
        strategy. Each channel gets its own accumulator and is fed in
        raster order with the sample one scanline above.

        data: np.array of shape [H, W, C] or flat interleaved bytes with width
        width: int, pixels per scanline for flat input
        reference_size: int or None, size of an existing compressed file

        returns:
            report: CompressionReport
        """
        planes = deinterleave(data, width, channels=len(self.channel_names))
        if self.verbose:
            print(f"Raster: {planes.shape[1]}x{planes.shape[2]}, channels: {self.channel_names}")

        channels = []
        for name, plane in zip(self.channel_names, planes):
            accumulator = ChannelStatisticsAccumulator().add_channel(plane)
            costs = ChannelCosts(name, accumulator)
            if self.verbose:
                print(f"Channel {name}: {costs.samples} samples, costs {costs.costs}")
            channels.append(costs)

        return CompressionReport(channels, uncompressed_size=planes.size,
                                 reference_size=reference_size)
