from rastercost.entropy import FrequencyMap, MruList, InvalidSymbol, cost_from_map
from rastercost.image import ChannelStatisticsAccumulator, StatisticsAggregator, CompressionReport

__version__ = "0.1.0"

__all__ = [
    "FrequencyMap",
    "MruList",
    "InvalidSymbol",
    "cost_from_map",
    "ChannelStatisticsAccumulator",
    "StatisticsAggregator",
    "CompressionReport",
]
