from .predictive import average_predictor
from .accumulator import ChannelStatisticsAccumulator
from .aggregator import StatisticsAggregator, ChannelCosts, CompressionReport, STRATEGIES

__all__ = [
    "average_predictor",
    "ChannelStatisticsAccumulator",
    "StatisticsAggregator",
    "ChannelCosts",
    "CompressionReport",
    "STRATEGIES",
]
