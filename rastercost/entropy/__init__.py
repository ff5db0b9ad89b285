from .mru import MruList, InvalidSymbol
from .probability import FrequencyMap, stats_marg, count_zeros
from .zerorun import RunLengthCounter
from .entropy import (
    cost_in_bits,
    bits_to_bytes,
    cost_from_map,
    calc_entropy,
    entropy_of_map,
)

__all__ = [
    "MruList",
    "InvalidSymbol",
    "FrequencyMap",
    "stats_marg",
    "count_zeros",
    "RunLengthCounter",
    "cost_in_bits",
    "bits_to_bytes",
    "cost_from_map",
    "calc_entropy",
    "entropy_of_map",
]
