import numpy as np
from rastercost.entropy.mru import InvalidSymbol

class FrequencyMap:
    """
    Counts how often each symbol of a closed integer domain was observed.

    The domain is [lower_bound, upper_bound] and every symbol in it starts
    with a count of 0, so the cost model never meets an unknown symbol. A
    growable map starts empty and extends its upper bound to the largest
    symbol counted so far, which is how run lengths are tracked.

    Once frozen the map is read-only; accumulators hand out frozen copies.
    """

    def __init__(self, lower_bound, upper_bound=None, growable=False):
        if upper_bound is None:
            if not growable:
                raise ValueError("A closed FrequencyMap needs an upper_bound")
            upper_bound = lower_bound - 1
        if upper_bound < lower_bound - 1:
            raise ValueError(f"Empty or inverted domain [{lower_bound}, {upper_bound}]")
        self.lower_bound = lower_bound
        self.growable = growable
        self._size = upper_bound - lower_bound + 1
        self._counts = np.zeros(max(self._size, 1), dtype=np.int64)
        self._frozen = False

    @property
    def upper_bound(self):
        return self.lower_bound + self._size - 1

    @property
    def frozen(self):
        return self._frozen

    @property
    def counts(self) -> np.ndarray:
        view = self._counts[:self._size]
        view.flags.writeable = False
        return view

    @property
    def symbols(self) -> np.ndarray:
        return np.arange(self.lower_bound, self.upper_bound + 1)

    def _index(self, symbol, grow=False):
        index = int(symbol) - self.lower_bound
        if index < 0 or (index >= self._size and not (grow and self.growable)):
            raise InvalidSymbol(
                f"Symbol {symbol} is outside of [{self.lower_bound}, {self.upper_bound}]")
        if index >= self._size:
            self._grow(index + 1)
        return index

    def _grow(self, size):
        if size > len(self._counts):
            counts = np.zeros(max(size, 2 * len(self._counts)), dtype=np.int64)
            counts[:self._size] = self._counts[:self._size]
            self._counts = counts
        self._size = size

    def _check_mutable(self):
        if self._frozen:
            raise RuntimeError("FrequencyMap is frozen and can not be modified")

    def increment(self, symbol):
        self._check_mutable()
        # _index may swap in a larger buffer, so look the buffer up afterwards
        index = self._index(symbol, grow=True)
        self._counts[index] += 1

    def decrement(self, symbol):
        self._check_mutable()
        index = self._index(symbol)
        if self._counts[index] == 0:
            raise ValueError(f"Count of symbol {symbol} is already 0")
        self._counts[index] -= 1

    def set(self, symbol, count):
        self._check_mutable()
        if count < 0:
            raise ValueError(f"Count must be non-negative, got {count}")
        index = self._index(symbol, grow=True)
        self._counts[index] = count

    def __getitem__(self, symbol):
        if symbol not in self:
            raise KeyError(symbol)
        return int(self._counts[int(symbol) - self.lower_bound])

    def __contains__(self, symbol):
        return self.lower_bound <= symbol <= self.upper_bound

    def __len__(self):
        return self._size

    def __iter__(self):
        return iter(range(self.lower_bound, self.upper_bound + 1))

    def items(self):
        return zip(self.symbols.tolist(), self.counts.tolist())

    def total(self):
        return int(self.counts.sum())

    def to_dict(self):
        return dict(self.items())

    def copy(self):
        clone = FrequencyMap(self.lower_bound, self.upper_bound, growable=self.growable)
        clone._counts[:self._size] = self._counts[:self._size]
        return clone

    def freeze(self):
        self._frozen = True
        return self

    def __repr__(self):
        return (f"FrequencyMap([{self.lower_bound}, {self.upper_bound}], "
                f"total={self.total()}, frozen={self._frozen})")


def stats_marg(freq):
    """
    Normalizes the counts of a frequency map (or a count array)
    by their total to get the probability mass function.

    returns
        pmf: np.array of shape [B], all zeros if nothing was counted
    """
    counts = freq.counts if isinstance(freq, FrequencyMap) else np.asarray(freq)
    total = counts.sum()
    if total == 0:
        return np.zeros(len(counts), dtype=np.float64)
    return counts / total

def count_zeros(freq):
    """Number of symbols in the domain that were never observed."""
    counts = freq.counts if isinstance(freq, FrequencyMap) else np.fromiter(freq.values(), dtype=np.int64)
    return int(np.count_nonzero(counts == 0))
