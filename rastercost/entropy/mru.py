from rastercost.signal.zigzag import identity_order, zigzag_order


class InvalidSymbol(ValueError):
    """A value outside of a closed symbol domain was passed to a transform."""


class MruList:
    """
    Move-to-front transform over a closed symbol domain.

    Symbols that were appropriate for an entropy coder are replaced by their
    position in a most recently used list, which helps when the most common
    symbols change over time. Repeating the symbol just sent always gives
    rank 0. A used item is promoted to the front and the items ahead of it
    move back one place.

    A linear scan is fine here, the largest domain has 511 symbols.
    """

    def __init__(self, all_legal_values):
        self._items = [int(value) for value in all_legal_values]
        if len(set(self._items)) != len(self._items):
            raise ValueError("Symbol domain contains duplicates")

    @classmethod
    def bytes(cls):
        return cls(identity_order(256))

    @classmethod
    def diffs(cls):
        return cls(zigzag_order(255))

    def encode(self, value):
        try:
            index = self._items.index(value)
        except ValueError:
            raise InvalidSymbol(f"{value} is not a member of the symbol domain") from None
        self._items.insert(0, self._items.pop(index))
        return index

    def decode(self, index):
        if not 0 <= index < len(self._items):
            raise InvalidSymbol(f"Rank {index} is outside of [0, {len(self._items) - 1}]")
        value = self._items.pop(index)
        self._items.insert(0, value)
        return value

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(tuple(self._items))

    def __contains__(self, value):
        return value in self._items
