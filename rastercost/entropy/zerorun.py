from rastercost.entropy.probability import FrequencyMap

class RunLengthCounter:

    def __init__(self):
        self.run_length = 0
        self.run_lengths = FrequencyMap(1, growable=True)

    def update(self, difference):
        """
        Tracks runs of zero differences. Every maximal run is counted once
        under its final length: extending a run un-counts the shorter run
        before counting the longer one.

        difference: int, current byte minus the previous byte

        returns:
            run_length: length of the run the difference belongs to, 0 if
            the difference is not zero
        """
        if difference == 0:
            if self.run_length > 0:
                self.run_lengths.decrement(self.run_length)
            self.run_length += 1
            self.run_lengths.increment(self.run_length)
        else:
            self.run_length = 0
        return self.run_length

    def zero_count(self):
        """Number of zero differences covered by the recorded runs."""
        return sum(length * count for length, count in self.run_lengths.items())
