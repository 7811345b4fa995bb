"""Run-length form of bar patterns.

A pattern is written as the total number of units, a colon and one digit
per run, bar and space runs alternating, starting with a bar::

    29:112211221112112111221

Renderers only need to walk the digits and draw every other run.
"""
from collections import namedtuple
from itertools import groupby


class RunLengths(namedtuple("RunLengths", ("total", "runs"))):
    """Total width in units and the tuple of alternating run widths"""
    __slots__ = ()

    @classmethod
    def from_bits(cls, bits):
        """Run lengths of a bar pattern

        :param bits:    iterable of 1 (bar) and 0 (space) values
        :return:        RunLengths instance"""
        runs = []
        for index, (bit, group) in enumerate(groupby(bits)):
            if index == 0 and not bit:
                raise ValueError("Bar pattern must start with a bar")
            runs.append(sum(1 for _ in group))
        return cls(sum(runs), tuple(runs))

    @classmethod
    def from_pattern(cls, pattern, bar_char="1", space_char="0"):
        """Run lengths of a pattern rendered as text"""
        bits = []
        for char in pattern:
            if char == bar_char:
                bits.append(1)
            elif char == space_char:
                bits.append(0)
            else:
                raise ValueError(
                    "Unexpected character {!r} in bar pattern".format(char)
                )
        return cls.from_bits(bits)

    @classmethod
    def parse(cls, text):
        """Parse the "<total>:<runs>" text form

        :param str text:    run-length text
        :return:            RunLengths instance"""
        total, separator, digits = text.partition(":")
        if not separator or not total.isdigit() or not digits.isdigit():
            raise ValueError("Malformed run-length text {!r}".format(text))
        runs = tuple(int(digit) for digit in digits)
        if 0 in runs:
            raise ValueError("Run lengths must be positive in {!r}".format(text))
        if sum(runs) != int(total):
            raise ValueError(
                "Runs of {!r} add up to {}, not {}".format(
                    text, sum(runs), total
                )
            )
        return cls(int(total), runs)

    def bits(self):
        """Yields the unit cells, 1 for bar and 0 for space"""
        bit = 1
        for run in self.runs:
            for _ in range(run):
                yield bit
            bit ^= 1

    def pattern(self, bar_char="1", space_char="0"):
        """Rebuild the bar pattern string"""
        chars = (space_char, bar_char)
        return "".join(chars[bit] for bit in self.bits())

    def __str__(self):
        for run in self.runs:
            if run > 9:
                raise ValueError(
                    "Run of {} units can't be written as one digit".format(run)
                )
        return "{}:{}".format(self.total, "".join(str(r) for r in self.runs))
