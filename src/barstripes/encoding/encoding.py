import logging
from abc import ABC, abstractmethod

from ..errors import (
    ChecksumMismatch,
    ConfigurationConflict,
    InvalidCharacter,
    InvalidInput,
    InvalidLength,
    UnsupportedConversion,
)
from ..options import EncodingOptions
from ..rle import RunLengths

logger = logging.getLogger(__name__)


class BarcodeEncoding(ABC):
    """Linear barcode base class

    A subclass describes one symbology through class attributes (name,
    alphabet, accepted lengths, number of check characters) and implements
    ``check_digit`` and ``_bars``. Instances only keep their immutable
    options, so one encoder may serve any number of callers.
    """
    name = None
    alphabet = ""
    # accepted data lengths before and after the check characters are added,
    # None when the symbology has variable length
    payload_lengths = None
    full_lengths = None
    # number of check characters appended by check_digit
    check_chars = 1
    supports_auto_promote = False
    # widths in units of the letters used by wide/narrow tables
    unit_widths = {"n": 1, "w": 2}

    def __init__(self, options=None, **kwargs):
        if options is None:
            options = EncodingOptions.from_mapping(kwargs)
        elif kwargs:
            raise ConfigurationConflict(
                "Pass either options or keyword arguments, not both"
            )
        if options.auto_promote and not self.supports_auto_promote:
            raise ConfigurationConflict(
                "{} doesn't support auto_promote".format(self.name)
            )
        self.options = options

    def __repr__(self):
        return "{}({!r})".format(type(self).__name__, self.options)

    @classmethod
    def bits(cls, number, bit_length):
        for shift in range(bit_length - 1, -1, -1):
            yield (number >> shift) & 1

    @classmethod
    def widths(cls, elements):
        """Expands alternating bar and space elements into bits

    :param str elements:    wide/narrow letters, first one is a bar
    :return:                yields bits (0/1)"""
        bit = 1
        for element in elements:
            for _ in range(cls.unit_widths[element]):
                yield bit
            bit ^= 1

    @classmethod
    def digits(cls, text):
        return [ord(char) - ord("0") for char in text]

    def normalize(self, data):
        """Turns caller's data into the text checked and encoded"""
        if not isinstance(data, str):
            raise InvalidCharacter(
                "{} data must be a string, got {!r}".format(self.name, data)
            )
        return data

    def _check_characters(self, data, alphabet=None):
        alphabet = self.alphabet if alphabet is None else alphabet
        for position, char in enumerate(data):
            if char not in alphabet:
                raise InvalidCharacter(
                    "{!r} at position {} can't be encoded in {}".format(
                        char, position, self.name
                    )
                )

    def _check_length(self, data, lengths):
        if not data:
            raise InvalidLength("{} data can't be empty".format(self.name))
        if lengths is not None and len(data) not in lengths:
            raise InvalidLength(
                "{} data must be {} characters long, got {} in {!r}".format(
                    self.name,
                    " or ".join(str(length) for length in lengths),
                    len(data),
                    data
                )
            )

    def check_data(self, data):
        """Checks characters and length of data

    :param str data:    data as passed to encode
    :return:            normalized data
    :raises InvalidInput: when data can't be encoded"""
        data = self.normalize(data)
        self._check_characters(data)
        if self.options.add_check:
            self._check_length(data, self.payload_lengths)
        else:
            self._check_length(data, self.full_lengths)
        return data

    def check_payload(self, data):
        """Normalizes and checks data passed to check_digit"""
        data = self.normalize(data)
        self._check_characters(data)
        self._check_length(data, self.payload_lengths)
        return data

    def validate(self, data):
        """True if data can be encoded with the current options"""
        try:
            self.check_data(data)
        except (InvalidInput, UnsupportedConversion):
            return False
        return True

    @abstractmethod
    def check_digit(self, data):
        """Computes check character(s) of data without check characters"""
        raise NotImplementedError

    def split_check(self, data):
        """Splits data into payload and the embedded check characters"""
        if len(data) <= self.check_chars:
            raise InvalidLength(
                "{} data {!r} is too short to carry {} check "
                "character(s)".format(self.name, data, self.check_chars)
            )
        return data[:-self.check_chars], data[-self.check_chars:]

    def with_check_digit(self, data):
        """Returns the text that is actually encoded

    With add_check, the check characters are appended, otherwise the ones
    at the end of data are verified.

    :param str data:    data to encode
    :return:            data including check characters"""
        data = self.check_data(data)
        if not self.check_chars:
            return data
        if self.options.add_check:
            return data + self.check_digit(data)
        return self.verify_check_digit(data)

    def verify_check_digit(self, data):
        """Returns data if it ends with its correct check characters

    :raises ChecksumMismatch: when the check characters are wrong"""
        payload, check = self.split_check(data)
        expected = self.check_digit(payload)
        if check != expected:
            raise ChecksumMismatch(
                "Invalid {} check {!r} in {!r}, expected {!r}".format(
                    self.name, check, data, expected
                )
            )
        return data

    @abstractmethod
    def _bars(self, text):
        """Yields bits of text which already carries its check characters"""
        raise NotImplementedError

    def bars(self, data):
        """Encodes data to series of bits, 1 for black bar,
0 for background.

    Data is checked before the first bit is produced, so errors never
    leave a partial pattern behind.

    :param str data:        data to encode
    :return:                iterator of bits (0/1)"""
        text = self.with_check_digit(data)
        logger.debug("Encoding %r as %s", text, self.name)
        return self._bars(text)

    def encode(self, data):
        """Bar pattern of data written with bar_char and space_char"""
        chars = (self.options.space_char, self.options.bar_char)
        return "".join(chars[bit] for bit in self.bars(data))

    def encode_rle(self, data):
        """Run-length form of the bar pattern of data"""
        return RunLengths.from_bits(self.bars(data))
