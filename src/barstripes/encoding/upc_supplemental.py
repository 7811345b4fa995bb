from abc import abstractmethod

from ..checksum import mod4, weighted_mod10_3_9
from .ean import Ean


class UpcSupplemental(Ean):
    """Add-on symbol printed right of an EAN or UPC barcode

    The check digit isn't drawn as a symbol, it chooses the L/G parity
    of the payload digits.
    """
    left_guard = 0b1011
    separator = 0b01

    # keyed by check digit, 1 bit for G pattern
    parity_patterns = ()

    def check_digit(self, data):
        data = self.check_payload(data)
        return str(self.check_value(self.digits(data)))

    @staticmethod
    @abstractmethod
    def check_value(digits):
        """Check value of the payload digits, selects the parity pattern"""
        raise NotImplementedError

    def _bars(self, text):
        digits = self.digits(text)
        payload, check = digits[:-1], digits[-1]
        parity = self.parity_patterns[check]
        yield from self.bits(self.left_guard, 4)
        for i, digit in enumerate(payload):
            if i:
                yield from self.bits(self.separator, 2)
            lg_index = (parity >> (len(payload) - 1 - i)) & 1
            yield from self.digit_bars(digit, lg_index)


class UpcSupplemental2(UpcSupplemental):
    """Two digit add-on, usually a periodical issue number. 20 units wide"""
    name = "UPC 2-digit supplement"
    payload_lengths = (2,)
    full_lengths = (3,)

    parity_patterns = (0b00, 0b01, 0b10, 0b11)

    check_value = staticmethod(mod4)


class UpcSupplemental5(UpcSupplemental):
    """Five digit add-on, usually a suggested retail price. 47 units wide"""
    name = "UPC 5-digit supplement"
    payload_lengths = (5,)
    full_lengths = (6,)

    parity_patterns = (
        0b11000, 0b10100, 0b10010, 0b10001, 0b01100,
        0b00110, 0b00011, 0b01010, 0b01001, 0b00101
    )

    check_value = staticmethod(weighted_mod10_3_9)
