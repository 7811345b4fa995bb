from ..checksum import plessey_mod10, plessey_mod11
from ..errors import ConfigurationConflict
from .encoding import BarcodeEncoding


class Plessey(BarcodeEncoding):
    """Encoder for MSI Plessey barcodes.

    Each hexadecimal digit is written as four bits, most significant first,
    a bit being a narrow (0) or wide (1) bar in a 3 unit cell.

    :param str checksum:    "mod10" (default), "mod10_mod10", "mod11"
                            or "mod11_mod10"
    """
    name = "MSI Plessey"
    alphabet = "0123456789ABCDEF"

    zero = 0b100
    one = 0b110
    start = 0b110
    stop = 0b1001

    checksums = ("mod10", "mod10_mod10", "mod11", "mod11_mod10")

    def __init__(self, options=None, checksum="mod10", **kwargs):
        super().__init__(options, **kwargs)
        if checksum not in self.checksums:
            raise ConfigurationConflict(
                "Unknown Plessey checksum {!r}, use one of {}".format(
                    checksum, ", ".join(self.checksums)
                )
            )
        self.checksum = checksum
        self.check_chars = 1 if checksum in ("mod10", "mod11") else 2

    def __repr__(self):
        return "{}({!r}, checksum={!r})".format(
            type(self).__name__, self.options, self.checksum
        )

    def values(self, text):
        return [self.alphabet.index(char) for char in text]

    def _mod10(self, text):
        return self.alphabet[plessey_mod10(self.values(text))]

    def _mod11(self, text):
        # 10 is written as "A", no reader confirmed it
        return self.alphabet[plessey_mod11(self.values(text))]

    def check_digit(self, data):
        """Computes check digit(s) of the configured checksum

    :param str data:    hexadecimal digits without check digits
    :return:            string of one or two characters"""
        data = self.check_payload(data)
        if self.checksum == "mod10":
            return self._mod10(data)
        if self.checksum == "mod11":
            return self._mod11(data)
        first = self._mod10(data) if self.checksum == "mod10_mod10" \
            else self._mod11(data)
        return first + self._mod10(data + first)

    def _bars(self, text):
        yield from self.bits(self.start, 3)
        for char in text:
            for bit in self.bits(self.alphabet.index(char), 4):
                yield from self.bits(self.one if bit else self.zero, 3)
        yield from self.bits(self.stop, 4)
