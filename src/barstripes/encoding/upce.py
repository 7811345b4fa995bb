from ..checksum import weighted_mod10
from ..errors import (
    ChecksumMismatch,
    InvalidCharacter,
    InvalidLength,
    UnsupportedConversion,
)
from .ean import Ean


def _check_digits(text, lengths, name):
    if not isinstance(text, str) or not text.isdigit() or not text.isascii():
        raise InvalidCharacter("{} must consist of digits: {!r}".format(name, text))
    if len(text) not in lengths:
        raise InvalidLength(
            "{} must be {} digits long, got {!r}".format(
                name, " or ".join(str(length) for length in lengths), text
            )
        )


def upca_to_upce(upca):
    """Compresses UPC-A number into UPC-E

    Only numbers with enough zeros in the right places can be compressed,
    the other raise UnsupportedConversion. Missing check digit is computed.

    :param str upca:    11 or 12 digit UPC-A number
    :return:            8 digit UPC-E number"""
    _check_digits(upca, (11, 12), "UPC-A")
    if len(upca) == 11:
        upca += str(weighted_mod10(UpcE.digits(upca)))
    number_system, payload, check = upca[0], upca[1:11], upca[11]
    if payload[2] in "012" and payload[3:7] == "0000":
        compressed = payload[:2] + payload[7:] + payload[2]
    elif payload[2] in "3456789" and payload[3:8] == "00000":
        compressed = payload[:3] + payload[8:] + "3"
    elif payload[4:9] == "00000":
        compressed = payload[:4] + payload[9] + "4"
    elif payload[5:9] == "0000" and payload[9] in "56789":
        compressed = payload[:5] + payload[9]
    else:
        raise UnsupportedConversion("Can't turn {} into a UPC-E".format(upca))
    return number_system + compressed + check


def upce_to_upca(upce):
    """Expands UPC-E number into UPC-A

    :param str upce:    6 digits (number system 0 is assumed), 7 digits
                        with number system or 8 digits with check digit
    :return:            11 digits, or 12 when upce had its check digit"""
    _check_digits(upce, (6, 7, 8), "UPC-E")
    if len(upce) == 6:
        upce = "0" + upce
    number_system, payload, check = upce[0], upce[1:7], upce[7:]
    last = payload[5]
    if last in "012":
        expanded = payload[:2] + last + "0000" + payload[2:5]
    elif last == "3":
        expanded = payload[:3] + "00000" + payload[3:5]
    elif last == "4":
        expanded = payload[:4] + "00000" + payload[4]
    else:
        expanded = payload[:5] + "0000" + last
    return number_system + expanded + check


class UpcE(Ean):
    """UPC-E, zero-suppressed UPC-A with number system 0 or 1

    Number system and check digit are not encoded as symbols, they select
    the odd/even parity of the six payload digits.
    """
    name = "UPC-E"
    # with add_check: 11 digit UPC-A or UPC-E without check digit,
    # otherwise 12 digit UPC-A or 8 digit UPC-E
    payload_lengths = (6, 7, 11)
    full_lengths = (8, 12)

    # keyed by check digit, parity of number system 0, 1 bit for even (G)
    # pattern. Number system 1 uses the complement.
    parity_patterns = (
        0b111000, 0b110100, 0b110010, 0b110001, 0b101100,
        0b100110, 0b100011, 0b101010, 0b101001, 0b100101
    )

    left_guard = 0b101
    right_guard = 0b010101

    def check_data(self, data):
        data = super().check_data(data)
        if len(data) != 6 and data[0] not in "01":
            raise InvalidCharacter(
                "UPC-E number system must be 0 or 1, got {!r} in {!r}".format(
                    data[0], data
                )
            )
        if len(data) in (11, 12):
            upca_to_upce(data)
        return data

    def check_digit(self, data):
        """Check digit of the UPC-A number behind data

    :param str data:    11 digit UPC-A, 6 or 7 digit UPC-E
    :return:            check digit as a string"""
        data = self.check_payload(data)
        if len(data) != 11:
            data = upce_to_upca(data)
        return str(weighted_mod10(self.digits(data)))

    def with_check_digit(self, data):
        data = self.check_data(data)
        if self.options.add_check:
            if len(data) == 6:
                data = "0" + data
            data += self.check_digit(data)
        else:
            upca = data if len(data) == 12 else upce_to_upca(data)
            expected = self.check_digit(upca[:11])
            if upca[11] != expected:
                raise ChecksumMismatch(
                    "Invalid {} check {!r} in {!r}, expected {!r}".format(
                        self.name, upca[11], data, expected
                    )
                )
        if len(data) == 12:
            data = upca_to_upce(data)
        return data

    def _bars(self, text):
        digits = self.digits(text)
        number_system, payload, check = digits[0], digits[1:7], digits[7]
        parity = self.parity_patterns[check]
        if number_system == 1:
            parity ^= 0b111111
        yield from self.bits(self.left_guard, 3)
        yield from self.parity_bars(payload, parity, 6)
        yield from self.bits(self.right_guard, 6)
