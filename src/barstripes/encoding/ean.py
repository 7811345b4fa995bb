from ..checksum import weighted_mod10
from .encoding import BarcodeEncoding


class Ean(BarcodeEncoding):
    """Shared tables of the EAN/UPC family"""
    patterns = (
        # L pattern, G pattern, R pattern
        (0b0001101, 0b0100111, 0b1110010),  # 0
        (0b0011001, 0b0110011, 0b1100110),  # 1
        (0b0010011, 0b0011011, 0b1101100),  # 2
        (0b0111101, 0b0100001, 0b1000010),  # 3
        (0b0100011, 0b0011101, 0b1011100),  # 4
        (0b0110001, 0b0111001, 0b1001110),  # 5
        (0b0101111, 0b0000101, 0b1010000),  # 6
        (0b0111011, 0b0010001, 0b1000100),  # 7
        (0b0110111, 0b0001001, 0b1001000),  # 8
        (0b0001011, 0b0010111, 0b1110100)   # 9
    )
    L, G, R = 0, 1, 2

    code_bitlength = 7
    alphabet = "0123456789"

    side_guard = 0b101
    middle_guard = 0b01010

    def check_digit(self, data):
        """Modulo 10 check digit, odd positions from the right weigh 3

    :param str data:    digits without the check digit
    :return:            check digit as a string"""
        data = self.check_payload(data)
        return str(weighted_mod10(self.digits(data)))

    @classmethod
    def digit_bars(cls, digit, lgr_index):
        return cls.bits(cls.patterns[digit][lgr_index], cls.code_bitlength)

    @classmethod
    def parity_bars(cls, digits, parity, parity_length):
        """Yields left half digits, G pattern where parity has 1 bit

    :param digits:          digit values
    :param int parity:      parity pattern, most significant bit first
    :param parity_length:   number of bits in parity"""
        for i, digit in enumerate(digits):
            lg_index = (parity >> (parity_length - 1 - i)) & 1
            yield from cls.digit_bars(digit, lg_index)


class Ean13(Ean):
    """EAN-13, 12 digits and a check digit, 95 units wide"""
    name = "EAN-13"
    payload_lengths = (12,)
    full_lengths = (13,)

    # LG pattern chosen by first digit. 0 bit for L, 1 bit for G
    lg_pattern_ean13 = (
        0b000000, 0b001011, 0b001101, 0b001110, 0b010011,
        0b011001, 0b011100, 0b010101, 0b010110, 0b011010
    )

    def _bars(self, text):
        digits = self.digits(text)
        lg_pattern = self.lg_pattern_ean13[digits[0]]
        yield from self.bits(self.side_guard, 3)
        yield from self.parity_bars(digits[1:7], lg_pattern, 6)
        # middle separator, between first 6 and last 6 digits
        yield from self.bits(self.middle_guard, 5)
        for digit in digits[7:]:
            yield from self.digit_bars(digit, self.R)
        yield from self.bits(self.side_guard, 3)


class Ean8(Ean):
    """EAN-8, 7 digits and a check digit, 67 units wide"""
    name = "EAN-8"
    payload_lengths = (7,)
    full_lengths = (8,)

    def _bars(self, text):
        digits = self.digits(text)
        yield from self.bits(self.side_guard, 3)
        for digit in digits[:4]:
            yield from self.digit_bars(digit, self.L)
        yield from self.bits(self.middle_guard, 5)
        for digit in digits[4:]:
            yield from self.digit_bars(digit, self.R)
        yield from self.bits(self.side_guard, 3)


class UpcA(Ean13):
    """UPC-A is an EAN-13 with the leading number system digit 0"""
    name = "UPC-A"
    payload_lengths = (11,)
    full_lengths = (12,)

    def check_digit(self, data):
        data = self.check_payload(data)
        return Ean13().check_digit("0" + data)

    def _bars(self, text):
        return super()._bars("0" + text)
