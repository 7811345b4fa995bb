from ..checksum import digit_sum_mod10
from .encoding import BarcodeEncoding


class PostNet(BarcodeEncoding):
    """Encoder for USPS PostNet barcodes.

    Unlike other symbologies, every unit is a bar: 1 is a tall bar and 0 a
    short one, bar_char and space_char stand for them. Dashes in ZIP codes
    are accepted and dropped.
    """
    name = "PostNet"
    alphabet = "0123456789-"
    # ZIP, ZIP+4 and delivery point, with and without the check digit
    payload_lengths = (5, 9, 11)
    full_lengths = (6, 10, 12)

    # tall/short bars of each digit, two tall out of five
    patterns = (
        0b11000, 0b00011, 0b00101, 0b00110, 0b01001,
        0b01010, 0b01100, 0b10001, 0b10010, 0b10100
    )
    guard = 0b1

    def _digits_only(self, data):
        data = self.normalize(data)
        self._check_characters(data)
        return data.replace("-", "")

    def check_data(self, data):
        data = self._digits_only(data)
        if self.options.add_check:
            self._check_length(data, self.payload_lengths)
        else:
            self._check_length(data, self.full_lengths)
        return data

    def check_payload(self, data):
        data = self._digits_only(data)
        self._check_length(data, self.payload_lengths)
        return data

    def check_digit(self, data):
        """Check digit making the sum of all digits a multiple of 10

    :param str data:    ZIP code, dashes allowed
    :return:            check digit as a string"""
        data = self.check_payload(data)
        return str(digit_sum_mod10(self.digits(data)))

    def _bars(self, text):
        yield from self.bits(self.guard, 1)
        for digit in self.digits(text):
            yield from self.bits(self.patterns[digit], 5)
        yield from self.bits(self.guard, 1)
