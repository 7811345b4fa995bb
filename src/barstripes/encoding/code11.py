from ..checksum import code11_mod11
from .encoding import BarcodeEncoding


class Code11(BarcodeEncoding):
    """Encoder for Code 11 barcodes.

    Digits and dash. One check digit is used for less than 10 characters,
    two check digits from 10 characters on. Check value 10 is written as
    a dash.
    """
    name = "Code 11"
    alphabet = "0123456789-"

    # wide/narrow elements including the narrow gap after the character
    wn = {
        "0": "nnnnwn", "1": "wnnnwn", "2": "nwnnwn", "3": "wwnnnn",
        "4": "nnwnwn", "5": "wnwnnn", "6": "nwwnnn", "7": "nnnwwn",
        "8": "wnnwnn", "9": "wnnnnn", "-": "nnwnnn"
    }
    start_stop = "nnwwnn"

    # number of characters from which the second check digit is used
    two_check_digits_from = 10

    def values(self, text):
        return [self.alphabet.index(char) for char in text]

    def check_digit(self, data):
        """Computes one or two check digits

    :param str data:    data without check digits
    :return:            string of one or two characters"""
        data = self.check_payload(data)
        first = self.alphabet[code11_mod11(self.values(data))]
        if len(data) < self.two_check_digits_from:
            return first
        second = self.alphabet[code11_mod11(self.values(data + first), 9)]
        return first + second

    def split_check(self, data):
        if len(data) - 2 >= self.two_check_digits_from:
            return data[:-2], data[-2:]
        return super().split_check(data)

    def _bars(self, text):
        elements = self.start_stop
        elements += "".join(self.wn[char] for char in text)
        elements += self.start_stop
        # no gap after the stop character
        return self.widths(elements[:-1])
