"""2 of 5 family: every digit has two wide elements out of five.

All variants take digits only and share the modulo 10 check digit of
EAN/UPC (weights 3 and 1 from the right).
"""
from ..checksum import weighted_mod10
from .encoding import BarcodeEncoding


class TwoOfFive(BarcodeEncoding):
    alphabet = "0123456789"

    wn = {
        "0": "nnwwn", "1": "wnnnw", "2": "nwnnw", "3": "wwnnn", "4": "nnwnw",
        "5": "wnwnn", "6": "nwwnn", "7": "nnnww", "8": "wnnwn", "9": "nwnwn"
    }

    def check_digit(self, data):
        """Modulo 10 check digit, odd positions from the right weigh 3

    :param str data:    digits without the check digit
    :return:            check digit as a string"""
        data = self.check_payload(data)
        return str(weighted_mod10(self.digits(data)))


class Interleaved2of5(TwoOfFive):
    """Interleaved 2 of 5 (ITF), digits are encoded in pairs

    The first digit of a pair is written with bars, the second with the
    spaces between them. Data of odd length gets a leading zero.
    """
    name = "Interleaved 2 of 5"

    start = "nnnn"
    stop = "wnn"

    def with_check_digit(self, data):
        data = self.check_data(data)
        if self.options.add_check:
            # check digit makes the count even again
            if len(data) % 2 == 0:
                data = "0" + data
            return data + self.check_digit(data)
        if len(data) % 2 == 1:
            data = "0" + data
        return self.verify_check_digit(data)

    def _bars(self, text):
        elements = self.start
        for i in range(0, len(text), 2):
            bars, spaces = self.wn[text[i]], self.wn[text[i + 1]]
            elements += "".join(b + s for b, s in zip(bars, spaces))
        elements += self.stop
        return self.widths(elements)


class Standard2of5(TwoOfFive):
    """Standard (Industrial) 2 of 5, information only in the bars

    Every digit is five bars, each followed by a narrow space. Wide bars
    are 3 units, the start and stop guard bars 2 units.
    """
    name = "Standard 2 of 5"
    unit_widths = {"n": 1, "w": 3, "2": 2}

    # bars only, spaces are added between all of them
    start = "22n"
    stop = "2n2"

    def _bars(self, text):
        bars = self.start + "".join(self.wn[char] for char in text) + self.stop
        return self.widths("n".join(bars))


class Matrix2of5(TwoOfFive):
    """Matrix 2 of 5, three bars and two spaces per digit

    Wide elements are 3 units, the start and stop guard bars 2 units.
    """
    name = "Matrix 2 of 5"
    unit_widths = {"n": 1, "w": 3, "2": 2}

    # element patterns carry the narrow gap after the character
    start = "2nnnnn"
    stop = "2nnnn"

    def _bars(self, text):
        elements = self.start
        elements += "".join(self.wn[char] + "n" for char in text)
        elements += self.stop
        return self.widths(elements)


class Coop2of5(Matrix2of5):
    """COOP 2 of 5, Matrix 2 of 5 layout with its own digit table"""
    name = "COOP 2 of 5"

    wn = {
        "0": "wwnnn", "1": "nnnww", "2": "nnwnw", "3": "nnwwn", "4": "nwnnw",
        "5": "nwnwn", "6": "nwwnn", "7": "wnnnw", "8": "wnnwn", "9": "wnwnn"
    }

    start = "2n2n"
    stop = "nw2"
