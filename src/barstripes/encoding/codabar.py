from ..checksum import codabar_mod10
from ..errors import InvalidCharacter, InvalidLength
from .encoding import BarcodeEncoding


class Codabar(BarcodeEncoding):
    """Encoder for Codabar (NW-7) barcodes.

    Data may carry its own start and stop characters (A, B, C, D or their
    aliases T, N, *, E), otherwise it is framed with A and B. Codabar has
    no check digit of its own, add_check has no effect.
    """
    name = "Codabar"
    alphabet = "0123456789-$:/.+"
    guards = "ABCDTNE*"
    check_chars = 0

    # wide/narrow elements, bar first
    wn = {
        "0": "nnnnnww", "1": "nnnnwwn", "2": "nnnwnnw", "3": "wwnnnnn",
        "4": "nnwnnwn", "5": "wnnnnwn", "6": "nwnnnnw", "7": "nwnnwnn",
        "8": "nwwnnnn", "9": "wnnwnnn", "-": "nnnwwnn", "$": "nnwwnnn",
        ":": "wnnnwnw", "/": "wnwnnnw", ".": "wnwnwnn", "+": "nnwnwnw",
        "A": "nnwwnwn", "B": "nwnwnnw", "C": "nnnwnww", "D": "nnnwwwn",
        "T": "nnwwnwn", "N": "nwnwnnw", "*": "nnnwnww", "E": "nnnwwwn"
    }

    default_start = "A"
    default_stop = "B"

    def normalize(self, data):
        return super().normalize(data).upper()

    def _strip_guards(self, data):
        if data and data[0] in self.guards:
            if len(data) < 2 or data[-1] not in self.guards:
                raise InvalidCharacter(
                    "Codabar data {!r} has a start character, but no stop "
                    "character".format(data)
                )
            return data[1:-1]
        if data and data[-1] in self.guards:
            raise InvalidCharacter(
                "Codabar data {!r} has a stop character, but no start "
                "character".format(data)
            )
        return data

    def check_data(self, data):
        data = self.normalize(data)
        if not data:
            raise InvalidLength("Codabar data can't be empty")
        payload = self._strip_guards(data)
        self._check_characters(payload)
        if not payload:
            raise InvalidLength(
                "Codabar data {!r} has nothing between start and stop "
                "characters".format(data)
            )
        return data

    check_payload = check_data

    def check_digit(self, data):
        """Codabar has no check digit, always returns empty string"""
        self.check_data(data)
        return ""

    def check_digit_mod10(self, data):
        """Optional modulo 10 check digit known to some readers

    It isn't part of the symbology and is never added automatically.

    :param str data:    data with or without start and stop characters
    :return:            check digit as a string"""
        payload = self._strip_guards(self.check_data(data))
        values = [self.alphabet.index(char) for char in payload]
        return str(codabar_mod10(values))

    def with_check_digit(self, data):
        data = self.check_data(data)
        if data[0] not in self.guards:
            data = self.default_start + data + self.default_stop
        return data

    def _bars(self, text):
        return self.widths("n".join(self.wn[char] for char in text))
