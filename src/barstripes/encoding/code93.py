from ..checksum import mod47_pair
from ..errors import InvalidCharacter
from .code39 import full_ascii_table
from .encoding import BarcodeEncoding


class Code93(BarcodeEncoding):
    """Encoder for Code93 barcodes.

    The four shift characters ($), (%), (/) and (+) have no printable form,
    they are written as "<", "[", "{" and "(" in data passed to the encoder.
    With auto_promote any ASCII text is accepted and rewritten with the
    shift characters before the check characters are computed.
    """
    name = "Code 93"
    alphabet = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ-. $/+%<[{("
    check_chars = 2
    supports_auto_promote = True

    # stripe patterns, 1 for black, 0 for background white
    pattern = [
        0b100010100, 0b101001000, 0b101000100, 0b101000010, 0b100101000,
        0b100100100, 0b100100010, 0b101010000, 0b100010010, 0b100001010,
        0b110101000, 0b110100100, 0b110100010, 0b110010100, 0b110010010,
        0b110001010, 0b101101000, 0b101100100, 0b101100010, 0b100110100,
        0b100011010, 0b101011000, 0b101001100, 0b101000110, 0b100101100,
        0b100010110, 0b110110100, 0b110110010, 0b110101100, 0b110100110,
        0b110010110, 0b110011010, 0b101101100, 0b101100110, 0b100110110,
        0b100111010, 0b100101110, 0b111010100, 0b111010010, 0b111001010,
        0b101101110, 0b101110110, 0b110101110, 0b100100110, 0b111011010,
        0b111010110, 0b100110010, 0b101011110
    ]

    # bit pattern symbolizing start and stop
    start = 47
    stop = 47

    code_bitlength = 9

    ascii_table = full_ascii_table("<", "[", "{", "(")

    def normalize(self, data):
        data = super().normalize(data)
        if not self.options.auto_promote:
            return data
        promoted = []
        for position, char in enumerate(data):
            if char not in self.ascii_table:
                raise InvalidCharacter(
                    "{!r} at position {} can't be encoded in Code93".format(
                        char, position
                    )
                )
            promoted.append(self.ascii_table[char])
        return "".join(promoted)

    def _checksum(self, text):
        codes = [self.alphabet.index(char) for char in text]
        return "".join(self.alphabet[code] for code in mod47_pair(codes))

    def check_digit(self, data):
        """Computes "C" and "K" check characters

    With auto_promote, data is promoted first.

    :param str data:    data without check characters
    :return:            string of two characters"""
        return self._checksum(self.check_payload(data))

    def with_check_digit(self, data):
        if not self.options.auto_promote:
            return super().with_check_digit(data)
        # auto_promote always comes with add_check
        data = self.check_data(data)
        return data + self._checksum(data)

    def _bars(self, text):
        yield from self.bits(self.pattern[self.start], self.code_bitlength)
        for char in text:
            code = self.alphabet.index(char)
            yield from self.bits(self.pattern[code], self.code_bitlength)
        yield from self.bits(self.pattern[self.stop], self.code_bitlength)
        # termination bar
        yield from self.bits(1, 1)
