from ..checksum import mod43
from ..errors import InvalidCharacter
from .encoding import BarcodeEncoding


def full_ascii_table(dollar, percent, slash, plus):
    """Builds "full ASCII" substitutions shared by Code39 and Code93

    Digits, capital letters, space, dash and dot stand for themselves,
    every other ASCII character becomes a shift character followed by
    a capital letter.

    :param str dollar:      shift for control characters 1-26
    :param str percent:     shift for the remaining control and punctuation
    :param str slash:       shift for punctuation
    :param str plus:        shift for lowercase letters
    :return:                dict of 128 characters to their substitution"""
    table = {}
    for code in range(128):
        char = chr(code)
        if char.isdigit() or "A" <= char <= "Z" or char in " -.":
            table[char] = char
        elif code == 0:
            table[char] = percent + "U"
        elif code <= 26:
            table[char] = dollar + chr(ord("A") + code - 1)
        elif code <= 31:
            table[char] = percent + chr(ord("A") + code - 27)
        elif code <= 47:
            table[char] = slash + chr(ord("A") + code - 33)
        elif code == 58:
            table[char] = slash + "Z"
        elif code <= 63:
            table[char] = percent + chr(ord("F") + code - 59)
        elif code == 64:
            table[char] = percent + "V"
        elif code <= 95:
            table[char] = percent + chr(ord("K") + code - 91)
        elif code == 96:
            table[char] = percent + "W"
        elif code <= 122:
            table[char] = plus + chr(ord("A") + code - 97)
        else:
            table[char] = percent + chr(ord("P") + code - 123)
    return table


class Code39(BarcodeEncoding):
    """Encoder for Code 3 of 9 barcodes.

    Every character is 5 bars and 4 spaces, three of them wide, followed by
    a narrow gap. The symbol is framed by "*" characters.
    """
    name = "Code 39"
    alphabet = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ-. $/+%"

    # wide/narrow elements, bar first
    wn = {
        "0": "nnnwwnwnn", "1": "wnnwnnnnw", "2": "nnwwnnnnw",
        "3": "wnwwnnnnn", "4": "nnnwwnnnw", "5": "wnnwwnnnn",
        "6": "nnwwwnnnn", "7": "nnnwnnwnw", "8": "wnnwnnwnn",
        "9": "nnwwnnwnn", "A": "wnnnnwnnw", "B": "nnwnnwnnw",
        "C": "wnwnnwnnn", "D": "nnnnwwnnw", "E": "wnnnwwnnn",
        "F": "nnwnwwnnn", "G": "nnnnnwwnw", "H": "wnnnnwwnn",
        "I": "nnwnnwwnn", "J": "nnnnwwwnn", "K": "wnnnnnnww",
        "L": "nnwnnnnww", "M": "wnwnnnnwn", "N": "nnnnwnnww",
        "O": "wnnnwnnwn", "P": "nnwnwnnwn", "Q": "nnnnnnwww",
        "R": "wnnnnnwwn", "S": "nnwnnnwwn", "T": "nnnnwnwwn",
        "U": "wwnnnnnnw", "V": "nwwnnnnnw", "W": "wwwnnnnnn",
        "X": "nwnnwnnnw", "Y": "wwnnwnnnn", "Z": "nwwnwnnnn",
        "-": "nwnnnnwnw", ".": "wwnnnnwnn", " ": "nwwnnnwnn",
        "$": "nwnwnwnnn", "/": "nwnwnnnwn", "+": "nwnnnwnwn",
        "%": "nnnwnwnwn", "*": "nwnnwnwnn"
    }

    start_stop = "*"

    ascii_table = full_ascii_table("$", "%", "/", "+")

    def check_digit(self, data):
        """Modulo 43 check character

    :param str data:    data without check character
    :return:            check character"""
        data = self.check_payload(data)
        return self.alphabet[mod43([self.alphabet.index(c) for c in data])]

    def full_ascii(self, text):
        """Rewrites any ASCII text with shift pairs of the Code39 alphabet

    Scanners have to be told that the barcode is in full ASCII mode, the
    symbol itself doesn't say so.

    :param str text:    ASCII text
    :return:            text made of the Code39 alphabet"""
        result = []
        for position, char in enumerate(text):
            if char not in self.ascii_table:
                raise InvalidCharacter(
                    "{!r} at position {} isn't ASCII".format(char, position)
                )
            result.append(self.ascii_table[char])
        return "".join(result)

    def _bars(self, text):
        framed = self.start_stop + text + self.start_stop
        elements = "n".join(self.wn[char] for char in framed)
        return self.widths(elements)
