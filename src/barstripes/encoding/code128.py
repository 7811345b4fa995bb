import logging
from enum import Enum

from ..checksum import mod103
from ..errors import InvalidCharacter, InvalidLength
from .encoding import BarcodeEncoding

logger = logging.getLogger(__name__)


class Control(Enum):
    """Code128 symbols that aren't characters"""
    SHIFT = "SHIFT"
    FNC1 = "FNC1"
    FNC2 = "FNC2"
    FNC3 = "FNC3"
    FNC4 = "FNC4"
    CODE_A = "CODE_A"
    CODE_B = "CODE_B"
    CODE_C = "CODE_C"
    START_A = "START_A"
    START_B = "START_B"
    START_C = "START_C"
    STOP = "STOP"


# controls that may appear in data
DATA_CONTROLS = frozenset(
    (Control.SHIFT, Control.FNC1, Control.FNC2, Control.FNC3, Control.FNC4)
)

# names of ASCII control characters, used by Code128.describe
LOW_ASCII = (
    "NUL", "SOH", "STX", "ETX", "EOT", "ENQ", "ACK", "BEL", "BS", "HT", "LF",
    "VT", "FF", "CR", "SO", "SI", "DLE", "DC1", "DC2", "DC3", "DC4", "NAK",
    "SYN", "ETB", "CAN", "EM", "SUB", "ESC", "FS", "GS", "RS", "US"
)


class Code128(BarcodeEncoding):
    """
    Encoder for Code128 barcode.

    Data is a string or a sequence of one character strings and Control
    members. The character sets A, B and C are chosen automatically, so
    that digit runs are packed in pairs and switches are few. The modulo 103
    check symbol is always added.
    """
    name = "Code 128"
    check_chars = 0

    # stripe patterns written as a number, 1 bit for black stripe,
    # 0 bit for white background, 11 bits long
    pattern = [
        1740, 1644, 1638, 1176, 1164, 1100, 1224, 1220, 1124, 1608, 1604,
        1572, 1436, 1244, 1230, 1484, 1260, 1254, 1650, 1628, 1614, 1764,
        1652, 1902, 1868, 1836, 1830, 1892, 1844, 1842, 1752, 1734, 1590,
        1304, 1112, 1094, 1416, 1128, 1122, 1672, 1576, 1570, 1464, 1422,
        1134, 1496, 1478, 1142, 1910, 1678, 1582, 1768, 1762, 1774, 1880,
        1862, 1814, 1896, 1890, 1818, 1914, 1602, 1930, 1328, 1292, 1200,
        1158, 1068, 1062, 1424, 1412, 1232, 1218, 1076, 1074, 1554, 1616,
        1978, 1556, 1146, 1340, 1212, 1182, 1508, 1268, 1266, 1956, 1940,
        1938, 1758, 1782, 1974, 1400, 1310, 1118, 1512, 1506, 1960, 1954,
        1502, 1518, 1886, 1966, 1668, 1680, 1692
    ]

    # start pattern, different for every character set
    start = {"A": 103, "B": 104, "C": 105}
    start_controls = {
        "A": Control.START_A, "B": Control.START_B, "C": Control.START_C
    }

    # function and switch symbols in each character set
    functions = {
        "A": {
            Control.FNC3: 96, Control.FNC2: 97, Control.SHIFT: 98,
            Control.CODE_C: 99, Control.CODE_B: 100, Control.FNC4: 101,
            Control.FNC1: 102
        },
        "B": {
            Control.FNC3: 96, Control.FNC2: 97, Control.SHIFT: 98,
            Control.CODE_C: 99, Control.FNC4: 100, Control.CODE_A: 101,
            Control.FNC1: 102
        },
        "C": {
            Control.CODE_B: 100, Control.CODE_A: 101, Control.FNC1: 102
        }
    }
    switch = {"A": Control.CODE_A, "B": Control.CODE_B, "C": Control.CODE_C}

    # stop pattern, 13 bits long
    stop = 6379
    stop_value = 106

    # bit length of non-control characters
    code_bitlength = 11

    @staticmethod
    def _is_digit(symbol):
        return isinstance(symbol, str) and "0" <= symbol <= "9"

    @staticmethod
    def _in_A(symbol):
        return symbol in DATA_CONTROLS or ord(symbol) < 96

    @staticmethod
    def _in_B(symbol):
        return symbol in DATA_CONTROLS or ord(symbol) >= 32

    def _fits(self, data, position, charset):
        """True if symbol at position can be written in charset A or B

        SHIFT and the character after it are written in A when that
        character is in B, and the other way round."""
        symbol = data[position]
        shifted = False
        if symbol is Control.SHIFT:
            symbol, shifted = data[position + 1], True
        elif position and data[position - 1] is Control.SHIFT:
            shifted = True
        if (charset == "A") != shifted:
            return self._in_A(symbol)
        return self._in_B(symbol)

    @classmethod
    def _enc_A(cls, symbol):
        """Encode single character from A alphabet

        :param symbol:      A character or Control member
        :return:            Character code integer"""
        if isinstance(symbol, Control):
            return cls.functions["A"][symbol]
        code = ord(symbol)
        if code < 32:
            return code + 64
        elif 32 <= code < 96:
            return code - 32
        else:
            raise InvalidCharacter(
                "{!r} can't be encoded in code128A alphabet".format(symbol)
            )

    @classmethod
    def _enc_B(cls, symbol):
        """Encode single character from B alphabet

        :param symbol:      A character or Control member
        :return:            Character code integer"""
        if isinstance(symbol, Control):
            return cls.functions["B"][symbol]
        code = ord(symbol)
        if 32 <= code < 128:
            return code - 32
        else:
            raise InvalidCharacter(
                "{!r} can't be encoded in code128B alphabet".format(symbol)
            )

    @classmethod
    def _enc_C(cls, two_chars):
        """Encode pair of digit characters or FNC1 into C alphabet code

        :param two_chars:   Two digit characters or Control.FNC1
        :return:            Character code integer
        """
        if isinstance(two_chars, Control):
            return cls.functions["C"][two_chars]
        return int(two_chars)

    @classmethod
    def _encode_one(cls, alphabet, s):
        """Encode a character or pair of digits into character code
of chosen alphabet

        :param str alphabet: "A", "B" or "C" alphabet
        :param s:            Character, pair of digits or Control member
        :return:             Character code (integer)"""
        if alphabet == "A":
            return cls._enc_A(s)
        elif alphabet == "B":
            return cls._enc_B(s)
        elif alphabet == "C":
            return cls._enc_C(s)
        raise ValueError("Unknown encoding: {!r}".format(alphabet))

    def normalize(self, data):
        try:
            return list(data)
        except TypeError:
            raise InvalidCharacter(
                "Code128 data must be a string or a sequence, got {!r}".format(
                    data
                )
            ) from None

    def _check_characters(self, data, alphabet=None):
        for position, symbol in enumerate(data):
            if isinstance(symbol, Control) and symbol in DATA_CONTROLS:
                continue
            if not isinstance(symbol, str) or len(symbol) != 1 \
                    or ord(symbol) > 127:
                raise InvalidCharacter(
                    "{!r} at position {} can't be encoded in {}".format(
                        symbol, position, self.name
                    )
                )

    def check_data(self, data):
        data = self.normalize(data)
        self._check_characters(data)
        if not data:
            raise InvalidLength("{} data can't be empty".format(self.name))
        for position, symbol in enumerate(data):
            if symbol is not Control.SHIFT:
                continue
            if position + 1 == len(data) \
                    or isinstance(data[position + 1], Control):
                raise InvalidCharacter(
                    "SHIFT at position {} must be followed by a "
                    "character".format(position)
                )
        return data

    def _all_c(self, data):
        """True for an even number of digits, optionally framed by FNC1"""
        start = 1 if data[0] is Control.FNC1 else 0
        end = len(data) - 1 if data[-1] is Control.FNC1 else len(data)
        digits = data[start:end]
        return bool(digits) and len(digits) % 2 == 0 \
            and all(self._is_digit(s) for s in digits)

    def _odd_digits(self, data):
        """Length of the C part of digits with an odd count, framed by
any number of FNC1, or 0 when data isn't such"""
        start = 0
        while start < len(data) and data[start] is Control.FNC1:
            start += 1
        end = len(data)
        while end > start and data[end - 1] is Control.FNC1:
            end -= 1
        digits = data[start:end]
        if len(digits) >= 3 and len(digits) % 2 == 1 \
                and all(self._is_digit(s) for s in digits):
            return end - 1
        return 0

    def _c_map(self, data):
        """Marks positions packed in character set C

        Digit runs after other characters need 6 digits to be worth two
        switches, an odd run leaves its first digit to A or B. Runs at the
        beginning or the end need 4 digits."""
        size = len(data)
        c_map = [False] * size
        odd_end = self._odd_digits(data)
        if odd_end:
            for i in range(odd_end):
                c_map[i] = True
            return c_map

        lead = 0
        while lead < size and data[lead] is Control.FNC1:
            lead += 1

        runs = []
        i = 0
        while i < size:
            # a shifted digit isn't packed
            if self._is_digit(data[i]) \
                    and not (i and data[i - 1] is Control.SHIFT):
                j = i
                while j < size and self._is_digit(data[j]):
                    j += 1
                runs.append((i, j))
                i = j
            else:
                i += 1

        for start, end in runs:
            length = end - start
            if start == lead:
                if length >= 4:
                    # longest even prefix, leading FNC1 included
                    for k in range(start + length - length % 2):
                        c_map[k] = True
            elif length >= 6:
                for k in range(start + length % 2, end):
                    c_map[k] = True

        if runs:
            start, end = runs[-1]
            trailing = all(s is Control.FNC1 for s in data[end:])
            if trailing and end - start >= 4 and start != lead \
                    and not all(c_map[end - 4:end]):
                for k in range(end - 4, end):
                    c_map[k] = True

        # FNC1 right after packed digits stays in C
        for i in range(1, size):
            if data[i] is Control.FNC1 and c_map[i - 1]:
                c_map[i] = True
        return c_map

    def charset_map(self, data):
        """Chooses character set for every symbol of data

    :param data:    checked data, list of characters and Control members
    :return:        string of "A", "B" and "C", one letter per symbol"""
        if self._all_c(data):
            return "C" * len(data)
        charsets = ["C" if c else None for c in self._c_map(data)]
        i = 0
        while i < len(data):
            if charsets[i] is not None:
                i += 1
                continue
            end = i
            while end < len(data) and charsets[end] is None:
                end += 1
            # greedily take the longer of A and B runs, A wins ties
            while i < end:
                a_len = 0
                while i + a_len < end and self._fits(data, i + a_len, "A"):
                    a_len += 1
                b_len = 0
                while i + b_len < end and self._fits(data, i + b_len, "B"):
                    b_len += 1
                if not a_len and not b_len:
                    raise InvalidCharacter(
                        "{!r} at position {} can't be encoded in {}".format(
                            data[i], i, self.name
                        )
                    )
                charset, run = ("A", a_len) if a_len >= b_len else ("B", b_len)
                for k in range(i, i + run):
                    charsets[k] = charset
                i += run
        return "".join(charsets)

    def _data_symbols(self, data):
        charsets = self.charset_map(data)
        logger.debug("Code128 character sets of %r: %s", data, charsets)
        current = charsets[0]
        codes = [self.start[current]]
        i = 0
        while i < len(data):
            if charsets[i] != current:
                codes.append(self.functions[current][self.switch[charsets[i]]])
                current = charsets[i]
            if current == "C" and self._is_digit(data[i]):
                codes.append(self._enc_C(data[i] + data[i + 1]))
                i += 2
            elif data[i] is Control.SHIFT:
                other = "B" if current == "A" else "A"
                codes.append(self.functions[current][Control.SHIFT])
                codes.append(self._encode_one(other, data[i + 1]))
                i += 2
            else:
                codes.append(self._encode_one(current, data[i]))
                i += 1
        return codes

    def check_digit(self, data):
        """Modulo 103 check symbol of data

    :param data:    string or sequence of characters and Control members
    :return:        symbol value 0-102"""
        return mod103(self._data_symbols(self.check_data(data)))

    def symbols(self, data):
        """Symbol values of data: start, data, check and stop symbols

    :param data:    string or sequence of characters and Control members
    :return:        list of integers"""
        return self._symbols(self.check_data(data))

    def _symbols(self, data):
        codes = self._data_symbols(data)
        codes.append(mod103(codes))
        codes.append(self.stop_value)
        return codes

    def describe(self, data):
        """Human readable form of the start, switch and data symbols

    For example ``{START_C}(01)(23){CODE_B}A``.

    :param data:    string or sequence of characters and Control members
    :return:        str"""
        data = self.check_data(data)
        charsets = self.charset_map(data)
        current = charsets[0]
        parts = ["{" + self.start_controls[current].value + "}"]
        i = 0
        while i < len(data):
            if charsets[i] != current:
                current = charsets[i]
                parts.append("{" + self.switch[current].value + "}")
            symbol = data[i]
            if current == "C" and self._is_digit(symbol):
                parts.append("({}{})".format(symbol, data[i + 1]))
                i += 2
                continue
            if isinstance(symbol, Control):
                parts.append("{" + symbol.value + "}")
            elif ord(symbol) < 32:
                parts.append("{" + LOW_ASCII[ord(symbol)] + "}")
            elif ord(symbol) == 127:
                parts.append("{DEL}")
            else:
                parts.append(symbol)
            i += 1
        description = "".join(parts)
        logger.debug("Code128 symbols: %s", description)
        return description

    def _bars(self, text):
        codes = self._symbols(text)
        for code in codes[:-1]:
            yield from self.bits(self.pattern[code], self.code_bitlength)
        yield from self.bits(self.stop, 13)
