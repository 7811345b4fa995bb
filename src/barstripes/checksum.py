"""Check digit algorithms shared by the encoders.

Every function takes the symbol values of the data (digits, alphabet
positions or Code128 symbol values) and returns an integer. Mapping
characters to values and values back to characters is left to the encoder,
which also checks the data before calling in here.
"""
from itertools import cycle


def weighted_mod10(values, weights=(3, 1)):
    """Modulo 10 check digit used by EAN, UPC and the 2 of 5 family

    Weights are applied from the rightmost value to the left, starting
    with the first weight.

    :param values:      sequence of digit values
    :param weights:     weights cycled from the right
    :return:            check digit 0-9"""
    checksum = 0
    for value, weight in zip(reversed(values), cycle(weights)):
        checksum += value * weight
    return -checksum % 10


def weighted_mod10_3_9(values):
    """Check digit of the 5 digit UPC supplement, not complemented"""
    checksum = 0
    for value, weight in zip(reversed(values), cycle((3, 9))):
        checksum += value * weight
    return checksum % 10


def digit_sum_mod10(values):
    """PostNet check digit, the plain sum of digits"""
    return -sum(values) % 10


def mod4(values):
    """Check value of the 2 digit UPC supplement"""
    number = 0
    for value in values:
        number = number * 10 + value
    return number % 4


def mod43(values):
    """Code39 check character position"""
    return sum(values) % 43


def cyclic_weighted_sum(values, max_weight):
    """Sum of values weighted 1, 2, .. max_weight, 1, 2, .. from the right"""
    checksum = 0
    for index, value in enumerate(reversed(values)):
        checksum += value * (index % max_weight + 1)
    return checksum


def mod47_pair(values):
    """Code93 "C" and "K" check character positions

    :param values:      alphabet positions (0-46) of the data
    :return:            tuple of two positions"""
    check_c = cyclic_weighted_sum(values, 20) % 47
    check_k = cyclic_weighted_sum(list(values) + [check_c], 15) % 47
    return check_c, check_k


def code11_mod11(values, max_weight=10):
    """Code11 check digit, 10 stands for the dash

    The first check digit uses weights up to 10, the second one (computed
    over data and first digit) weights up to 9."""
    return cyclic_weighted_sum(values, max_weight) % 11


def plessey_mod10(values):
    """Luhn-like modulo 10 check digit of MSI Plessey

    Values at odd positions counted from the right are written one after
    another as a decimal number, which is doubled. Digits of the product
    are added to the remaining values."""
    parity = len(values) % 2
    doubled = "".join(str(value) for value in values[1 - parity::2])
    checksum = sum(values[parity::2])
    if doubled:
        checksum += sum(int(digit) for digit in str(int(doubled) * 2))
    return -checksum % 10


def plessey_mod11(values):
    """Modulo 11 check value of MSI Plessey, weights 2-7 from the right

    :return:    0-10, 10 is written as "A" by the encoder"""
    checksum = 0
    for value, weight in zip(reversed(values), cycle(range(2, 8))):
        checksum += value * weight
    return -checksum % 11


def mod103(values):
    """Code128 check symbol over the start symbol and data symbols

    Start symbol and the first data symbol both have weight 1, the
    following symbols 2, 3, ...

    :param values:      symbol values beginning with the start symbol
    :return:            symbol value 0-102"""
    checksum = 0
    for i, n in enumerate(values):
        checksum += n * max([1, i])
    return checksum % 103


def codabar_mod10(values):
    """Optional, reader specific Codabar check digit

    Weights 2, 1, 2, .. from the left; a weighted value of 10 or more
    loses 9."""
    checksum = 0
    for value, weight in zip(values, cycle((2, 1))):
        value *= weight
        if value >= 10:
            value -= 9
        checksum += value
    return -checksum % 10
