from barstripes.checksum import (
    code11_mod11,
    codabar_mod10,
    digit_sum_mod10,
    mod4,
    mod43,
    mod47_pair,
    mod103,
    plessey_mod10,
    plessey_mod11,
    weighted_mod10,
    weighted_mod10_3_9,
)


def digits(text):
    return [int(char) for char in text]


def test_weighted_mod10():
    assert weighted_mod10(digits("750105453010")) == 7
    assert weighted_mod10(digits("590123412345")) == 7
    assert weighted_mod10(digits("9638507")) == 4
    assert weighted_mod10(digits("003600029145")) == 2
    assert weighted_mod10(digits("0")) == 0


def test_weighted_mod10_3_9():
    assert weighted_mod10_3_9(digits("52495")) == 1
    assert weighted_mod10_3_9(digits("00000")) == 0


def test_digit_sum_mod10():
    assert digit_sum_mod10(digits("12345")) == 5
    assert digit_sum_mod10(digits("55555")) == 5
    assert digit_sum_mod10(digits("19")) == 0


def test_mod4():
    assert mod4(digits("12")) == 0
    assert mod4(digits("07")) == 3
    assert mod4(digits("99")) == 3


def test_mod43():
    # C O D E 3 9
    assert mod43([12, 24, 13, 14, 3, 9]) == 32


def test_mod47_pair():
    # T E S T 9 3
    assert mod47_pair([29, 14, 28, 29, 9, 3]) == (41, 6)
    # C weights wrap after 20 symbols, K weights after 15
    assert mod47_pair([1] * 21) == (23, 29)


def test_code11_mod11():
    assert code11_mod11([1, 2, 3, 10, 4, 5, 3]) == 0
    assert code11_mod11(list(range(10))) == 0
    assert code11_mod11(list(range(10)) + [0], 9) == 3
    # weights wrap after 10 and 9 characters
    assert code11_mod11([1] * 11) == 1
    assert code11_mod11([1] * 12, 9) == 7


def test_plessey_mod10():
    assert plessey_mod10(digits("1234567")) == 4
    assert plessey_mod10(digits("1")) == 8
    assert plessey_mod10(digits("12345674")) == 1


def test_plessey_mod11():
    assert plessey_mod11(digits("1234567")) == 4
    for number in range(10000, 20000):
        assert 0 <= plessey_mod11(digits(str(number))) <= 10


def test_mod103():
    assert mod103([105, 1, 23, 45, 67, 89]) == 73
    assert mod103([104, 65, 66, 67]) == 90


def test_codabar_mod10():
    assert codabar_mod10([4, 0, 1, 5, 6]) == 2
