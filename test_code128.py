import pytest

from barstripes import Code128, Control, InvalidCharacter, InvalidLength


def test_digits_use_charset_c():
    code128 = Code128()
    assert code128.symbols("0123456789") == [105, 1, 23, 45, 67, 89, 73, 106]
    assert code128.describe("0123456789") == "{START_C}(01)(23)(45)(67)(89)"
    assert code128.check_digit("0123456789") == 73
    assert len(code128.encode("0123456789")) == 7 * 11 + 13


def test_charset_b():
    code128 = Code128()
    assert code128.symbols("abc") == [104, 65, 66, 67, 90, 106]
    assert code128.describe("abc") == "{START_B}abc"


def test_charset_a():
    assert Code128().symbols("AB\x01")[:4] == [103, 33, 34, 65]
    assert Code128().describe("AB\x01") == "{START_A}AB{SOH}"


def test_digits_at_start():
    assert Code128().describe("0123A") == "{START_C}(01)(23){CODE_A}A"
    assert Code128().symbols("0123A") == [105, 1, 23, 101, 33, 72, 106]
    # odd run leaves its last digit
    assert Code128().describe("12345AB") == "{START_C}(12)(34){CODE_A}5AB"
    # too short to be worth it
    assert Code128().describe("123AB") == "{START_A}123AB"


def test_digits_inside():
    assert Code128().describe("AB123456cd") == \
        "{START_A}AB{CODE_C}(12)(34)(56){CODE_B}cd"
    # odd run leaves its first digit
    assert Code128().describe("AB1234567cd") == \
        "{START_A}AB1{CODE_C}(23)(45)(67){CODE_B}cd"
    # five digits aren't packed, B covers everything
    assert Code128().describe("AB12345cd") == "{START_B}AB12345cd"


def test_digits_at_end():
    assert Code128().describe("AB1234") == "{START_A}AB{CODE_C}(12)(34)"
    assert Code128().describe("AB12345") == "{START_A}AB1{CODE_C}(23)(45)"


def test_odd_number_of_digits():
    assert Code128().describe("12345") == "{START_C}(12)(34){CODE_A}5"


def test_choose_longer_run():
    assert Code128().describe("a\x01") == "{START_B}a{CODE_A}{SOH}"
    assert Code128().describe("Ab\x01\x02C") == \
        "{START_B}Ab{CODE_A}{SOH}{STX}C"


def test_fnc1():
    code128 = Code128()
    assert code128.describe([Control.FNC1, "0", "1"]) == "{START_C}{FNC1}(01)"
    assert code128.symbols([Control.FNC1, "0", "1"]) == [105, 102, 1, 3, 106]
    assert code128.describe(["A", Control.FNC4, "b"]) == "{START_B}A{FNC4}b"
    assert code128.symbols(["A", Control.FNC4, "b"])[:4] == [104, 33, 100, 66]


def test_errors():
    code128 = Code128()
    with pytest.raises(InvalidCharacter):
        code128.encode("café")
    with pytest.raises(InvalidCharacter):
        code128.encode(["A", Control.CODE_B, "b"])
    with pytest.raises(InvalidCharacter):
        code128.encode(42)
    with pytest.raises(InvalidLength):
        code128.encode("")
    assert not code128.validate("é")
    assert code128.validate("Hello, World!")


def test_stop_pattern():
    assert Code128().encode("abc").endswith("1100011101011")


def test_shift():
    code128 = Code128()
    # the shifted character is written with the other set's value
    symbols = code128.symbols(["A", "b", Control.SHIFT, "\x01", "c"])
    assert symbols == [104, 33, 66, 98, 65, 67, 25, 106]
    assert code128.describe(["A", "b", Control.SHIFT, "\x01", "c"]) == \
        "{START_B}Ab{SHIFT}{SOH}c"
    assert code128.symbols(["A", Control.SHIFT, "b"]) == \
        [103, 33, 98, 66, 15, 106]
    # no switch between SHIFT and its character
    assert code128.symbols(["a", Control.SHIFT, "b"]) == \
        [104, 65, 101, 98, 66, 2, 106]
    assert code128.describe(["a", Control.SHIFT, "b"]) == \
        "{START_B}a{CODE_A}{SHIFT}b"


def test_shift_needs_character():
    code128 = Code128()
    with pytest.raises(InvalidCharacter):
        code128.encode(["A", Control.SHIFT])
    with pytest.raises(InvalidCharacter):
        code128.encode(["A", Control.SHIFT, Control.FNC1, "b"])
    assert not code128.validate([Control.SHIFT])
